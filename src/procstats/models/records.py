"""
Resource-usage record types.

Every record is a plain value type populated from a single read of a kernel
pseudo-file (or, for uptime, a single system query). Fields default to their
zero value; a field that could not be decoded keeps that default.
"""

from dataclasses import dataclass, field, fields
from typing import List, Tuple


@dataclass
class CpuAccounting:
    """
    Cumulative CPU tick counters since boot for one CPU, or for the aggregate
    ``cpu`` line of ``/proc/stat``.
    """

    user: int = 0
    nice: int = 0
    sys: int = 0
    idle: int = 0
    wait: int = 0
    irq: int = 0
    soft_irq: int = 0
    stolen: int = 0

    def total(self) -> int:
        """Sum of all counters."""
        return sum(getattr(self, f.name) for f in fields(self))

    def to_seconds(self, clock_ticks: int) -> "CpuTimes":
        """Convert tick counters to seconds using the kernel's USER_HZ."""
        return CpuTimes(
            **{f.name: getattr(self, f.name) / clock_ticks for f in fields(self)}
        )


@dataclass
class CpuTimes:
    """CpuAccounting counters expressed in seconds."""

    user: float = 0.0
    nice: float = 0.0
    sys: float = 0.0
    idle: float = 0.0
    wait: float = 0.0
    irq: float = 0.0
    soft_irq: float = 0.0
    stolen: float = 0.0


@dataclass
class CpuAccountingList:
    """Per-core CpuAccounting entries, in the order the kernel lists them."""

    cpus: List[CpuAccounting] = field(default_factory=list)


@dataclass
class CpuTopologyRecord:
    """
    Topology and identification data for one logical processor, as listed in
    ``/proc/cpuinfo``.
    """

    processor: int = 0
    vendor_id: str = ""
    cpu_family: int = 0
    model: int = 0
    model_name: str = ""
    stepping: int = 0
    microcode: str = ""
    cpu_mhz: float = 0.0
    # Cache size in KB
    cache_size: int = 0
    physical_id: int = 0
    siblings: int = 0
    core_id: int = 0
    cpu_cores: int = 0
    apicid: int = 0
    initial_apicid: int = 0
    fpu: bool = False
    fpu_exception: bool = False
    cpuid_level: int = 0
    wp: bool = False
    flags: List[str] = field(default_factory=list)
    bugs: List[str] = field(default_factory=list)
    bogomips: float = 0.0
    clflush_size: int = 0
    cache_alignment: int = 0
    # (physical bits, virtual bits)
    address_sizes: Tuple[int, int] = (0, 0)
    power_management: List[str] = field(default_factory=list)


@dataclass
class MemoryRecord:
    """
    System memory totals in bytes.

    ``actual_free`` is the kernel's MemAvailable estimate when reported,
    otherwise free + buffers + cached.
    """

    total: int = 0
    free: int = 0
    used: int = 0
    actual_free: int = 0
    actual_used: int = 0


@dataclass
class SwapRecord:
    """Swap totals in bytes."""

    total: int = 0
    free: int = 0
    used: int = 0


@dataclass
class HugePagesRecord:
    """
    Huge page pool counters. ``default_size`` and ``total_allocated_size``
    are in bytes; the rest are page counts.
    """

    total: int = 0
    free: int = 0
    reserved: int = 0
    surplus: int = 0
    default_size: int = 0
    total_allocated_size: int = 0


@dataclass
class UptimeRecord:
    """Seconds since boot."""

    length: float = 0.0


@dataclass
class LoadAverage:
    """1, 5 and 15 minute run-queue load averages."""

    one: float = 0.0
    five: float = 0.0
    fifteen: float = 0.0


@dataclass
class FileDescriptorUsage:
    """System-wide file handle usage from ``/proc/sys/fs/file-nr``."""

    open: int = 0
    unused: int = 0
    max: int = 0


@dataclass
class ProcessFileDescriptorUsage:
    """Open descriptor count and RLIMIT_NOFILE limits for one process."""

    open: int = 0
    soft_limit: int = 0
    hard_limit: int = 0
