"""
System information gatherer backed by the process information filesystem.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..config import get_config
from ..models.config import AppConfig
from ..models.records import (
    CpuAccounting,
    CpuAccountingList,
    CpuTimes,
    CpuTopologyRecord,
    FileDescriptorUsage,
    HugePagesRecord,
    LoadAverage,
    MemoryRecord,
    ProcessFileDescriptorUsage,
    SwapRecord,
    UptimeRecord,
)
from .. import procfs
from .base import AbstractSigar, CpuSampleStream
from .sampler import CpuStatsSampler

logger = logging.getLogger(__name__)


class ProcfsSigar(AbstractSigar):
    """
    Reads resource usage records from a procfs mount.

    All reads are synchronous and keep no state between calls, so one
    instance can be shared by several threads.
    """

    def __init__(
        self,
        procd: Optional[Union[str, Path]] = None,
        config: Optional[AppConfig] = None,
    ):
        """
        Args:
            procd: procfs root; defaults to the configured ``procfs.root``.
            config: Application configuration; defaults to ``get_config()``.
        """
        self.config = config or get_config()
        self.procd = Path(procd) if procd is not None else self.config.procfs.root
        self.samplers: List[CpuStatsSampler] = []
        logger.debug(f"ProcfsSigar reading from {self.procd}")

    # --- Capability interface ---

    def get_load_average(self) -> LoadAverage:
        return procfs.get_load_average(self.procd)

    def get_mem(self) -> MemoryRecord:
        return procfs.get_mem(self.procd)

    def collect_cpu_stats(self, collection_interval: Optional[float] = None) -> CpuSampleStream:
        """
        Start a background CpuStatsSampler over ``<procd>/stat``.

        Args:
            collection_interval: Seconds between samples; defaults to
                ``sampler.interval_seconds``.
        """
        if collection_interval is None:
            collection_interval = self.config.sampler.interval_seconds
        self.samplers = [s for s in self.samplers if s.running]
        sampler = CpuStatsSampler(
            acquire=self.get_cpu,
            interval=collection_interval,
            overflow_policy=self.config.sampler.overflow_policy,
        )
        sampler.start()
        self.samplers.append(sampler)
        return CpuSampleStream(samples=sampler.samples, stop=sampler.stop_event)

    def stop_all(self) -> None:
        """Stop every sampler started by this instance and wait for them."""
        for sampler in self.samplers:
            sampler.stop(timeout=self.config.sampler.stop_timeout)
        self.samplers.clear()

    # --- Single-snapshot readers ---

    def get_cpu(self) -> CpuAccounting:
        return procfs.get_cpu(self.procd)

    def get_cpu_times(self) -> CpuTimes:
        """Aggregate CPU time in seconds, using the configured ``procfs.clock_ticks``."""
        return self.get_cpu().to_seconds(self.config.procfs.clock_ticks)

    def get_cpu_list(self) -> CpuAccountingList:
        return procfs.get_cpu_list(self.procd)

    def get_cpu_info_list(self) -> List[CpuTopologyRecord]:
        return procfs.get_cpu_info_list(self.procd)

    def get_swap(self) -> SwapRecord:
        return procfs.get_swap(self.procd)

    def get_huge_pages(self) -> HugePagesRecord:
        return procfs.get_huge_pages(self.procd)

    def get_fd_usage(self) -> FileDescriptorUsage:
        return procfs.get_fd_usage(self.procd)

    def get_proc_fd_usage(self, pid: int) -> ProcessFileDescriptorUsage:
        return procfs.get_proc_fd_usage(pid, self.procd)

    def get_uptime(self) -> UptimeRecord:
        return procfs.get_uptime()

    def get_boot_time(self) -> int:
        return procfs.get_boot_time(self.procd)
