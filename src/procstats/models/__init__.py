"""
Data models for the procstats package.

Configuration Models:
- procfs location and clock tick rate
- continuous sampler interval and overflow policy

Record Models:
- CPU accounting counters, aggregate and per core
- per-core CPU topology
- memory, swap and huge page totals
- uptime and load average
- system-wide and per-process file descriptor usage

All models are dataclasses with zero-valued defaults.
"""

from .config import AppConfig, ProcfsConfig, SamplerConfig

from .records import (
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

__all__ = [
    # Configuration
    "AppConfig",
    "ProcfsConfig",
    "SamplerConfig",
    # Records
    "CpuAccounting",
    "CpuAccountingList",
    "CpuTimes",
    "CpuTopologyRecord",
    "FileDescriptorUsage",
    "HugePagesRecord",
    "LoadAverage",
    "MemoryRecord",
    "ProcessFileDescriptorUsage",
    "SwapRecord",
    "UptimeRecord",
]
