"""
procstats: typed resource-usage records from the Linux process filesystem.

The package is organized into specialized modules:
- config: Configuration loading and validation
- models: Record and configuration dataclasses
- validation: Value validation and error handling helpers
- procfs: Line-oriented readers for /proc files
- collectors: The capability interface, its procfs and scripted
  implementations, and the continuous CPU sampler

Usage:
    from procstats import ProcfsSigar
    sigar = ProcfsSigar()
    mem = sigar.get_mem()
    samples, stop = sigar.collect_cpu_stats(1.0)
    cpu = samples.get()
    stop.set()
"""

from .config import get_config, clear_config_cache, set_config_path

from .collectors import (
    AbstractSigar,
    CpuSampleStream,
    CpuStatsSampler,
    FakeSigar,
    ProcfsSigar,
)

from .models import (
    AppConfig,
    ProcfsConfig,
    SamplerConfig,
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

from .validation import ValidationError

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "get_config",
    "clear_config_cache",
    "set_config_path",
    "AppConfig",
    "ProcfsConfig",
    "SamplerConfig",
    # Gatherers
    "AbstractSigar",
    "CpuSampleStream",
    "CpuStatsSampler",
    "FakeSigar",
    "ProcfsSigar",
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
    # Errors
    "ValidationError",
]
