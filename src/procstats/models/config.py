"""
Configuration data models.

This module contains the configuration structures for the procfs readers
and the continuous CPU sampler.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ProcfsConfig:
    """
    Where and how kernel pseudo-files are read, loaded from `[procfs]`.
    """

    # Mount point of the process information filesystem.
    root: Path = Path("/proc")
    # USER_HZ, the unit of the tick counters in /proc/stat.
    clock_ticks: int = 100


@dataclass
class SamplerConfig:
    """
    Continuous CPU sampler settings, loaded from `[sampler]`.
    """

    # Seconds between two samples.
    interval_seconds: float = 1.0
    # What to do when the consumer has not drained the previous sample:
    # "drop_new" discards the new sample, "replace" discards the pending one.
    overflow_policy: str = "drop_new"
    # Seconds to wait for the sampler thread to exit on stop().
    stop_timeout: float = 5.0


@dataclass
class AppConfig:
    """
    The root configuration object that aggregates all loaded settings.
    """

    procfs: ProcfsConfig
    sampler: SamplerConfig
