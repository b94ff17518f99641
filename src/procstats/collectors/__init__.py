"""
System information gatherers and the continuous CPU sampler.
"""

from .base import AbstractSigar, CpuSampleStream
from .fake import FakeSigar
from .procfs_sigar import ProcfsSigar
from .sampler import DROP_NEW, REPLACE, CpuStatsSampler

__all__ = [
    "AbstractSigar",
    "CpuSampleStream",
    "CpuStatsSampler",
    "DROP_NEW",
    "REPLACE",
    "FakeSigar",
    "ProcfsSigar",
]
