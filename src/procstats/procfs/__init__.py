"""
Readers for the Linux process information filesystem.

Every ``get_*`` function takes the procfs root explicitly, performs one
synchronous pass over its source file and returns a record. I/O failures
raise OSError; fields that fail to decode are left at zero.
"""

from .cpuinfo import CpuInfoParser, ParserState, get_cpu_info_list, parse_address_sizes
from .fd import get_fd_usage, get_proc_fd_usage
from .lines import read_file
from .loadavg import get_load_average
from .memory import (
    get_huge_pages,
    get_mem,
    get_swap,
    huge_pages_from_table,
    memory_from_table,
    swap_from_table,
)
from .stat import get_boot_time, get_cpu, get_cpu_list, parse_cpu_stat
from .table import parse_meminfo, parse_table
from .uptime import get_uptime

__all__ = [
    # Line source and tables
    "read_file",
    "parse_table",
    "parse_meminfo",
    # CPU
    "CpuInfoParser",
    "ParserState",
    "get_cpu_info_list",
    "parse_address_sizes",
    "get_cpu",
    "get_cpu_list",
    "get_boot_time",
    "parse_cpu_stat",
    # Memory
    "get_mem",
    "get_swap",
    "get_huge_pages",
    "memory_from_table",
    "swap_from_table",
    "huge_pages_from_table",
    # Descriptors
    "get_fd_usage",
    "get_proc_fd_usage",
    # Misc
    "get_load_average",
    "get_uptime",
]
