"""
Memory, swap and huge page records derived from ``/proc/meminfo``.

The ``*_from_table`` functions hold the arithmetic and work on an already
parsed table; the ``get_*`` functions read the file first.
"""

import logging
from pathlib import Path
from typing import Dict, Union

from ..models.records import HugePagesRecord, MemoryRecord, SwapRecord
from .table import parse_meminfo

logger = logging.getLogger(__name__)


def memory_from_table(table: Dict[str, int]) -> MemoryRecord:
    """Build a MemoryRecord; missing entries count as zero."""
    total = table.get("MemTotal", 0)
    free = table.get("MemFree", 0)
    buffers = table.get("Buffers", 0)
    cached = table.get("Cached", 0)

    if "MemAvailable" in table:
        # Reported by kernels 3.14 and later
        actual_free = table["MemAvailable"]
    else:
        actual_free = free + buffers + cached

    return MemoryRecord(
        total=total,
        free=free,
        used=total - free,
        actual_free=actual_free,
        actual_used=total - actual_free,
    )


def swap_from_table(table: Dict[str, int]) -> SwapRecord:
    total = table.get("SwapTotal", 0)
    free = table.get("SwapFree", 0)
    return SwapRecord(total=total, free=free, used=total - free)


def huge_pages_from_table(table: Dict[str, int]) -> HugePagesRecord:
    """Build a HugePagesRecord.

    Without a ``Hugetlb`` entry the allocated size is estimated from the
    default page size, which is inaccurate when pages of several sizes are
    in use.
    """
    record = HugePagesRecord(
        total=table.get("HugePages_Total", 0),
        free=table.get("HugePages_Free", 0),
        reserved=table.get("HugePages_Rsvd", 0),
        surplus=table.get("HugePages_Surp", 0),
        default_size=table.get("Hugepagesize", 0),
    )

    if "Hugetlb" in table:
        record.total_allocated_size = table["Hugetlb"]
    else:
        # TODO: read per-size pools from /sys/kernel/mm/hugepages instead
        record.total_allocated_size = (
            record.total - record.free + record.reserved
        ) * record.default_size

    return record


def get_mem(procd: Union[str, Path]) -> MemoryRecord:
    """Read system memory totals from ``<procd>/meminfo``.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    return memory_from_table(parse_meminfo(procd))


def get_swap(procd: Union[str, Path]) -> SwapRecord:
    """Read swap totals from ``<procd>/meminfo``."""
    return swap_from_table(parse_meminfo(procd))


def get_huge_pages(procd: Union[str, Path]) -> HugePagesRecord:
    """Read huge page counters from ``<procd>/meminfo``."""
    return huge_pages_from_table(parse_meminfo(procd))
