"""
CPU accounting from ``/proc/stat``.
"""

import logging
from dataclasses import fields
from pathlib import Path
from typing import Union

from ..models.records import CpuAccounting, CpuAccountingList
from .lines import parse_uint, read_file

logger = logging.getLogger(__name__)

AGGREGATE_CPU_PREFIX = "cpu "
BOOT_TIME_KEY = "btime"

# Column order of a cpu line after its label
_CPU_FIELDS = [f.name for f in fields(CpuAccounting)]


def parse_cpu_stat(line: str) -> CpuAccounting:
    """Decode a ``cpu``/``cpuN`` line into tick counters.

    Counters missing from a short line, or that fail to parse, stay 0.
    Columns past ``steal`` (guest time) are ignored.
    """
    columns = line.split()[1:]
    cpu = CpuAccounting()
    for name, value in zip(_CPU_FIELDS, columns):
        setattr(cpu, name, parse_uint(value))
    return cpu


def _is_core_line(line: str) -> bool:
    label = line.partition(" ")[0]
    return label.startswith("cpu") and label[3:].isdigit()


def get_cpu(procd: Union[str, Path]) -> CpuAccounting:
    """Read the aggregate ``cpu`` line of ``<procd>/stat``.

    Returns zero counters if the line is absent.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    cpu = CpuAccounting()

    def visit(line: str) -> bool:
        nonlocal cpu
        if line.startswith(AGGREGATE_CPU_PREFIX):
            cpu = parse_cpu_stat(line)
            return False
        return True

    read_file(Path(procd) / "stat", visit)
    return cpu


def get_cpu_list(procd: Union[str, Path]) -> CpuAccountingList:
    """Read every per-core ``cpuN`` line of ``<procd>/stat``, in order."""
    cpu_list = CpuAccountingList()

    def visit(line: str) -> bool:
        if _is_core_line(line):
            cpu_list.cpus.append(parse_cpu_stat(line))
        return True

    read_file(Path(procd) / "stat", visit)
    return cpu_list


def get_boot_time(procd: Union[str, Path]) -> int:
    """Boot time in seconds since the epoch, from the ``btime`` line.

    Returns 0 if the line is absent or unparseable.
    """
    boot_time = 0

    def visit(line: str) -> bool:
        nonlocal boot_time
        columns = line.split()
        if columns and columns[0] == BOOT_TIME_KEY:
            if len(columns) > 1:
                boot_time = parse_uint(columns[1])
            return False
        return True

    read_file(Path(procd) / "stat", visit)
    return boot_time
