"""
Load average from ``/proc/loadavg``.
"""

from pathlib import Path
from typing import Union

from ..models.records import LoadAverage
from .lines import parse_float, read_file


def get_load_average(procd: Union[str, Path]) -> LoadAverage:
    """Read the 1, 5 and 15 minute load averages.

    Missing or malformed columns stay 0.0.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    load = LoadAverage()

    def visit(line: str) -> bool:
        columns = line.split()
        for name, value in zip(("one", "five", "fifteen"), columns):
            setattr(load, name, parse_float(value))
        return False

    read_file(Path(procd) / "loadavg", visit)
    return load
