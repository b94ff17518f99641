"""
Key-value table parsing for ``/proc/meminfo``-style files.
"""

import logging
from pathlib import Path
from typing import Dict, Union

from .lines import read_file, split_key_value

logger = logging.getLogger(__name__)

# Unit suffix of kilobyte-valued entries, scaled to bytes.
KB_SUFFIX = " kB"


def parse_table(path: Union[str, Path]) -> Dict[str, int]:
    """Parse ``key: value [kB]`` lines into a mapping of byte/count values.

    Lines that are not ``key: value`` shaped, and values that are not
    unsigned integers, are skipped: the key is simply absent from the result.

    Args:
        path: Table file to read.

    Returns:
        Mapping from key to value; ``kB`` values are converted to bytes.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    table: Dict[str, int] = {}

    def visit(line: str) -> bool:
        pair = split_key_value(line)
        if pair is None:
            return True
        key, value = pair

        multiplier = 1
        if value.endswith(KB_SUFFIX):
            value = value[: -len(KB_SUFFIX)].strip()
            multiplier = 1024

        if not (value.isascii() and value.isdigit()):
            logger.debug(f"Skipping {key!r} in {path}: unparseable value {value!r}")
            return True

        table[key] = int(value) * multiplier
        return True

    read_file(path, visit)
    return table


def parse_meminfo(procd: Union[str, Path]) -> Dict[str, int]:
    """Parse ``<procd>/meminfo``."""
    return parse_table(Path(procd) / "meminfo")
