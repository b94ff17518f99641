"""
Line-oriented access to kernel pseudo-files.

``read_file`` opens a file, feeds each line (without its trailing newline) to
a visitor, and closes the handle on every exit path. The visitor returns
``True`` to keep reading and ``False`` to stop early.

The ``parse_*`` helpers implement best-effort field decoding: they try a
typed parse and return the zero value when it fails, so a single malformed
field never aborts a whole record.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

from ..validation import ErrorSeverity, handle_file_error

logger = logging.getLogger(__name__)

LineVisitor = Callable[[str], bool]


def read_file(path: Union[str, Path], visitor: LineVisitor) -> None:
    """Feed every line of ``path`` to ``visitor`` until it returns False.

    Args:
        path: File to read.
        visitor: Called once per line; return False to stop reading.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for raw_line in f:
                if not visitor(raw_line.rstrip("\n")):
                    break
    except OSError as e:
        handle_file_error(
            error=e,
            context=f"reading {path}",
            severity=ErrorSeverity.WARNING,
            reraise=True,
            logger=logger,
        )
        raise


def split_key_value(line: str) -> Optional[Tuple[str, str]]:
    """Split a ``key : value`` line on its first colon.

    Returns:
        ``(key, value)`` stripped of surrounding whitespace, or None when the
        line has no colon or an empty key.
    """
    key, sep, value = line.partition(":")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip()


def parse_uint(value: str) -> int:
    """Parse an unsigned base-10 integer, or 0."""
    digits = value.strip() if isinstance(value, str) else ""
    if not (digits.isascii() and digits.isdigit()):
        logger.debug(f"Unparseable unsigned integer {value!r}, using 0")
        return 0
    return int(digits, 10)


def parse_int(value: str) -> int:
    """Parse a signed base-10 integer, or 0."""
    text = value.strip() if isinstance(value, str) else ""
    digits = text[1:] if text[:1] in ("-", "+") else text
    if not (digits.isascii() and digits.isdigit()):
        logger.debug(f"Unparseable integer {value!r}, using 0")
        return 0
    return int(text, 10)


def parse_float(value: str) -> float:
    """Parse a float, or 0.0."""
    try:
        return float(value.strip())
    except (ValueError, AttributeError):
        logger.debug(f"Unparseable float {value!r}, using 0.0")
        return 0.0


def parse_flag(value: str) -> bool:
    """cpuinfo style boolean: only ``yes`` is true."""
    return value.strip() == "yes"


def strip_suffix_int(value: str, suffix: str) -> int:
    """Parse ``value`` as an integer after removing a fixed unit suffix."""
    return parse_int(value.removesuffix(suffix))
