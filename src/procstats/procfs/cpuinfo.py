"""
Per-core topology parsing for ``/proc/cpuinfo``.

``/proc/cpuinfo`` lists every logical processor as a block of ``key : value``
lines introduced by a ``processor`` line. ``CpuInfoParser`` groups those
lines into records with a two-state machine:

- ``NO_RECORD`` (initial): no ``processor`` line seen yet; field lines are
  ignored.
- ``RECORD_OPEN``: a record is being filled. The next ``processor`` line
  closes it into the output and opens a new one.

``finish()`` closes the last open record, so the final processor is kept
whether or not the file ends with a blank line.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Union

from ..models.records import CpuTopologyRecord
from .lines import (
    parse_flag,
    parse_float,
    parse_int,
    read_file,
    split_key_value,
    strip_suffix_int,
)

logger = logging.getLogger(__name__)

PROCESSOR_KEY = "processor"
ADDRESS_SIZES_SEPARATOR = ", "
PHYSICAL_BITS_SUFFIX = " bits physical"
VIRTUAL_BITS_SUFFIX = " bits virtual"
CACHE_SIZE_SUFFIX = " KB"


def parse_address_sizes(value: str) -> Tuple[int, int]:
    """Parse ``"46 bits physical, 48 bits virtual"`` into ``(46, 48)``.

    A half that is missing or fails to parse stays 0.
    """
    parts = value.split(ADDRESS_SIZES_SEPARATOR)
    physical = strip_suffix_int(parts[0], PHYSICAL_BITS_SUFFIX)
    virtual = 0
    if len(parts) > 1:
        virtual = strip_suffix_int(parts[1], VIRTUAL_BITS_SUFFIX)
    return physical, virtual


def _setter(attr: str, decode: Callable[[str], object]) -> Callable[[CpuTopologyRecord, str], None]:
    def apply(record: CpuTopologyRecord, value: str) -> None:
        setattr(record, attr, decode(value))
    return apply


def _text(value: str) -> str:
    return value


def _tokens(value: str) -> List[str]:
    return value.split()


# cpuinfo key -> how it updates the open record
FIELD_SETTERS: Dict[str, Callable[[CpuTopologyRecord, str], None]] = {
    "vendor_id": _setter("vendor_id", _text),
    "cpu family": _setter("cpu_family", parse_int),
    "model": _setter("model", parse_int),
    "model name": _setter("model_name", _text),
    "stepping": _setter("stepping", parse_int),
    "microcode": _setter("microcode", _text),
    "cpu MHz": _setter("cpu_mhz", parse_float),
    "cache size": _setter("cache_size", lambda v: strip_suffix_int(v, CACHE_SIZE_SUFFIX)),
    "physical id": _setter("physical_id", parse_int),
    "siblings": _setter("siblings", parse_int),
    "core id": _setter("core_id", parse_int),
    "cpu cores": _setter("cpu_cores", parse_int),
    "apicid": _setter("apicid", parse_int),
    "initial apicid": _setter("initial_apicid", parse_int),
    "fpu": _setter("fpu", parse_flag),
    "fpu_exception": _setter("fpu_exception", parse_flag),
    "cpuid level": _setter("cpuid_level", parse_int),
    "wp": _setter("wp", parse_flag),
    "flags": _setter("flags", _tokens),
    "bugs": _setter("bugs", _tokens),
    "bogomips": _setter("bogomips", parse_float),
    "clflush size": _setter("clflush_size", parse_int),
    "cache_alignment": _setter("cache_alignment", parse_int),
    "address sizes": _setter("address_sizes", parse_address_sizes),
    "power management": _setter("power_management", _tokens),
}


class ParserState(Enum):
    """States of the cpuinfo record grouping machine."""
    NO_RECORD = "no_record"
    RECORD_OPEN = "record_open"


class CpuInfoParser:
    """
    Groups cpuinfo lines into one CpuTopologyRecord per ``processor`` marker.

    Feed lines with ``feed()`` (usable directly as a read_file visitor), then
    call ``finish()`` to flush the last record and get the result.
    """

    def __init__(self):
        self.state = ParserState.NO_RECORD
        self.records: List[CpuTopologyRecord] = []
        self._current: Optional[CpuTopologyRecord] = None

    def feed(self, line: str) -> bool:
        """Consume one line. Always asks the line source to continue."""
        pair = split_key_value(line)
        if pair is None:
            return True
        key, value = pair

        if key == PROCESSOR_KEY:
            self._open_record(parse_int(value))
            return True

        if self.state is ParserState.NO_RECORD:
            return True

        setter = FIELD_SETTERS.get(key)
        if setter is not None:
            setter(self._current, value)
        return True

    def finish(self) -> List[CpuTopologyRecord]:
        """Flush the open record, if any, and return all records in order."""
        if self.state is ParserState.RECORD_OPEN:
            self.records.append(self._current)
            self._current = None
            self.state = ParserState.NO_RECORD
        return self.records

    def _open_record(self, processor: int) -> None:
        if self.state is ParserState.RECORD_OPEN:
            self.records.append(self._current)
        self._current = CpuTopologyRecord(processor=processor)
        self.state = ParserState.RECORD_OPEN


def get_cpu_info_list(procd: Union[str, Path]) -> List[CpuTopologyRecord]:
    """Read ``<procd>/cpuinfo`` into one record per logical processor.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    parser = CpuInfoParser()
    read_file(Path(procd) / "cpuinfo", parser.feed)
    records = parser.finish()
    logger.debug(f"Parsed {len(records)} processor records from {procd}/cpuinfo")
    return records
