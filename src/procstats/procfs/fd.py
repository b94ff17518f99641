"""
File descriptor usage, system-wide and per process.
"""

import logging
import os
from pathlib import Path
from typing import Union

from ..models.records import FileDescriptorUsage, ProcessFileDescriptorUsage
from ..validation import ErrorSeverity, handle_file_error
from .lines import parse_uint, read_file

logger = logging.getLogger(__name__)

OPEN_FILES_LABEL = "Max open files"


def get_fd_usage(procd: Union[str, Path]) -> FileDescriptorUsage:
    """Read ``<procd>/sys/fs/file-nr``.

    Only the first line is read; it must hold exactly three columns
    (allocated, unused, maximum), otherwise the record stays zero.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    usage = FileDescriptorUsage()

    def visit(line: str) -> bool:
        columns = line.split()
        if len(columns) == 3:
            usage.open = parse_uint(columns[0])
            usage.unused = parse_uint(columns[1])
            usage.max = parse_uint(columns[2])
        return False

    read_file(Path(procd) / "sys" / "fs" / "file-nr", visit)
    return usage


def get_proc_fd_usage(pid: int, procd: Union[str, Path]) -> ProcessFileDescriptorUsage:
    """Descriptor limits and open descriptor count of process ``pid``.

    Limits come from the ``Max open files`` row of ``<procd>/<pid>/limits``;
    an ``unlimited`` limit reads as 0. The open count is the number of
    entries in ``<procd>/<pid>/fd``.

    Raises:
        OSError: If the limits file cannot be read or the fd directory
            cannot be listed. No partial record is returned.
    """
    process_dir = Path(procd) / str(pid)
    usage = ProcessFileDescriptorUsage()

    def visit(line: str) -> bool:
        if not line.startswith(OPEN_FILES_LABEL):
            return True
        # Max open files  <soft>  <hard>  files
        columns = line.split()
        if len(columns) == 6:
            usage.soft_limit = parse_uint(columns[3])
            usage.hard_limit = parse_uint(columns[4])
        return False

    read_file(process_dir / "limits", visit)

    fd_dir = process_dir / "fd"
    try:
        usage.open = len(os.listdir(fd_dir))
    except OSError as e:
        handle_file_error(
            error=e,
            context=f"listing {fd_dir}",
            severity=ErrorSeverity.WARNING,
            reraise=True,
            logger=logger,
        )
        raise

    return usage
