"""
System uptime.

Uptime comes from a system query rather than a procfs file, so it ignores
the configured procfs root.
"""

import logging
import time

import psutil

from ..models.records import UptimeRecord
from ..validation import ErrorSeverity, handle_error

logger = logging.getLogger(__name__)


def get_uptime() -> UptimeRecord:
    """Seconds elapsed since boot.

    Raises:
        OSError: If the boot time cannot be queried.
    """
    try:
        boot_time = psutil.boot_time()
    except OSError as e:
        handle_error(
            error=e,
            context="querying boot time",
            severity=ErrorSeverity.WARNING,
            reraise=True,
            logger=logger,
        )
        raise
    return UptimeRecord(length=max(0.0, time.time() - boot_time))
