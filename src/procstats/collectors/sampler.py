"""
Continuous CPU sampler.

A single background thread acquires a CpuAccounting snapshot once per
interval and publishes it onto a one-slot queue without ever blocking.
"""

import logging
import math
import queue
import threading
import time
from typing import Callable, Optional

from ..models.records import CpuAccounting

logger = logging.getLogger(__name__)

DROP_NEW = "drop_new"
REPLACE = "replace"


class CpuStatsSampler:
    """
    Background producer of CPU accounting snapshots.

    The sampler:
    1. publishes one snapshot immediately after start
    2. then publishes one snapshot per interval
    3. exits the first time it sees the stop event between two ticks

    When the consumer has not taken the pending sample yet, the overflow
    policy decides which one is lost: ``drop_new`` discards the fresh
    sample, ``replace`` discards the pending one. Acquisition errors are
    logged and the tick is skipped; there is no error channel to the
    consumer.
    """

    def __init__(
        self,
        acquire: Callable[[], CpuAccounting],
        interval: float,
        overflow_policy: str = DROP_NEW,
        stop_event: Optional[threading.Event] = None,
    ):
        """
        Initialize the sampler.

        Args:
            acquire: Returns one fresh snapshot; may raise OSError.
            interval: Seconds between two samples.
            overflow_policy: ``drop_new`` or ``replace``.
            stop_event: Cancellation signal; a new event is created if omitted.
        """
        if not (interval > 0 and math.isfinite(interval)):
            raise ValueError(f"Sampling interval must be positive, got {interval}")
        if overflow_policy not in (DROP_NEW, REPLACE):
            raise ValueError(f"Unknown overflow policy: {overflow_policy}")

        self.acquire = acquire
        self.interval = interval
        self.overflow_policy = overflow_policy

        self.samples: "queue.Queue[CpuAccounting]" = queue.Queue(maxsize=1)
        self.stop_event = stop_event or threading.Event()
        self.thread: Optional[threading.Thread] = None

        self.samples_published = 0
        self.samples_dropped = 0
        self.ticks_failed = 0
        self.last_sample_time = 0.0

    @property
    def running(self) -> bool:
        return self.thread is not None and self.thread.is_alive()

    def start(self) -> None:
        """Start the sampling thread."""
        if self.running:
            logger.warning("CpuStatsSampler already running")
            return

        self.thread = threading.Thread(
            target=self.sampling_loop,
            name="CpuStatsSampler",
            daemon=True,
        )
        self.thread.start()
        logger.info(f"CpuStatsSampler started with {self.interval}s interval")

    def stop(self, timeout: float = 5.0) -> bool:
        """
        Signal the sampler to stop and wait for the thread to exit.

        Args:
            timeout: Seconds to wait for the thread.

        Returns:
            True if the thread has exited.
        """
        self.stop_event.set()

        if self.thread and self.thread.is_alive():
            self.thread.join(timeout=timeout)
            if self.thread.is_alive():
                logger.warning("CpuStatsSampler did not stop within timeout")
                return False
            logger.info("CpuStatsSampler stopped successfully")
        return True

    def sampling_loop(self) -> None:
        """Main loop: one tick now, then one per interval until stopped."""
        logger.debug("CpuStatsSampler loop started")

        try:
            if not self.stop_event.is_set():
                self._tick()
            while not self.stop_event.wait(self.interval):
                self._tick()
        finally:
            logger.debug(
                f"CpuStatsSampler loop finished: {self.samples_published} published, "
                f"{self.samples_dropped} dropped, {self.ticks_failed} failed ticks"
            )

    def _tick(self) -> None:
        try:
            sample = self.acquire()
        except OSError as e:
            self.ticks_failed += 1
            logger.warning(f"Skipping CPU sample: {e}")
            return
        except Exception as e:
            self.ticks_failed += 1
            logger.error(f"Unexpected error acquiring CPU sample: {e}", exc_info=True)
            return

        self.last_sample_time = time.time()
        self._publish(sample)

    def _publish(self, sample: CpuAccounting) -> None:
        """Non-blocking publish into the single-slot queue."""
        try:
            self.samples.put_nowait(sample)
            self.samples_published += 1
            return
        except queue.Full:
            pass

        if self.overflow_policy == DROP_NEW:
            self.samples_dropped += 1
            logger.debug("Sample slot full, dropping new CPU sample")
            return

        try:
            self.samples.get_nowait()
            self.samples_dropped += 1
        except queue.Empty:
            # Consumer drained the slot in the meantime
            pass

        # Only this thread puts, so the slot is free now
        self.samples.put_nowait(sample)
        self.samples_published += 1

    def get_performance_info(self) -> dict:
        """
        Get sampler statistics.

        Returns:
            Dictionary with counters and state
        """
        return {
            "running": self.running,
            "interval": self.interval,
            "overflow_policy": self.overflow_policy,
            "samples_published": self.samples_published,
            "samples_dropped": self.samples_dropped,
            "ticks_failed": self.ticks_failed,
            "last_sample": self.last_sample_time,
            "pending": self.samples.qsize(),
        }
