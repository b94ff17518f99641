"""
Scripted gatherer for tests of code that consumes AbstractSigar.
"""

import logging
import queue
import threading
from typing import Optional

from ..models.records import CpuAccounting, LoadAverage, MemoryRecord
from .base import AbstractSigar, CpuSampleStream

logger = logging.getLogger(__name__)

# Seconds the relay waits for a scripted sample before re-checking stop flags
RELAY_POLL_INTERVAL = 0.01


class FakeSigar(AbstractSigar):
    """
    Returns scripted values instead of reading kernel interfaces.

    Set ``load_average``/``mem`` (or ``load_average_err``/``mem_err`` to make
    the call raise). CPU samples put on ``cpu_samples_in`` are relayed to the
    stream returned by ``collect_cpu_stats`` with the same drop-on-full
    publish as the real sampler; setting ``stop_feed`` ends the relay.
    """

    def __init__(self):
        self.load_average = LoadAverage()
        self.load_average_err: Optional[Exception] = None

        self.mem = MemoryRecord()
        self.mem_err: Optional[Exception] = None

        self.cpu_samples_in: "queue.Queue[CpuAccounting]" = queue.Queue(maxsize=1)
        self.stop_feed = threading.Event()

    def get_load_average(self) -> LoadAverage:
        if self.load_average_err is not None:
            raise self.load_average_err
        return self.load_average

    def get_mem(self) -> MemoryRecord:
        if self.mem_err is not None:
            raise self.mem_err
        return self.mem

    def collect_cpu_stats(self, collection_interval: float) -> CpuSampleStream:
        samples: "queue.Queue[CpuAccounting]" = queue.Queue(maxsize=1)
        stop = threading.Event()

        thread = threading.Thread(
            target=self._relay,
            args=(samples, stop),
            name="FakeSigarRelay",
            daemon=True,
        )
        thread.start()
        return CpuSampleStream(samples=samples, stop=stop)

    def _relay(self, samples: "queue.Queue[CpuAccounting]", stop: threading.Event) -> None:
        while not (self.stop_feed.is_set() or stop.is_set()):
            try:
                sample = self.cpu_samples_in.get(timeout=RELAY_POLL_INTERVAL)
            except queue.Empty:
                continue
            try:
                samples.put_nowait(sample)
            except queue.Full:
                logger.debug("Fake sample slot full, dropping scripted sample")
