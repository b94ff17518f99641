"""
Defines the capability interface shared by all system information gatherers.

This module provides:
- CpuSampleStream: the pair returned by ``collect_cpu_stats``.
- AbstractSigar: the abstract base class consumed by monitoring agents.
  ``ProcfsSigar`` reads the kernel interfaces; ``FakeSigar`` returns
  scripted values for tests.
"""

import queue
import threading
from abc import ABC, abstractmethod
from typing import NamedTuple

from ..models.records import CpuAccounting, LoadAverage, MemoryRecord


class CpuSampleStream(NamedTuple):
    """
    Handles of a running CPU sampler.

    Attributes:
        samples: Single-slot queue the consumer reads CpuAccounting
                 snapshots from.
        stop: Setting this event stops the sampler.
    """

    samples: "queue.Queue[CpuAccounting]"
    stop: threading.Event


class AbstractSigar(ABC):
    """
    Abstract base class for system information gatherers.

    Each capability can be substituted independently by a test double.
    """

    @abstractmethod
    def get_load_average(self) -> LoadAverage:
        """
        Returns the current 1, 5 and 15 minute load averages.

        Raises:
            OSError: If the load average cannot be read.
        """
        pass

    @abstractmethod
    def get_mem(self) -> MemoryRecord:
        """
        Returns a snapshot of system memory totals.

        Raises:
            OSError: If the memory table cannot be read.
        """
        pass

    @abstractmethod
    def collect_cpu_stats(self, collection_interval: float) -> CpuSampleStream:
        """
        Starts sampling CPU accounting in the background.

        Snapshots are published onto a queue holding at most one pending
        sample; a sample that finds the slot full does not block the
        sampler. Setting the returned stop event ends sampling.

        Args:
            collection_interval: Seconds between two samples.

        Returns:
            The sample queue and the stop event.
        """
        pass
