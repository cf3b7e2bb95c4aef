"""Main memory for the timeline simulator."""

from __future__ import annotations

from memsim.timeline.models import Partition, Process
from memsim.timeline.strategies import (
    Strategy,
    best_fit,
    first_fit,
    next_fit,
    worst_fit,
)

_PLACERS = {
    Strategy.FIRST_FIT: first_fit,
    Strategy.BEST_FIT: best_fit,
    Strategy.WORST_FIT: worst_fit,
}


class Memory:
    """Memory of a fixed size, starting as one free partition."""

    def __init__(self, size: int) -> None:
        self.partitions: list[Partition] = [Partition(0, 0, size)]
        self.total_size = size
        self.last_id: int | None = None

    def allocate(self, process: Process, strategy: Strategy) -> int | None:
        """Place ``process`` with ``strategy``; return the partition id or None."""
        if strategy is Strategy.NEXT_FIT:
            result = next_fit(self.partitions, process, self.last_id)
            if result is not None:
                self.last_id = result
            return result
        return _PLACERS[strategy](self.partitions, process)

    def release(self, process: Process) -> None:
        """Free the first partition held by a process of the same name."""
        for partition in self.partitions:
            if partition.owner == process.name:
                partition.owner = None
                return

    def free_total(self) -> int:
        """Sum of the sizes of all free partitions."""
        return sum(p.size for p in self.partitions if p.is_free())

    def external_fragmentation(self) -> float:
        """External fragmentation index; this simulator does not measure it and reports 0.0."""
        return 0.0