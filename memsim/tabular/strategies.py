"""Placement strategies that hand a whole partition to a process."""

from __future__ import annotations

from enum import Enum

from memsim.tabular.partition import Partition
from memsim.tabular.process import Process


class Strategy(Enum):
    """Partition placement strategies."""

    FIRST_FIT = "First Fit"
    BEST_FIT = "Best Fit"
    NEXT_FIT = "Next Fit"
    WORST_FIT = "Worst Fit"

    def __str__(self) -> str:
        return self.value

    def allocate(
        self, partitions: list[Partition], process: Process, last_index: int = 0
    ) -> int | None:
        """Occupy a partition with ``process`` and return its index, or None.

        ``last_index`` is where next fit starts looking; the other
        strategies ignore it. Partitions are never split.
        """
        if self is Strategy.FIRST_FIT:
            index = _first_fit(partitions, process)
        elif self is Strategy.BEST_FIT:
            index = _best_fit(partitions, process)
        elif self is Strategy.WORST_FIT:
            index = _worst_fit(partitions, process)
        else:
            index = _next_fit(partitions, process, last_index)
        if index is not None:
            partitions[index].occupy(process.name)
        return index


def _fitting(partitions: list[Partition], process: Process) -> list[int]:
    return [
        i
        for i, p in enumerate(partitions)
        if p.free_space() >= process.memory_required
    ]


def _first_fit(partitions: list[Partition], process: Process) -> int | None:
    candidates = _fitting(partitions, process)
    return candidates[0] if candidates else None


def _best_fit(partitions: list[Partition], process: Process) -> int | None:
    candidates = _fitting(partitions, process)
    if not candidates:
        return None
    return min(candidates, key=lambda i: partitions[i].free_space())


def _worst_fit(partitions: list[Partition], process: Process) -> int | None:
    candidates = _fitting(partitions, process)
    if not candidates:
        return None
    return max(candidates, key=lambda i: partitions[i].free_space())


def _next_fit(
    partitions: list[Partition], process: Process, last_index: int
) -> int | None:
    count = len(partitions)
    for index in [*range(last_index, count), *range(last_index)]:
        if partitions[index].free_space() >= process.memory_required:
            return index
    return None