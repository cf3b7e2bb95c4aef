"""Placement strategies that return the identifier of the partition used."""

from __future__ import annotations

from enum import Enum

from memsim.timeline.models import Partition, Process


class Strategy(Enum):
    """Partition placement strategies."""

    FIRST_FIT = "FirstFit"
    BEST_FIT = "BestFit"
    NEXT_FIT = "NextFit"
    WORST_FIT = "WorstFit"

    def __str__(self) -> str:
        return self.value


def _fits(partition: Partition, process: Process) -> bool:
    return partition.is_free() and partition.size >= process.memory_required


def _place(partitions: list[Partition], index: int, process: Process) -> int:
    chosen = partitions[index]
    required = process.memory_required
    leftover = chosen.size - required
    chosen.size = required
    chosen.owner = process.name
    if leftover > 0:
        partitions.insert(
            index + 1,
            Partition(len(partitions), chosen.start + required, leftover),
        )
    return chosen.id


def first_fit(partitions: list[Partition], process: Process) -> int | None:
    """Use the first free partition large enough."""
    index = next((i for i, p in enumerate(partitions) if _fits(p, process)), None)
    return None if index is None else _place(partitions, index, process)


def best_fit(partitions: list[Partition], process: Process) -> int | None:
    """Use the free partition that leaves the least space over."""
    candidates = [i for i, p in enumerate(partitions) if _fits(p, process)]
    if not candidates:
        return None
    index = min(candidates, key=lambda i: partitions[i].size)
    return _place(partitions, index, process)


def worst_fit(partitions: list[Partition], process: Process) -> int | None:
    """Use the largest non-empty free partition large enough."""
    candidates = [
        i for i, p in enumerate(partitions) if _fits(p, process) and p.size > 0
    ]
    if not candidates:
        return None
    index = max(candidates, key=lambda i: partitions[i].size)
    return _place(partitions, index, process)


def next_fit(
    partitions: list[Partition], process: Process, last_id: int | None
) -> int | None:
    """Search from just after the partition ``last_id``, wrapping round."""
    count = len(partitions)
    start = 0
    if last_id is not None:
        position = next((i for i, p in enumerate(partitions) if p.id == last_id), None)
        if position is not None:
            start = position + 1 if position + 1 < count else 0
    for index in [*range(start, count), *range(start)]:
        if _fits(partitions[index], process):
            return _place(partitions, index, process)
    return None