"""Placement strategies for dynamic partitions: first, best, worst and next fit."""

from __future__ import annotations

from abc import ABC, abstractmethod

from memsim.coalescing.partition import Partition
from memsim.coalescing.process import Process


def _fits(partition: Partition, process: Process) -> bool:
    return partition.is_free and partition.size >= process.memory_required


class AllocationStrategy(ABC):
    """Chooses a free partition for a process and carves the process into it."""

    @abstractmethod
    def select(self, process: Process, partitions: list[Partition]) -> int | None:
        """Index of the partition the process should go into, or None."""

    def allocate(self, process: Process, partitions: list[Partition]) -> int | None:
        """Place ``process`` in ``partitions``, splitting off any leftover space."""
        index = self.select(process, partitions)
        if index is None:
            print(f"No hay partición disponible para el proceso {process.name}.")
            return None

        chosen = partitions[index]
        required = process.memory_required
        if chosen.size > required:
            remainder = Partition(chosen.start + required, chosen.size - required)
            chosen.size = required
            partitions.insert(index + 1, remainder)
        chosen.occupy(process.name)

        print(f"Proceso {process.name} asignado a la partición {index}.")
        return index


class FirstFit(AllocationStrategy):
    """The first free partition large enough."""

    def select(self, process: Process, partitions: list[Partition]) -> int | None:
        return next((i for i, p in enumerate(partitions) if _fits(p, process)), None)


class BestFit(AllocationStrategy):
    """The free partition that leaves the least space over."""

    def select(self, process: Process, partitions: list[Partition]) -> int | None:
        candidates = [i for i, p in enumerate(partitions) if _fits(p, process)]
        if not candidates:
            return None
        return min(candidates, key=lambda i: partitions[i].size)


class WorstFit(AllocationStrategy):
    """The largest free partition large enough."""

    def select(self, process: Process, partitions: list[Partition]) -> int | None:
        candidates = [
            i for i, p in enumerate(partitions) if _fits(p, process) and p.size > 0
        ]
        if not candidates:
            return None
        return max(candidates, key=lambda i: partitions[i].size)


class NextFit(AllocationStrategy):
    """Like first fit, but the search resumes at the last partition used."""

    def __init__(self, last_index: int = 0) -> None:
        self.last_index = last_index

    def select(self, process: Process, partitions: list[Partition]) -> int | None:
        count = len(partitions)
        if count == 0:
            return None
        start = self.last_index % count
        for offset in range(count):
            index = (start + offset) % count
            if _fits(partitions[index], process):
                return index
        return None

    def allocate(self, process: Process, partitions: list[Partition]) -> int | None:
        index = super().allocate(process, partitions)
        if index is not None:
            self.last_index = index
        return index