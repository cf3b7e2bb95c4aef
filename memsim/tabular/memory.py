"""Main memory for the tabular simulator."""

from __future__ import annotations

from collections.abc import Iterable

from memsim.tabular.partition import Partition
from memsim.tabular.process import Process
from memsim.tabular.strategies import Strategy


class Memory:
    """A set of partitions and the last index used by next fit."""

    def __init__(self, partitions: Iterable[Partition] = ()) -> None:
        self.partitions: list[Partition] = list(partitions)
        self.last_index = 0

    def allocate(self, process: Process, strategy: Strategy) -> int | None:
        """Place ``process`` with ``strategy``; return the partition index or None."""
        index = strategy.allocate(self.partitions, process, self.last_index)
        if strategy is Strategy.NEXT_FIT and index is not None:
            self.last_index = index
        return index

    def release(self, index: int) -> None:
        """Free the partition at ``index``; an index out of range is ignored."""
        if 0 <= index < len(self.partitions):
            self.partitions[index].release()

    def external_fragmentation(self) -> float:
        """Share of the free space lying outside the largest free block."""
        free = [p.free_space() for p in self.partitions if p.free_space() > 0]
        total = sum(free)
        if total == 0:
            return 0.0
        return (total - max(free)) / total

    def format_state(self) -> str:
        """A table of every partition: id, address, size and state."""
        lines = [
            f"{'ID':<10} {'Dirección':<15} {'Tamaño':<10} {'Estado':<10}",
            "---------------------------------------------------",
        ]
        for p in self.partitions:
            state = "Libre" if p.is_free else f"Ocupada ({p.owner})"
            lines.append(f"{p.id:<10} {p.start:<15} {p.size:<10} {state:<10}")
        return "\n".join(lines)

    def show_state(self) -> None:
        """Print the partition table."""
        print(self.format_state())