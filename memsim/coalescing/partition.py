"""Memory partitions and the operations that reshape them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Partition:
    """A contiguous block of memory, free or held by a named process."""

    start: int
    size: int
    owner: str | None = None

    @property
    def is_free(self) -> bool:
        return self.owner is None

    def free(self) -> None:
        """Mark the partition as free."""
        self.owner = None

    def occupy(self, process_name: str) -> None:
        """Mark the partition as held by ``process_name``."""
        self.owner = process_name

    def is_adjacent(self, other: Partition) -> bool:
        """Whether ``other`` begins exactly where this partition ends."""
        return self.start + self.size == other.start


def coalesce(partitions: list[Partition]) -> None:
    """Merge neighbouring free, adjacent partitions in place."""
    merged: list[Partition] = []
    for partition in partitions:
        if merged:
            last = merged[-1]
            if last.is_free and partition.is_free and last.is_adjacent(partition):
                last.size += partition.size
                continue
        merged.append(partition)
    partitions[:] = merged


def external_fragmentation(partitions: list[Partition], minimum_size: int) -> int:
    """Total size of free partitions smaller than ``minimum_size``."""
    return sum(p.size for p in partitions if p.is_free and p.size < minimum_size)


def compact(partitions: list[Partition]) -> None:
    """Move every occupied block to the bottom of memory, leaving one free block on top."""
    total = sum(p.size for p in partitions)
    occupied = [(p.owner, p.size) for p in partitions if not p.is_free]

    rebuilt: list[Partition] = []
    address = 0
    for owner, size in occupied:
        rebuilt.append(Partition(address, size, owner))
        address += size
    rebuilt.append(Partition(address, total - address))
    partitions[:] = rebuilt


def format_memory_state(partitions: list[Partition]) -> str:
    """Describe every partition, one per line."""
    lines = ["Estado actual de la memoria:"]
    for p in partitions:
        if p.is_free:
            lines.append(f"Partición libre - Tamaño: {p.size} - Dirección: {p.start}")
        else:
            lines.append(
                f"Partición ocupada por {p.owner} - Tamaño: {p.size} - Dirección: {p.start}"
            )
    return "\n".join(lines)


def show_memory_state(partitions: list[Partition]) -> None:
    """Print the memory description to standard output."""
    print(format_memory_state(partitions))