"""Fixed partitions used by the tabular simulator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Partition:
    """A block of memory with an identifier, free or held by a named process."""

    id: int
    start: int
    size: int
    owner: str | None = None

    @property
    def is_free(self) -> bool:
        return self.owner is None

    def free_space(self) -> int:
        """The partition's size when it is free, otherwise 0."""
        return self.size if self.owner is None else 0

    def occupy(self, process_name: str) -> None:
        """Mark the partition as held by ``process_name``."""
        self.owner = process_name

    def release(self) -> None:
        """Mark the partition as free."""
        self.owner = None