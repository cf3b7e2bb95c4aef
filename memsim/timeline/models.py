"""Partitions and processes used by the timeline simulator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Partition:
    """A block of memory with an identifier, free or held by a named process."""

    id: int
    start: int
    size: int
    owner: str | None = None

    def is_free(self) -> bool:
        """Whether no process holds the partition."""
        return self.owner is None


@dataclass
class Process:
    """A job from a process file, with the times it starts and ends once loaded."""

    name: str
    arrival: int
    duration: int
    memory_required: int
    start_time: int = 0
    end_time: int = 0