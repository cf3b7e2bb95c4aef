"""Processes handled by the tabular simulator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Process:
    """A job with an arrival time, a duration and a memory need.

    ``start_time`` and ``end_time`` stay None until the process runs.
    """

    name: str
    arrival: int
    duration: int
    memory_required: int
    start_time: int | None = None
    end_time: int | None = None

    def finished(self) -> bool:
        """Whether the process has been given an end time."""
        return self.end_time is not None