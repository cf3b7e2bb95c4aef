"""Processes handled by the coalescing simulator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Process:
    """A job that arrives, needs memory for a while and then leaves."""

    name: str
    arrival: int
    duration: int
    memory_required: int