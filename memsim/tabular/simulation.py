"""Runs a batch of processes through memory one at a time and tabulates the events."""

from __future__ import annotations

from dataclasses import replace

from memsim.tabular.memory import Memory
from memsim.tabular.process import Process
from memsim.tabular.strategies import Strategy

_RULE = "-----------------------------------------------"


def _event_row(time: object, process: object, partition: object, event: object) -> str:
    return f"{time!s:<10} {process!s:<15} {partition!s:<15} {event!s:<10}"


class Simulator:
    """Places each arrived process, runs it to completion and frees its partition.

    The clock jumps forward by each process's duration while it runs, so
    processes execute one after another. A process that cannot be placed is
    logged as not assigned and dropped: every placed process leaves memory
    before the next one is looked at, so a failed placement would fail again.
    """

    def __init__(self, memory: Memory, processes: list[Process], strategy: Strategy) -> None:
        self.memory = memory
        self.processes = [replace(p) for p in processes]
        self.strategy = strategy

    def run(self) -> tuple[str, str]:
        """Run the batch; return the event table and the results table."""
        now = 0
        pending = list(self.processes)
        rows = [
            "Registro de eventos:",
            _event_row("Tiempo", "Proceso", "Partición", "Evento"),
            _RULE,
        ]

        while pending:
            pending.sort(key=lambda p: p.arrival)
            rejected: set[int] = set()
            for process in pending:
                if process.arrival > now:
                    continue
                index = self.memory.allocate(process, self.strategy)
                if index is None:
                    rows.append(_event_row(now, process.name, "-", "No Asignado"))
                    rejected.add(id(process))
                    continue
                rows.append(_event_row(now, process.name, index, "Asignado"))
                process.start_time = now
                now += process.duration
                rows.append(_event_row(now, process.name, index, "Finalizado"))
                self.memory.release(index)
                process.end_time = now

            pending = [
                p for p in pending if not p.finished() and id(p) not in rejected
            ]
            now += 1

        events = "\n".join(rows) + "\n"
        return events, self.indicators()

    def indicators(self) -> str:
        """Turnaround per finished process, their mean and the fragmentation index."""
        lines = [
            "Resultados:",
            f"{'Proceso':<15} {'Tiempo de Retorno':<20}",
            "---------------------------------",
        ]
        turnarounds: list[int] = []
        for process in self.processes:
            if process.start_time is None or process.end_time is None:
                continue
            turnaround = process.end_time - process.arrival
            turnarounds.append(turnaround)
            lines.append(f"{process.name:<15} {turnaround:<20}")

        if turnarounds:
            mean = sum(turnarounds) / len(turnarounds)
            lines.append(f"Tiempo Medio de Retorno: {mean:.2f}")

        fragmentation = self.memory.external_fragmentation()
        lines.append(f"Índice de Fragmentación Externa: {fragmentation * 100.0:.2f}%")
        return "\n".join(lines) + "\n"