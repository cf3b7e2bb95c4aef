"""Clock-driven simulation that logs arrival, selection, load, end and release events."""

from __future__ import annotations

import math
import os
import struct
import unicodedata
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

from memsim.timeline.memory import Memory
from memsim.timeline.models import Process
from memsim.timeline.strategies import Strategy

DEFAULT_OUTPUT = Path("file", "simulaciones", "simulacion.txt")

_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}


def _escape(text: str) -> str:
    parts = []
    for char in text:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif unicodedata.category(char) == "Cc":
            parts.append(f"\\u{{{ord(char):x}}}")
        else:
            parts.append(char)
    return "".join(parts)


def _to_single(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _format_single(value: float) -> str:
    """Shortest text that reads back as the same single-precision value."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    single = _to_single(value)
    if single == int(single):
        return str(int(single))
    text = repr(single)
    for digits in range(1, 10):
        candidate = f"{single:.{digits}g}"
        if _to_single(float(candidate)) == single:
            text = candidate
            break
    return text


class EventType(Enum):
    """Kinds of events logged by the simulation."""

    ARRIVAL = "LlegadaProceso"
    PARTITION_SELECTION = "SeleccionParticion"
    LOAD = "CargaProceso"
    FINISH = "FinalizacionProceso"
    PARTITION_RELEASE = "LiberacionParticion"


@dataclass(frozen=True)
class Event:
    """Something that happens to a process at a given time."""

    time: int
    kind: EventType
    description: str

    def __str__(self) -> str:
        return (
            f"Evento {{ tiempo: {self.time}, tipo: {self.kind.value}, "
            f'descripcion: "{_escape(self.description)}" }}'
        )


@dataclass(frozen=True)
class Indicators:
    """Turnaround per finished process, their mean and the fragmentation index."""

    turnaround_times: list[tuple[str, int]]
    mean_turnaround: float
    fragmentation: float


class Simulation:
    """Advances a clock one unit at a time, loading and unloading processes."""

    def __init__(
        self,
        processes: list[Process],
        memory_size: int,
        strategy: Strategy,
        selection_time: int,
        load_time: int,
        release_time: int,
    ) -> None:
        self.memory = Memory(memory_size)
        self.strategy = strategy
        self.selection_time = selection_time
        self.load_time = load_time
        self.release_time = release_time
        self.processes = list(processes)
        self.current_time = 0
        self.events: list[Event] = []
        self.finished: list[Process] = []

    def _log(self, out, event: Event) -> None:
        self.events.append(event)
        out.write(f"{event}\n")

    def run(self, output_path: str | os.PathLike[str] = DEFAULT_OUTPUT) -> list[Process]:
        """Run until every process has arrived and left; return the finished ones.

        Each event is written to ``output_path``. The clock ticks before the
        first arrivals are looked at, so a process arriving at or before the
        current time could never arrive and is rejected with ValueError.
        """
        print("Iniciando la simulación...")
        late = [p.name for p in self.processes if p.arrival <= self.current_time]
        if late:
            raise ValueError(
                f"processes arrive before the clock's first tick: {', '.join(late)}"
            )

        pending = [replace(p) for p in self.processes]
        in_memory: list[Process] = []
        finished: list[Process] = []

        with open(output_path, "w", encoding="utf-8") as out:
            while pending or in_memory:
                self.current_time += 1
                now = self.current_time

                for process in [p for p in pending if p.arrival == now]:
                    self._log(
                        out,
                        Event(now, EventType.ARRIVAL, f"Proceso {process.name} ha llegado"),
                    )
                    partition_id = self.memory.allocate(process, self.strategy)
                    if partition_id is not None:
                        selected = now + self.selection_time
                        self._log(
                            out,
                            Event(
                                selected,
                                EventType.PARTITION_SELECTION,
                                f"Proceso {process.name} asignado a partición {partition_id}",
                            ),
                        )
                        loaded = selected + self.load_time
                        self._log(
                            out,
                            Event(
                                loaded,
                                EventType.LOAD,
                                f"Proceso {process.name} cargado en memoria",
                            ),
                        )
                        in_memory.append(
                            replace(
                                process,
                                start_time=loaded,
                                end_time=loaded + process.duration,
                            )
                        )
                    pending = [p for p in pending if p.name != process.name]

                for process in [p for p in in_memory if p.end_time == now]:
                    self.memory.release(process)
                    self._log(
                        out,
                        Event(now, EventType.FINISH, f"Proceso {process.name} ha finalizado"),
                    )
                    self._log(
                        out,
                        Event(
                            now + self.release_time,
                            EventType.PARTITION_RELEASE,
                            f"Partición liberada para proceso {process.name}",
                        ),
                    )
                    finished.append(process)
                    in_memory = [p for p in in_memory if p.name != process.name]

                for event in self.events:
                    if event.time == now:
                        print(f"Tiempo {event.time}: {event.description}")

        self.finished = finished
        self.indicators(finished)
        return finished

    def indicators(self, finished: list[Process]) -> Indicators:
        """Print and return the turnaround times, their mean and the fragmentation."""
        times: list[tuple[str, int]] = []
        for process in finished:
            turnaround = process.end_time - process.arrival
            times.append((process.name, turnaround))
            print(f"Proceso {process.name}: Tiempo de retorno: {turnaround}")

        mean = sum(t for _, t in times) / len(times) if times else math.nan
        if not math.isnan(mean):
            mean = _to_single(mean)
        print(f"Tiempo de retorno medio para la tanda completa: {_format_single(mean)}")

        fragmentation = self.memory.external_fragmentation()
        print(f"Índice de fragmentación externa: {_format_single(fragmentation)}")
        return Indicators(times, mean, fragmentation)