"""The report file: processes and settings first, then events and results."""

from __future__ import annotations

import os

from memsim.tabular.configuration import SimulatorConfig
from memsim.tabular.process import Process


def save_processes_and_config(
    path: str | os.PathLike[str], processes: list[Process], config: SimulatorConfig
) -> None:
    """Write the process table and the settings, replacing any earlier file."""
    lines = [
        "Procesos Simulados:",
        "|-----------------------------------------|",
        "| Nombre  | Arribo  | Duración | Memoria  |",
        "|---------|---------|----------|----------|",
    ]
    lines.extend(
        f"| {p.name:<7} | {p.arrival:<7} | {p.duration:<8} | {p.memory_required:<8} |"
        for p in processes
    )
    lines.append("\n\nConfiguración de la Simulación:")
    lines.append("-------------------------------")
    lines.extend(config.table_lines())
    with open(path, "w", encoding="utf-8") as handle:
        handle.write("\n".join(lines) + "\n")


def append_events_and_results(
    path: str | os.PathLike[str], events: str, results: str
) -> None:
    """Add the event and result tables to an existing report."""
    lines = [
        "\n\nEventos de la Simulación:",
        "|---------------------------------------------|",
        "| Tiempo  | Proceso  | Partición | Evento     |",
        "|---------|----------|-----------|------------|",
        events,
        "\n\nResultados de la Simulación:",
        "----------------------------",
        results,
    ]
    with open(path, "r+", encoding="utf-8") as handle:
        handle.seek(0, os.SEEK_END)
        handle.write("\n".join(lines) + "\n")


def read_report(path: str | os.PathLike[str]) -> list[str]:
    """The report's lines, without line endings."""
    with open(path, encoding="utf-8") as handle:
        return [line.rstrip("\n") for line in handle]


def show_report(path: str | os.PathLike[str]) -> list[str]:
    """Print the whole report and return its lines."""
    lines = read_report(path)
    for line in lines:
        print(line)
    return lines