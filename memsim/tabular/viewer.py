"""Browsing saved simulation reports."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from memsim.coalescing.config import parse_number

DEFAULT_FOLDER = "files"


def list_simulations(folder: str | os.PathLike[str] = DEFAULT_FOLDER) -> list[str]:
    """Names of the saved reports, sorted; empty when the folder is missing."""
    path = Path(folder)
    if not path.exists():
        print(f"La carpeta '{os.fspath(folder)}' no existe.")
        return []
    try:
        return sorted(entry.name for entry in path.iterdir())
    except OSError as error:
        print(f"Error al leer la carpeta de simulaciones: {error}")
        return []


def _show(folder: Path, name: str) -> list[str] | None:
    try:
        with open(folder / name, encoding="utf-8", errors="replace") as handle:
            lines = [line.rstrip("\n") for line in handle]
    except OSError:
        print("No se pudo abrir el archivo de simulación.")
        return None
    print(f"\nContenido de la simulación '{name}':\n")
    for line in lines:
        print(line)
    return lines


def show_simulations(
    ask: Callable[[str], str] = input, folder: str | os.PathLike[str] = DEFAULT_FOLDER
) -> list[str] | None:
    """Let the user pick a report and print it; return its lines, or None."""
    names = list_simulations(folder)
    if not names:
        print("No se encontraron simulaciones previas.")
        return None

    print("Simulaciones disponibles:")
    for number, name in enumerate(names, start=1):
        print(f"{number}: {name}")
    print("Seleccione el número de la simulación que desea ver (0 para volver):")

    option = parse_number(ask(""))
    if option == 0 or option > len(names):
        print("Volviendo al menú principal...")
        return None
    return _show(Path(folder), names[option - 1])