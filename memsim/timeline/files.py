"""Process batch files and the folder of saved simulations."""

from __future__ import annotations

import os
import re
from collections.abc import Callable
from pathlib import Path

from memsim.coalescing.config import parse_number
from memsim.timeline.models import Process

PROCESS_FOLDER = Path("file", "tandasdeprocesos")
SIMULATION_FOLDER = Path("file", "simulaciones")

_U32_MAX = 2**32 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_u32(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        return 0
    value = int(text)
    return value if value <= _U32_MAX else 0


def list_process_files(folder: str | os.PathLike[str] = PROCESS_FOLDER) -> list[str]:
    """Names of the files in ``folder``, sorted; empty when it does not exist."""
    path = Path(folder)
    if not path.exists():
        return []
    return sorted(entry.name for entry in path.iterdir())


def choose_process_file(
    folder: str | os.PathLike[str] = PROCESS_FOLDER,
    ask: Callable[[str], str] = input,
) -> str | None:
    """Show the process files and let the user pick one by number; None to go back."""
    names = list_process_files(folder)
    if not names:
        return None

    print("Archivos disponibles:")
    for number, name in enumerate(names, start=1):
        print(f"{number}: {name}")
    print("Seleccione un archivo (0 para volver):")

    option = parse_number(ask(""))
    if option == 0 or option > len(names):
        return None
    return names[option - 1]


def create_process_file(count: int, folder: str | os.PathLike[str] = PROCESS_FOLDER) -> Path:
    """Create the empty batch file ``tanda_<count>.txt`` in ``folder``."""
    path = Path(folder) / f"tanda_{count}.txt"
    with open(path, "w", encoding="utf-8"):
        pass
    print(f"Archivo creado: {path}")
    return path


def list_simulations(folder: str | os.PathLike[str] = SIMULATION_FOLDER) -> list[str]:
    """Print and return the names of the saved simulations."""
    path = Path(folder)
    if not path.exists():
        print("No hay simulaciones previas.")
        return []
    names = sorted(entry.name for entry in path.iterdir())
    print("Simulaciones previas:")
    for name in names:
        print(name)
    return names


def load_processes(path: str | os.PathLike[str]) -> list[Process]:
    """Read ``name;arrival;duration;memory`` lines.

    Lines without exactly four fields are skipped and numbers that do not
    parse read as 0. A file that cannot be opened gives no processes.
    """
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError:
        return []

    chunks = data.split(b"\n")
    if chunks and chunks[-1] == b"":
        chunks.pop()

    processes: list[Process] = []
    for raw in chunks:
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError:
            continue
        fields = line.split(";")
        if len(fields) != 4:
            continue
        name, arrival, duration, memory = fields
        processes.append(
            Process(name, _parse_u32(arrival), _parse_u32(duration), _parse_u32(memory))
        )
    return processes