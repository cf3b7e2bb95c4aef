"""Interactive menu for the timeline simulator."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from memsim.coalescing.config import parse_number
from memsim.timeline.files import (
    PROCESS_FOLDER,
    SIMULATION_FOLDER,
    choose_process_file,
    create_process_file,
    list_simulations,
    load_processes,
)
from memsim.timeline.simulation import Simulation
from memsim.timeline.strategies import Strategy

_OPTIONS = {
    1: Strategy.FIRST_FIT,
    2: Strategy.BEST_FIT,
    3: Strategy.WORST_FIT,
    4: Strategy.NEXT_FIT,
}


@dataclass
class MenuState:
    """The process file chosen for the next simulation."""

    process_file: str | None = None


def _clear_screen() -> None:
    if sys.platform.startswith("win"):
        subprocess.run(["cmd", "/C", "cls"], check=False)
    else:
        subprocess.run(["clear"], check=False)


def ensure_folders(base: str | os.PathLike[str] = ".") -> list[Path]:
    """Create the process and simulation folders under ``base``; return those created."""
    created: list[Path] = []
    for relative in (PROCESS_FOLDER, SIMULATION_FOLDER):
        folder = Path(base) / relative
        if folder.exists():
            continue
        folder.mkdir(parents=True)
        print(f"Carpeta creada: {relative.as_posix()}")
        created.append(folder)
    return created


def strategy_from_option(option: int) -> Strategy:
    """Strategy for option 1-4; anything else falls back to first fit."""
    strategy = _OPTIONS.get(option)
    if strategy is None:
        print("Opción no válida, se selecciona First-Fit por defecto.")
        return Strategy.FIRST_FIT
    return strategy


def _ask_number(ask: Callable[[str], str]) -> int:
    return parse_number(ask(""))


def configure_and_run(
    state: MenuState,
    ask: Callable[[str], str] = input,
    base: str | os.PathLike[str] = ".",
) -> Simulation | None:
    """Ask for the settings, confirm them and run; None if the user declines."""
    print("Configuración de la simulación:")
    print("Ingrese el tamaño de la memoria física disponible:")
    memory_size = _ask_number(ask)

    print("Seleccione la estrategia de asignación de particiones:")
    print("1) First-Fit")
    print("2) Best-Fit")
    print("3) Worst-Fit")
    print("4) Next-Fit")
    strategy = strategy_from_option(_ask_number(ask))

    print("Ingrese el tiempo de selección de partición:")
    selection_time = _ask_number(ask)
    print("Ingrese el tiempo de carga promedio (memoria secundaria a principal):")
    load_time = _ask_number(ask)
    print("Ingrese el tiempo de liberación de partición:")
    release_time = _ask_number(ask)

    print("Configuración ingresada:")
    print(f"Tamaño de memoria: {memory_size}")
    print(f"Estrategia de asignación: {strategy}")
    print(f"Tiempo de selección de partición: {selection_time}")
    print(f"Tiempo de carga promedio: {load_time}")
    print(f"Tiempo de liberación de partición: {release_time}")

    print("¿Está conforme con la configuración? (S/N)")
    if ask("").strip().upper() != "S":
        print("Volviendo al menú principal...")
        return None

    if state.process_file is None:
        raise ValueError("no process file has been chosen")
    simulation = Simulation(
        load_processes(state.process_file),
        memory_size,
        strategy,
        selection_time,
        load_time,
        release_time,
    )
    simulation.run(Path(base) / SIMULATION_FOLDER / "simulacion.txt")
    return simulation


def _new_simulation(state: MenuState, ask: Callable[[str], str], base: Path) -> None:
    folder = base / PROCESS_FOLDER
    chosen = choose_process_file(folder, ask)
    if chosen is not None:
        print(f"Ha seleccionado el archivo: {chosen}")
        state.process_file = str(folder / chosen)
    else:
        print("No hay archivos disponibles.")
        print("Ingrese el número de procesos:")
        text = ask("").strip()
        count = parse_number(text) if text.isdigit() else 1
        path = create_process_file(count, folder)
        print(f"Archivo creado con {count} procesos.")
        state.process_file = str(path)
    configure_and_run(state, ask, base)


def _print_menu() -> None:
    print("Bienvenido al simulador de memoria dinámica")
    print("")
    print("Este programa forma parte de un trabajo practico integrador de sistemas operativos,")
    print("de tercer año, de la carrera Lic. en Sistemas de la universidad de Tierra del Fuego.")
    print("")
    print("Primero usted deberá crear un archivo de tanda de procesos.")
    print("")
    print("Dicho archivo tendrá un numero de procesos,")
    print("el archivo simulara una tanda de procesos en este formato:")
    print("    * Nombre de proceso.")
    print("    * Instante de Arribo.")
    print("    * Duración total del trabajo.")
    print("    * Cantidad de memoria requerida.")
    print("")
    print("0) Salir.")
    print("1) Crear una nueva simulación.")
    print("2) Ver simulaciones previas.")
    print("")
    print("Seleccione una opción (0-3):")


def run_menu(
    ask: Callable[[str], str] = input, base: str | os.PathLike[str] = "."
) -> MenuState:
    """Show the menu until the user leaves; return the final state."""
    state = MenuState()
    root = Path(base)
    while True:
        _clear_screen()
        _print_menu()
        option = ask("").strip()
        if option == "1":
            _new_simulation(state, ask, root)
        elif option == "2":
            list_simulations(root / SIMULATION_FOLDER)
        elif option == "0":
            print("Saliendo del programa...")
            return state
        else:
            print("Opción no válida. Intente nuevamente.")


def main(argv: list[str] | None = None) -> int:
    """Create the working folders and start the menu."""
    ensure_folders()
    try:
        run_menu()
    except EOFError:
        print()
    return 0