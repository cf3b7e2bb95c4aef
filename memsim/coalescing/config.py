"""Timing configuration for a simulation, read interactively."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

_U32_MAX = 2**32 - 1
_NUMBER = re.compile(r"\+?[0-9]+")


class Strategy(Enum):
    """Partition placement strategies."""

    FIRST_FIT = "First-Fit"
    BEST_FIT = "Best-Fit"
    WORST_FIT = "Worst-Fit"
    NEXT_FIT = "Next-Fit"

    def __str__(self) -> str:
        return self.value


_OPTIONS = {
    1: Strategy.FIRST_FIT,
    2: Strategy.BEST_FIT,
    3: Strategy.WORST_FIT,
    4: Strategy.NEXT_FIT,
}


@dataclass
class TimingConfig:
    """Memory size, strategy and the selection, load and release times."""

    memory_size: int
    strategy: Strategy
    selection_time: int
    load_time: int
    release_time: int


def parse_number(text: str) -> int:
    """Parse an unsigned 32-bit number; anything else reads as 0."""
    stripped = text.strip()
    if not _NUMBER.fullmatch(stripped):
        return 0
    value = int(stripped)
    return value if value <= _U32_MAX else 0


def strategy_from_option(option: int) -> Strategy:
    """Map menu option 1-4 to a strategy."""
    try:
        return _OPTIONS[option]
    except KeyError:
        raise ValueError(f"no strategy for option {option}") from None


def _ask_number(ask: Callable[[str], str], label: str) -> int:
    return parse_number(ask(f"{label}: "))


def _ask_strategy(ask: Callable[[str], str]) -> Strategy:
    while True:
        option = _ask_number(ask, "Ingrese el número de la estrategia (1-4)")
        try:
            return strategy_from_option(option)
        except ValueError:
            print("Opción no válida. Por favor, seleccione una estrategia entre 1 y 4.")


def capture_configuration(ask: Callable[[str], str] = input) -> TimingConfig:
    """Ask the user for every setting, explaining each one."""
    print("Ingrese el tamaño de la memoria física disponible (en kilobytes):")
    print(
        "Este valor representa la cantidad de memoria disponible para los trabajos en la "
        "simulación, excluyendo la utilizada por el sistema operativo."
    )
    print("Por ejemplo, si tiene 16 MB de memoria disponible, ingrese 16384 (kilobytes).")
    memory_size = _ask_number(ask, "Tamaño de la memoria")

    print("Seleccione la estrategia de asignación de particiones:")
    print("First-Fit: Asigna el trabajo a la primera partición libre que sea lo suficientemente grande.")
    print("Best-Fit: Asigna el trabajo a la partición libre más pequeña que sea lo suficientemente grande.")
    print("Worst-Fit: Asigna el trabajo a la partición libre más grande.")
    print("Next-Fit: Similar a First-Fit, pero comienza la búsqueda desde la última partición utilizada.")
    strategy = _ask_strategy(ask)

    print("Ingrese el tiempo de selección (en unidades de tiempo):")
    print("Este valor representa el tiempo que tarda el sistema en elegir una partición para el siguiente proceso.")
    print("Un valor mayor simula un sistema más lento en tomar decisiones de asignación de memoria.")
    selection_time = _ask_number(ask, "Tiempo de selección")

    print("Ingrese el tiempo de carga (en unidades de tiempo):")
    print(
        "Este valor representa el tiempo promedio que tarda el sistema en cargar un proceso "
        "desde la memoria secundaria a la memoria principal."
    )
    print("Un valor mayor simula un sistema con un almacenamiento secundario más lento.")
    load_time = _ask_number(ask, "Tiempo de carga")

    print("Ingrese el tiempo de liberación (en unidades de tiempo):")
    print(
        "Este valor representa el tiempo que tarda el sistema en liberar una partición de "
        "memoria cuando un proceso termina."
    )
    print("Un valor mayor simula un sistema con operaciones de liberación de memoria más lentas.")
    release_time = _ask_number(ask, "Tiempo de liberación")

    return TimingConfig(memory_size, strategy, selection_time, load_time, release_time)