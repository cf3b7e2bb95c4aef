"""Settings for a tabular simulation, read interactively."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from memsim.coalescing.config import parse_number
from memsim.tabular.strategies import Strategy

_OPTIONS = {
    "1": Strategy.FIRST_FIT,
    "2": Strategy.BEST_FIT,
    "3": Strategy.NEXT_FIT,
    "4": Strategy.WORST_FIT,
}


def _ask_positive(ask: Callable[[str], str], prompt: str, complaint: str) -> int:
    while True:
        value = parse_number(ask(prompt))
        if value > 0:
            return value
        print(complaint)


def _ask_strategy(ask: Callable[[str], str]) -> Strategy:
    while True:
        print("Seleccione la estrategia de asignación de particiones:")
        print("1) First-fit (Primer ajuste)")
        print("2) Best-fit (Mejor ajuste)")
        print("3) Next-fit (Siguiente ajuste)")
        print("4) Worst-fit (Peor ajuste)")
        strategy = _OPTIONS.get(ask("Seleccione una opción (1-4): ").strip())
        if strategy is not None:
            return strategy
        print("Opción no válida. Por favor ingrese 1, 2, 3 o 4.")


def _ask_time(ask: Callable[[str], str], name: str) -> int:
    return _ask_positive(
        ask,
        f"Ingrese el tiempo de {name} (en ms): ",
        "Por favor ingrese un valor válido para el tiempo en ms.",
    )


@dataclass
class SimulatorConfig:
    """Memory size, placement strategy and the selection, load and release times."""

    strategy: Strategy
    memory_size: int
    selection_time: int
    load_time: int
    release_time: int

    @classmethod
    def ask(cls, ask: Callable[[str], str] = input) -> SimulatorConfig:
        """Ask the user for every setting, repeating until each answer is valid."""
        memory_size = _ask_positive(
            ask,
            "Ingrese el tamaño de la memoria física disponible en KB: ",
            "Por favor ingrese un valor válido de memoria en KB.",
        )
        strategy = _ask_strategy(ask)
        selection_time = _ask_time(ask, "selección de partición")
        load_time = _ask_time(ask, "carga promedio")
        release_time = _ask_time(ask, "liberación de partición")
        return cls(strategy, memory_size, selection_time, load_time, release_time)

    def table_lines(self) -> list[str]:
        """The settings as rows of a text table."""
        return [
            f"| Tamaño de Memoria: {self.memory_size:<25} KB |",
            f"| Estrategia de Asignación: {self.strategy} |",
            f"| Tiempo de Selección de Partición: {self.selection_time:<10} ms |",
            f"| Tiempo de Carga Promedio: {self.load_time:<15} ms |",
            f"| Tiempo de Liberación de Partición: {self.release_time:<10} ms |",
        ]