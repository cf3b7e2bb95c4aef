"""Random process batches for the tabular simulator."""

from __future__ import annotations

import random
import re
from collections.abc import Callable

from memsim.tabular.process import Process

_USIZE_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def generate_processes(count: int, rng: random.Random | None = None) -> list[Process]:
    """Create ``count`` processes named P1, P2, ... with random parameters."""
    rng = rng or random.Random()
    return [
        Process(
            f"P{i}",
            rng.randrange(0, 100),
            rng.randrange(10, 100),
            rng.randrange(10, 500),
        )
        for i in range(1, count + 1)
    ]


def ask_process_count(ask: Callable[[str], str] = input) -> int:
    """Ask how many processes to generate until a number above zero is given."""
    while True:
        text = ask("Ingrese la cantidad de procesos que desea generar: ").strip()
        if _UNSIGNED.fullmatch(text) and 0 < int(text) <= _USIZE_MAX:
            return int(text)
        print("Por favor, ingrese un número válido mayor que 0.")