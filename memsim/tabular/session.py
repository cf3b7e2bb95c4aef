"""One interactive run: generate a batch, configure, simulate and report."""

from __future__ import annotations

import os
import random
from collections.abc import Callable
from pathlib import Path

from memsim.tabular.configuration import SimulatorConfig
from memsim.tabular.generator import ask_process_count, generate_processes
from memsim.tabular.memory import Memory
from memsim.tabular.partition import Partition
from memsim.tabular.report import (
    append_events_and_results,
    save_processes_and_config,
    show_report,
)
from memsim.tabular.simulation import Simulator
from memsim.tabular.strategies import Strategy

DEFAULT_FOLDER = "files"


class NewSimulation:
    """Creates report files in ``folder`` and remembers the last one written."""

    def __init__(self, folder: str | os.PathLike[str] = DEFAULT_FOLDER) -> None:
        self.folder = Path(folder)
        self.loaded_file: Path | None = None
        self.counter = 0

    def report_name(self, process_count: int, strategy: Strategy) -> Path:
        """A new report path in the folder that no existing file uses."""
        while True:
            self.counter += 1
            path = self.folder / (
                f"simulacion_{self.counter:02}_{process_count}_procesos_"
                f"{strategy.name.lower()}.txt"
            )
            if not path.exists():
                return path

    def run(
        self, ask: Callable[[str], str] = input, rng: random.Random | None = None
    ) -> Path:
        """Ask for a batch and settings, simulate, write and show the report."""
        processes = generate_processes(ask_process_count(ask), rng)
        config = SimulatorConfig.ask(ask)

        path = self.report_name(len(processes), config.strategy)
        self.loaded_file = path
        save_processes_and_config(path, processes, config)

        memory = Memory([Partition(0, 0, config.memory_size)])
        events, results = Simulator(memory, processes, config.strategy).run()
        append_events_and_results(path, events, results)
        show_report(path)
        return path