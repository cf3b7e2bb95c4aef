# memsim

Tools for teaching dynamic memory partitioning. Processes, each with a name,
an arrival time, a duration and a memory requirement, are placed into
partitions of physical memory using one of four strategies:

- **First-Fit** – the first free partition that is large enough.
- **Best-Fit** – the free partition that leaves the least space over.
- **Worst-Fit** – the largest free partition.
- **Next-Fit** – like First-Fit, but the search resumes where the last
  allocation happened.

The package has three sub-packages: `memsim.timeline` (a complete
interactive simulator with a command), `memsim.tabular` (a simulator that
writes report files, used from Python) and `memsim.coalescing` (partition
and strategy building blocks). Messages and reports are in Spanish.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## `memsim-timeline`

```
memsim-timeline
```

Creates `file/tandasdeprocesos/` and `file/simulaciones/` in the current
directory if they are missing, then shows a menu:

- **1** – pick a batch file from `file/tandasdeprocesos/` by number. If there
  are none (or you go back with 0), you are asked for a number of processes
  and an empty file `tanda_<n>.txt` is created. Then you enter the memory
  size, the strategy (1–4, anything else means First-Fit) and the selection,
  load and release times, confirm with `S`, and the simulation runs.
- **2** – list the files in `file/simulaciones/`.
- **0** – leave.

Batch files hold one process per line as `name;arrival;duration;memory`.
Lines without exactly four fields are skipped and fields that are not numbers
read as 0 (`memsim.timeline.files.load_processes`).

The clock (`memsim.timeline.simulation.Simulation`) starts at 0 and ticks one
unit at a time; arrivals are checked after each tick, so every arrival time
must be at least 1, otherwise `run` raises `ValueError`. Each arrival logs an
arrival, a partition-selection and a load event; each completion logs a finish
and a release event. Events are written to `file/simulaciones/simulacion.txt`
and those of the current tick are printed. At the end the turnaround time of
each finished process and their mean are printed. A process that finds no
room is dropped. The external fragmentation index is always reported as 0.

## `memsim.tabular`

```python
from memsim.tabular.session import NewSimulation

NewSimulation("files").run()
```

`NewSimulation.run` asks for a number of processes, generates them at random
(`memsim.tabular.generator.generate_processes`), asks for the settings
(`memsim.tabular.configuration.SimulatorConfig.ask`), runs
`memsim.tabular.simulation.Simulator` on one partition the size of memory and
writes a report (process table, settings, events, results) to a new file in
the folder, which must already exist, then prints it. Processes run one after
another; partitions are never split. The results give each turnaround time,
the mean, and the external fragmentation index from
`memsim.tabular.memory.Memory.external_fragmentation`.

`memsim.tabular.viewer.show_simulations` lists the saved reports and prints
the one chosen. `memsim.tabular.report` holds the functions that write and
read report files.

## `memsim.coalescing`

- `memsim.coalescing.partition`: `Partition`, `coalesce` (merge adjacent free
  partitions), `external_fragmentation` (total of free partitions below a
  minimum size), `compact` (move occupied blocks down, leaving one free block),
  `format_memory_state` and `show_memory_state`.
- `memsim.coalescing.strategies`: `FirstFit`, `BestFit`, `WorstFit`, `NextFit`;
  `allocate` places a process and splits off any leftover space.
- `memsim.coalescing.config`: `Strategy`, `TimingConfig`,
  `capture_configuration`, `parse_number`, `strategy_from_option`.

## What the package does not do

Only `memsim-timeline` is a command. `memsim.tabular` has no menu of its own;
call `NewSimulation.run` and `show_simulations` yourself.
`memsim.coalescing` has no event-driven simulation, no reader or generator of
process files and no menu: it provides the partition operations and
strategies only, for you to drive.