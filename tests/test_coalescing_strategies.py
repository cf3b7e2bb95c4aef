import pytest

from memsim.coalescing.partition import Partition
from memsim.coalescing.process import Process
from memsim.coalescing.strategies import (
    AllocationStrategy,
    BestFit,
    FirstFit,
    NextFit,
    WorstFit,
)


def _layout():
    # free 50, occupied 10, free 20, occupied 10, free 80
    return [
        Partition(0, 50),
        Partition(50, 10, "X"),
        Partition(60, 20),
        Partition(80, 10, "Y"),
        Partition(90, 80),
    ]


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        AllocationStrategy()  # type: ignore[abstract]


def test_first_fit_selects_first_fitting():
    assert FirstFit().select(Process("P", 0, 1, 15), _layout()) == 0


def test_best_fit_selects_smallest_fitting():
    assert BestFit().select(Process("P", 0, 1, 15), _layout()) == 2


def test_worst_fit_selects_largest():
    assert WorstFit().select(Process("P", 0, 1, 15), _layout()) == 4


@pytest.mark.parametrize("strategy", [FirstFit(), BestFit(), WorstFit(), NextFit()])
def test_no_fit_returns_none_and_leaves_layout(strategy, capsys):
    partitions = _layout()
    snapshot = [(p.start, p.size, p.owner) for p in partitions]
    assert strategy.allocate(Process("Big", 0, 1, 1000), partitions) is None
    assert [(p.start, p.size, p.owner) for p in partitions] == snapshot
    assert "No hay partición disponible para el proceso Big." in capsys.readouterr().out


def test_allocate_splits_leftover_space():
    partitions = [Partition(0, 100)]
    process = Process("P1", 0, 5, 30)
    index = FirstFit().allocate(process, partitions)
    assert index == 0
    assert partitions[0].owner == "P1"
    assert partitions[0].size == process.memory_required
    assert partitions[1].is_free
    assert partitions[1].start == partitions[0].start + partitions[0].size
    assert partitions[0].size + partitions[1].size == 100


def test_allocate_exact_fit_does_not_split():
    partitions = [Partition(0, 30)]
    BestFit().allocate(Process("P1", 0, 5, 30), partitions)
    assert len(partitions) == 1
    assert partitions[0].owner == "P1"


def test_allocate_prints_assignment(capsys):
    FirstFit().allocate(Process("P7", 0, 5, 10), [Partition(0, 100)])
    assert "Proceso P7 asignado a la partición 0." in capsys.readouterr().out


def test_next_fit_resumes_from_last_index():
    partitions = [Partition(0, 100), Partition(100, 10, "X"), Partition(110, 100)]
    strategy = NextFit(last_index=2)
    assert strategy.allocate(Process("P", 0, 1, 10), partitions) == 2
    assert FirstFit().select(Process("Q", 0, 1, 10), partitions) == 0


def test_next_fit_wraps_around():
    partitions = [Partition(0, 100), Partition(100, 10, "X"), Partition(110, 10, "Y")]
    assert NextFit(last_index=2).select(Process("P", 0, 1, 10), partitions) == 0


def test_next_fit_select_does_not_move_position():
    strategy = NextFit()
    strategy.select(Process("P", 0, 1, 10), [Partition(0, 10, "X"), Partition(10, 50)])
    assert strategy.last_index == 0


def test_next_fit_allocate_records_position():
    strategy = NextFit()
    partitions = [Partition(0, 10, "X"), Partition(10, 50)]
    index = strategy.allocate(Process("P", 0, 1, 20), partitions)
    assert index == 1
    assert strategy.last_index == index


def test_next_fit_empty_partitions():
    assert NextFit().select(Process("P", 0, 1, 1), []) is None