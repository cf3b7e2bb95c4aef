import pytest

from memsim.timeline.models import Partition, Process
from memsim.timeline.strategies import (
    best_fit,
    first_fit,
    next_fit,
    worst_fit,
)


def _layout():
    return [
        Partition(0, 0, 50),
        Partition(1, 50, 30, owner="X"),
        Partition(2, 80, 20),
    ]


@pytest.mark.parametrize("place", [first_fit, best_fit, worst_fit])
def test_split_conserves_memory(place):
    partitions = [Partition(0, 0, 100)]
    result = place(partitions, Process("A", 0, 5, 30))
    assert result == 0
    assert sum(p.size for p in partitions) == 100
    assert partitions[0].owner == "A"
    assert partitions[0].size == 30
    assert partitions[1].start == partitions[0].start + partitions[0].size
    assert partitions[1].is_free()


def test_remainder_id_is_previous_length():
    partitions = [Partition(5, 0, 10)]
    before = len(partitions)
    first_fit(partitions, Process("A", 0, 1, 4))
    assert partitions[1].id == before


def test_exact_fit_does_not_split():
    partitions = [Partition(0, 0, 40)]
    first_fit(partitions, Process("A", 0, 1, 40))
    assert len(partitions) == 1
    assert not partitions[0].is_free()


def test_first_fit_takes_first_candidate():
    partitions = _layout()
    expected = partitions[0].id
    assert first_fit(partitions, Process("A", 0, 1, 15)) == expected


def test_best_fit_takes_tightest():
    partitions = _layout()
    expected = partitions[2].id
    assert best_fit(partitions, Process("A", 0, 1, 15)) == expected


def test_worst_fit_takes_largest():
    partitions = _layout()
    expected = partitions[0].id
    assert worst_fit(partitions, Process("A", 0, 1, 15)) == expected


@pytest.mark.parametrize("place", [first_fit, best_fit, worst_fit])
def test_no_room_returns_none(place):
    partitions = _layout()
    assert place(partitions, Process("A", 0, 1, 60)) is None
    assert [p.owner for p in partitions] == [None, "X", None]


def test_worst_fit_ignores_empty_partitions():
    partitions = [Partition(0, 0, 0)]
    assert worst_fit(partitions, Process("A", 0, 1, 0)) is None
    assert first_fit(partitions, Process("A", 0, 1, 0)) == partitions[0].id


def test_next_fit_resumes_after_last():
    partitions = [Partition(0, 0, 30), Partition(1, 30, 70)]
    expected = partitions[1].id
    assert next_fit(partitions, Process("A", 0, 1, 10), partitions[0].id) == expected
    assert partitions[0].is_free()


def test_next_fit_wraps_round():
    partitions = [Partition(0, 0, 30), Partition(1, 30, 70, owner="X")]
    expected = partitions[0].id
    assert next_fit(partitions, Process("A", 0, 1, 10), partitions[1].id) == expected


def test_next_fit_without_last_starts_at_beginning():
    partitions = [Partition(0, 0, 30), Partition(1, 30, 70)]
    expected = partitions[0].id
    assert next_fit(partitions, Process("A", 0, 1, 10), None) == expected


def test_next_fit_no_room():
    partitions = [Partition(0, 0, 30, owner="X")]
    assert next_fit(partitions, Process("A", 0, 1, 10), None) is None