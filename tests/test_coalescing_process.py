import dataclasses

import pytest

from memsim.coalescing.process import Process


def test_fields_keep_given_values():
    process = Process("P1", 3, 12, 40)
    assert (process.name, process.arrival, process.duration, process.memory_required) == (
        "P1",
        3,
        12,
        40,
    )


def test_equal_when_all_fields_match():
    processes = [Process("P1", 3, 12, 40), Process("P2", 3, 12, 40)]
    assert processes.count(Process("P1", 3, 12, 40)) == 1


def test_differs_when_any_field_differs():
    base = Process("P1", 3, 12, 40)
    assert base != dataclasses.replace(base, memory_required=41)
    assert base != dataclasses.replace(base, name="P2")


def test_is_immutable():
    process = Process("P1", 3, 12, 40)
    with pytest.raises(dataclasses.FrozenInstanceError):
        process.arrival = 5  # type: ignore[misc]
    assert process.arrival == 3


def test_hashable_and_deduplicated_in_sets():
    processes = {Process("P1", 0, 1, 10), Process("P1", 0, 1, 10), Process("P2", 0, 1, 10)}
    assert len(processes) == 2