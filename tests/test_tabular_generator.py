import random

import pytest

from memsim.tabular.generator import ask_process_count, generate_processes


def test_generated_processes_are_named_in_order():
    processes = generate_processes(6, random.Random(1))
    assert len(processes) == 6
    assert [p.name for p in processes] == [f"P{i}" for i in range(1, 7)]


def test_generated_values_stay_in_range():
    for process in generate_processes(300, random.Random(42)):
        assert 0 <= process.arrival < 100
        assert 10 <= process.duration < 100
        assert 10 <= process.memory_required < 500
        assert process.start_time is None
        assert process.end_time is None


def test_same_seed_gives_same_batch():
    first = generate_processes(20, random.Random(7))
    second = generate_processes(20, random.Random(7))
    assert first == second


def test_zero_count_gives_empty_batch():
    assert generate_processes(0, random.Random(3)) == []


def test_ask_process_count_retries_until_positive():
    answers = iter(["0", "x", "-3", " 7 "])
    calls = []

    def ask(prompt):
        calls.append(prompt)
        return next(answers)

    assert ask_process_count(ask) == 7
    assert len(calls) == 4


def test_ask_process_count_propagates_end_of_input():
    def ask(prompt):
        raise EOFError

    with pytest.raises(EOFError):
        ask_process_count(ask)