import pytest

from memsim.coalescing.config import (
    Strategy,
    TimingConfig,
    capture_configuration,
    parse_number,
    strategy_from_option,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", 42),
        ("  7 \n", 7),
        ("+5", 5),
        ("16384", 16384),
    ],
)
def test_parse_number_valid(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["abc", "-3", "", "1_0", "4.5", "4294967296"])
def test_parse_number_invalid_is_zero(text):
    assert parse_number(text) == 0


@pytest.mark.parametrize(
    ("option", "strategy"),
    [
        (1, Strategy.FIRST_FIT),
        (2, Strategy.BEST_FIT),
        (3, Strategy.WORST_FIT),
        (4, Strategy.NEXT_FIT),
    ],
)
def test_strategy_from_option(option, strategy):
    assert strategy_from_option(option) is strategy


@pytest.mark.parametrize("option", [0, 5, -1])
def test_strategy_from_invalid_option_raises(option):
    with pytest.raises(ValueError):
        strategy_from_option(option)


def test_strategy_display_names():
    names = [str(strategy_from_option(option)) for option in range(1, 5)]
    assert names == ["First-Fit", "Best-Fit", "Worst-Fit", "Next-Fit"]


def _scripted(answers):
    prompts = []
    replies = iter(answers)

    def ask(prompt):
        prompts.append(prompt)
        return next(replies)

    return ask, prompts


def test_capture_configuration_reads_every_field():
    ask, prompts = _scripted(["1024", "2", "5", "6", "7"])
    config = capture_configuration(ask)
    assert config == TimingConfig(1024, Strategy.BEST_FIT, 5, 6, 7)
    assert prompts[0] == "Tamaño de la memoria: "
    assert prompts[-1] == "Tiempo de liberación: "


def test_capture_configuration_retries_invalid_strategy(capsys):
    ask, prompts = _scripted(["2048", "9", "x", "4", "1", "1", "1"])
    config = capture_configuration(ask)
    assert config.strategy is Strategy.NEXT_FIT
    assert prompts.count("Ingrese el número de la estrategia (1-4): ") == 3
    out = capsys.readouterr().out
    assert out.count("Opción no válida. Por favor, seleccione una estrategia entre 1 y 4.") == 2


def test_capture_configuration_bad_numbers_become_zero():
    ask, _ = _scripted(["lots", "1", "", "-1", "abc"])
    config = capture_configuration(ask)
    assert config == TimingConfig(0, Strategy.FIRST_FIT, 0, 0, 0)