from __future__ import annotations

import math

import numpy as np
import pytest

from infoquant.demos import (
    IMPOSSIBLE_BITS,
    PRESETS,
    IntuitionLog,
    QuizState,
    assess,
    get_preset,
    get_scenario,
    match_score,
    password_entropy,
    surprise_to_bits,
)
from infoquant.metrics import validate


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_presets_are_valid_distributions(name: str) -> None:
    assert validate(get_preset(name)).within_tolerance


def test_unknown_preset() -> None:
    with pytest.raises(KeyError, match="Unknown preset"):
        get_preset("loaded")


def test_scenario_lookup() -> None:
    dice = get_scenario("Dice")
    assert dice.probability("rolled a 1") == pytest.approx(1 / 6)
    assert dice.event_names[0] == "rolled a 1"
    with pytest.raises(KeyError):
        dice.probability("rolled a 9")
    with pytest.raises(KeyError):
        get_scenario("roulette")


@pytest.mark.parametrize(
    "level, bits",
    [(1, 0.0), (3, 1.0), (5, 2.0), (6, 6.0), (10, 22.0), (0, 0.0), (12, 22.0)],
)
def test_surprise_to_bits(level: int, bits: float) -> None:
    assert surprise_to_bits(level) == bits


def test_match_score_regimes() -> None:
    # normal range: fair coin, surprise 3 => 1 bit each side
    assert match_score(3, 1.0) == 100.0
    assert match_score(10, 1.0) == 0.0
    # rare events
    assert match_score(7, 13.3) == 85.0
    assert match_score(2, 13.3) == 20.0
    # lottery grade
    assert match_score(8, 26.6) == 90.0
    assert match_score(6, 26.6) == 30.0
    assert match_score(1, math.inf) == 10.0


def test_assess_lottery_event() -> None:
    lottery = get_scenario("lottery")
    result = assess(9, lottery.probability("first prize"))
    assert result.bits == pytest.approx(-math.log2(1e-8))
    assert result.score == 90.0
    assert "Perfect intuition" in result.explanation


def test_assess_coin_event() -> None:
    result = assess(3, 0.5)
    assert result.percent == "50.0000%"
    assert "Excellent intuition" in result.explanation


def test_assess_impossible_event() -> None:
    result = assess(5, 0.0)
    assert math.isinf(result.bits)
    assert "—" in result.explanation


def test_intuition_log_records_and_clears() -> None:
    log = IntuitionLog()
    log.add(surprise=3, probability=0.5, event="heads")
    log.add(surprise=10, probability=0.0, event="rolled a 7")
    surprise, bits = log.to_arrays()
    assert surprise.tolist() == [3, 10]
    assert bits.tolist() == [1.0, IMPOSSIBLE_BITS]
    log.clear()
    empty_surprise, empty_bits = log.to_arrays()
    assert empty_surprise.shape == (0,)
    assert empty_bits.dtype == np.float64


def test_quiz_state() -> None:
    state = QuizState()
    correct, explanation = state.answer("q1", "b")
    assert correct
    assert "2³ = 8" in explanation
    assert state.answer("q2", "b")[0] is False
    assert state.correct_count == 1
    assert not state.passed
    state.answer("q2", "a")
    assert state.passed
    assert state.summary() == "correct: 2/3 (pass)"
    state.reset()
    assert state.correct_count == 0
    with pytest.raises(KeyError):
        state.answer("q9", "a")


@pytest.mark.parametrize(
    "length, char_types, level",
    [(4, 10, "weak"), (8, 62, "moderate"), (12, 62, "strong"), (16, 94, "very strong")],
)
def test_password_levels(length: int, char_types: int, level: str) -> None:
    assert password_entropy(length, char_types).level == level


def test_password_bits_and_guesses() -> None:
    strength = password_entropy(8, 2)
    assert strength.bits == pytest.approx(8.0)
    assert strength.average_guesses == pytest.approx(128.0)
    assert strength.describe().startswith("8.0 bit")


def test_password_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        password_entropy(8, 0)
    with pytest.raises(ValueError):
        password_entropy(-1, 26)
