from __future__ import annotations

import math

import pytest

from infoquant.metrics import LogUnit, compute_entropy


def test_fair_coin_is_one_bit() -> None:
    assert compute_entropy([0.5, 0.5]).value == pytest.approx(1.0)


@pytest.mark.parametrize("dist", [[1, 0, 0, 0], [1.0, 0.0], [1.0]])
def test_certain_outcome_has_zero_entropy(dist) -> None:
    result = compute_entropy(dist)
    assert result.value == 0
    assert not math.isnan(result.value)


def test_zero_terms_use_limit_convention() -> None:
    result = compute_entropy([1.0, 0.0])
    assert result.terms[1] == "- 0 × log₂(0) → 0 (limit convention)"


def test_uniform_four_symbols() -> None:
    assert compute_entropy([0.25] * 4).value == pytest.approx(2.0)


def test_terms_follow_input_order() -> None:
    result = compute_entropy([0.5, 0.25, 0.25])
    assert result.value == pytest.approx(1.5)
    assert result.terms == (
        "- 0.500000 × log₂(0.500000) = 0.500000",
        "- 0.250000 × log₂(0.250000) = 0.500000",
        "- 0.250000 × log₂(0.250000) = 0.500000",
    )


def test_render_appends_total() -> None:
    text = compute_entropy([0.5, 0.5]).render()
    lines = text.splitlines()
    assert lines[0] == "H = - Σ p log₂ p"
    assert lines[1].startswith("  = - 0.500000")
    assert lines[-1] == "  = 1.000000 bit"


def test_empty_distribution() -> None:
    result = compute_entropy([])
    assert result.value == 0.0
    assert "—" in result.render()


def test_unnormalized_input_still_computes() -> None:
    result = compute_entropy([0.5, 0.4])
    expected = -(0.5 * math.log2(0.5) + 0.4 * math.log2(0.4))
    assert result.value == pytest.approx(expected)


def test_negative_entries_contribute_nothing(caplog) -> None:
    with caplog.at_level("WARNING"):
        result = compute_entropy([0.5, 0.5, -0.2])
    assert result.value == pytest.approx(1.0)
    assert "not a probability" in result.terms[2]
    assert "not a probability" in caplog.text


def test_entropy_in_nats() -> None:
    result = compute_entropy([0.5, 0.5], unit="nat")
    assert result.unit is LogUnit.NAT
    assert result.value == pytest.approx(math.log(2))
    assert result.render().splitlines()[-1].endswith("nat")


def test_repeated_calls_are_identical() -> None:
    assert compute_entropy([0.2, 0.3, 0.5]) == compute_entropy([0.2, 0.3, 0.5])


def test_entries_are_coerced_without_raising() -> None:
    result = compute_entropy([0.5, 0.5, 10**400, "abc"])
    assert len(result.terms) == 4
    assert result.probabilities[2] > 1
    assert "not a probability" in result.terms[3]
