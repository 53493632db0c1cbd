from __future__ import annotations

import math

import pytest

from infoquant.metrics import additivity_match, apartment_information, compute_joint


def test_fair_coins() -> None:
    result = compute_joint(0.5, 0.5)
    assert result.ia == pytest.approx(1.0)
    assert result.ib == pytest.approx(1.0)
    assert result.pab == pytest.approx(0.25)
    assert result.iab == pytest.approx(2.0)
    assert result.total == pytest.approx(2.0)
    assert result.match == 100.0


@pytest.mark.parametrize("pa, pb", [(0.3, 0.4), (0.9, 0.01), (1.0, 0.125), (1e-4, 0.7)])
def test_additivity_law(pa: float, pb: float) -> None:
    result = compute_joint(pa, pb)
    assert result.iab == pytest.approx(result.ia + result.ib, abs=1e-9)


def test_zero_input_propagates_undefined() -> None:
    result = compute_joint(0.0, 0.5)
    assert math.isnan(result.ia)
    assert result.ib == pytest.approx(1.0)
    assert result.pab == 0.0
    assert math.isnan(result.iab)
    assert math.isnan(result.total)
    assert math.isnan(result.match)


def test_inputs_are_sanitized() -> None:
    result = compute_joint(math.nan, 3.0)
    assert result.pa == 0.0
    assert result.pb == 1.0
    assert result.ib == 0.0


def test_trace_mentions_both_sides() -> None:
    lines = compute_joint(0.5, 0.25).trace()
    assert lines[0].endswith("0.5000 × 0.2500 = 0.1250")
    assert lines[3].endswith("= 3.000000")
    assert lines[-1].endswith("3.000000")


def test_trace_uses_placeholder_for_undefined() -> None:
    lines = compute_joint(0, 0.5).trace()
    assert lines[1].endswith("= —")


@pytest.mark.parametrize(
    "iab, total, expected",
    [
        (2.0, 2.0, 100.0),
        (2.0, 2.0005, 100.0),
        (2.0, 2.1, pytest.approx(90.0)),
        (2.0, 5.0, 0.0),
    ],
)
def test_additivity_match(iab: float, total: float, expected) -> None:
    assert additivity_match(iab, total) == expected


def test_apartment_example() -> None:
    result = apartment_information(8, 4)
    assert result.total_rooms == 32
    assert result.floor_bits == pytest.approx(3.0)
    assert result.room_bits == pytest.approx(2.0)
    assert result.total_bits == pytest.approx(5.0)
    assert "8 × 4 = 32" in result.trace()[0]


def test_apartment_inputs_are_bounded() -> None:
    result = apartment_information(0, 5000.7)
    assert result.floors == 1
    assert result.rooms == 1000
    assert result.floor_bits == 0.0
    assert apartment_information(math.nan, 2.9).rooms == 2


def test_huge_integers_are_clamped() -> None:
    result = compute_joint(10**400, 0.5)
    assert result.pa == 1.0
    assert result.iab == pytest.approx(1.0)
    assert result.total == pytest.approx(1.0)
    assert apartment_information(10**400, 4).floors == 1000
