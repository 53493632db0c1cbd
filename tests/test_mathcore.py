from __future__ import annotations

import math
import sys
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from infoquant.metrics.mathcore import (
    PLACEHOLDER,
    clamp,
    fmt,
    is_finite_number,
    log2,
    log_base,
    sanitize_probability,
    to_float,
)


def test_clamp_bounds() -> None:
    assert clamp(-0.5, 0.0, 1.0) == 0.0
    assert clamp(1.5, 0.0, 1.0) == 1.0
    assert clamp(0.25, 0.0, 1.0) == 0.25


def test_clamp_passes_nan_through() -> None:
    assert math.isnan(clamp(math.nan, 0.0, 1.0))


def test_log2_edges() -> None:
    assert log2(0.5) == pytest.approx(-1.0)
    assert log2(8) == pytest.approx(3.0)
    assert log2(0) == -math.inf
    assert math.isnan(log2(-1))
    assert math.isnan(log2(math.nan))


def test_log_base_ten() -> None:
    assert log_base(1000, 10) == pytest.approx(3.0)


def test_fmt() -> None:
    assert fmt(1.0) == "1.0000"
    assert fmt(1 / 3, 6) == "0.333333"
    assert fmt(math.nan) == PLACEHOLDER
    assert fmt(math.inf) == PLACEHOLDER
    assert fmt(-math.inf, 2) == PLACEHOLDER


@pytest.mark.parametrize(
    "value",
    [np.float32(0.5), np.float64(0.5), np.int64(0), Fraction(1, 2), Decimal("0.5")],
)
def test_fmt_accepts_any_finite_real(value) -> None:
    expected = "0.0000" if value == 0 else "0.5000"
    assert fmt(value) == expected


def test_fmt_rejects_text_and_non_finite_numpy() -> None:
    assert fmt("0.5") == PLACEHOLDER
    assert fmt(None) == PLACEHOLDER
    assert fmt(np.float32("nan")) == PLACEHOLDER


def test_to_float_keeps_sign_of_huge_integers() -> None:
    assert to_float(10**400) == sys.float_info.max
    assert to_float(-(10**400)) == -sys.float_info.max
    assert is_finite_number(10**400)
    assert math.isnan(to_float("abc"))


@pytest.mark.parametrize(
    "raw, expected",
    [
        (0.3, 0.3),
        ("0.75", 0.75),
        (-2, 0.0),
        (7, 1.0),
        (math.nan, 0.0),
        (math.inf, 0.0),
        ("abc", 0.0),
        (None, 0.0),
        (10**400, 1.0),
        (-(10**400), 0.0),
        (np.float32(0.25), 0.25),
    ],
)
def test_sanitize_probability(raw, expected) -> None:
    assert sanitize_probability(raw) == expected
