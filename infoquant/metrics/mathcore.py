"""Shared numeric primitives: clamping, logarithms and display formatting.

Every calculator in :mod:`infoquant.metrics` funnels raw input through
:func:`sanitize_probability` and evaluates logarithms through
:func:`log_base`, so the domain conventions live in one place:

- ``log(0)`` is ``-inf`` and ``log(x < 0)`` is ``nan``; nothing here raises.
- ``fmt`` renders non-finite values as an em dash placeholder.
"""

from __future__ import annotations

import logging
import math
import sys
from typing import Any

logger = logging.getLogger(__name__)

PLACEHOLDER = "—"
UNDEFINED_TEXT = "incalculable"


def clamp(value: float, lo: float, hi: float) -> float:
    """Return ``value`` limited to ``[lo, hi]``.

    NaN compares false against both bounds and is returned unchanged.
    """

    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def log_base(x: float, base: float) -> float:
    """Logarithm of ``x`` in ``base`` with real-logarithm edge semantics."""

    if math.isnan(x) or x < 0:
        return math.nan
    if x == 0:
        return -math.inf
    return math.log(x) / math.log(base)


def log2(x: float) -> float:
    """Base-2 logarithm computed as ``ln(x) / ln(2)``."""

    return log_base(x, 2.0)


def fmt(x: float, decimals: int = 4) -> str:
    if isinstance(x, (str, bytes)):
        return PLACEHOLDER
    try:
        value = float(x)
    except (TypeError, ValueError, OverflowError):
        return PLACEHOLDER
    if math.isfinite(value):
        return f"{value:.{decimals}f}"
    return PLACEHOLDER


def to_float(value: Any) -> float:
    """Coerce raw input to float; unparsable input becomes NaN.

    Numbers too large for a float keep their sign as +/- ``sys.float_info.max``
    so they still clamp to the nearest bound.
    """

    try:
        return float(value)
    except OverflowError:
        return math.copysign(sys.float_info.max, 1 if value > 0 else -1)
    except (TypeError, ValueError):
        return math.nan


def is_finite_number(value: Any) -> bool:
    return math.isfinite(to_float(value))


def sanitize_probability(value: Any) -> float:
    """Coerce raw input into a probability in ``[0, 1]``.

    Strings are parsed as floats; anything unparsable or non-finite becomes 0.
    """

    if not is_finite_number(value):
        logger.debug("non-finite probability %r treated as 0", value)
        return 0.0
    number = to_float(value)
    clamped = clamp(number, 0.0, 1.0)
    if clamped != number:
        logger.debug("probability %r clamped to %r", number, clamped)
    return clamped


__all__ = [
    "PLACEHOLDER",
    "UNDEFINED_TEXT",
    "clamp",
    "fmt",
    "is_finite_number",
    "log2",
    "log_base",
    "sanitize_probability",
    "to_float",
]
