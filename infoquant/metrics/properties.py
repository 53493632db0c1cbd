"""Properties of the information function: continuity and monotonic decay."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Tuple

import numpy as np

from .information import information_value
from .mathcore import sanitize_probability


class ContinuityVerdict(enum.Enum):
    CONTINUOUS = "continuity preserved"
    NEARLY = "nearly continuous"
    JUMP = "large change"


@dataclass(frozen=True)
class ContinuityResult:
    p1: float
    p2: float
    i1: float
    i2: float

    @property
    def p_diff(self) -> float:
        return abs(self.p2 - self.p1)

    @property
    def i_diff(self) -> float:
        return abs(self.i2 - self.i1)

    @property
    def verdict(self) -> ContinuityVerdict:
        # NaN differences fail both comparisons and fall through to JUMP
        if self.p_diff < 0.1 and self.i_diff < 1.0:
            return ContinuityVerdict.CONTINUOUS
        if self.p_diff < 0.2:
            return ContinuityVerdict.NEARLY
        return ContinuityVerdict.JUMP


def continuity_check(p1: Any, p2: Any) -> ContinuityResult:
    """Compare how far I moves when P moves from ``p1`` to ``p2``."""

    a = sanitize_probability(p1)
    b = sanitize_probability(p2)
    return ContinuityResult(p1=a, p2=b, i1=information_value(a), i2=information_value(b))


def information_curve(
    samples: int = 400,
    floor: float = 1e-6,
    cap: float = 8.0,
) -> Tuple[np.ndarray, np.ndarray]:
    """Sample ``I = -log2 P`` on ``[floor, 1]`` with the values capped at ``cap``.

    P=0 is never evaluated; the curve starts at ``floor`` instead.
    """

    if samples < 2:
        raise ValueError("samples must be at least 2")
    if not 0 < floor < 1:
        raise ValueError("floor must lie in (0, 1)")
    probs = np.clip(np.linspace(0.0, 1.0, samples), floor, 1.0)
    bits = np.minimum(-np.log2(probs), cap)
    # abs() turns -0.0 at P=1 into 0.0
    return probs, np.abs(bits)


__all__ = [
    "ContinuityResult",
    "ContinuityVerdict",
    "continuity_check",
    "information_curve",
]
