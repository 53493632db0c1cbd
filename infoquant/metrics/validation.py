"""Advisory check that a distribution sums to one."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from .mathcore import sanitize_probability

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-6


@dataclass(frozen=True)
class DistributionCheck:
    sum: float
    within_tolerance: bool
    deviation: float
    tolerance: float = DEFAULT_TOLERANCE


def validate(distribution: Iterable[Any], tolerance: float = DEFAULT_TOLERANCE) -> DistributionCheck:
    """Sum the sanitized entries and compare against 1.

    The result is informational only; the distribution itself is not modified
    or renormalized.
    """

    total = sum(sanitize_probability(p) for p in distribution)
    deviation = abs(total - 1.0)
    within = deviation <= tolerance
    if not within:
        logger.warning("distribution sums to %.6f (off by %.6f)", total, deviation)
    return DistributionCheck(sum=total, within_tolerance=within, deviation=deviation, tolerance=tolerance)


__all__ = ["DEFAULT_TOLERANCE", "DistributionCheck", "validate"]
