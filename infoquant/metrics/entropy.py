"""Shannon entropy of a discrete distribution, H = -Σ p log p.

Zero-probability symbols contribute exactly 0 (the limit of p log p as p
approaches 0) and are never passed through the logarithm. The distribution is
used as given: normalization is checked separately by
:mod:`infoquant.metrics.validation`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from .mathcore import fmt, to_float
from .units import LogUnit, select_base

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntropyResult:
    """Entropy value plus one display line per symbol."""

    value: float
    unit: LogUnit
    terms: Tuple[str, ...]
    probabilities: Tuple[float, ...]

    def render(self, decimals: int = 6) -> str:
        body = "  +\n    ".join(self.terms) if self.terms else "—"
        return "\n".join(
            [
                f"H = - Σ p {self.unit.symbol} p",
                f"  = {body}",
                f"  = {fmt(self.value, decimals)} {self.unit.label}",
            ]
        )


def compute_entropy(
    distribution: Iterable[float],
    unit: Union[LogUnit, str, None] = LogUnit.BIT,
) -> EntropyResult:
    """Entropy of ``distribution`` in the selected unit.

    Entries that are negative or not finite are not probabilities: they add 0
    to the total, get a marker line in the trace, and are logged as warnings.
    """

    selected = select_base(unit)
    symbol = selected.symbol
    probabilities = tuple(to_float(p) for p in distribution)

    entropy = 0.0
    terms = []
    for p in probabilities:
        if p > 0 and math.isfinite(p):
            term = -p * selected.log(p)
            entropy += term
            terms.append(f"- {p:.6f} × {symbol}({p:.6f}) = {term:.6f}")
        elif p == 0:
            terms.append(f"- 0 × {symbol}(0) → 0 (limit convention)")
        else:
            logger.warning("ignoring %r in entropy: not a probability", p)
            terms.append(f"- {p} is not a probability → 0")

    # -1 × log(1) leaves -0.0 behind
    if entropy == 0:
        entropy = 0.0
    return EntropyResult(
        value=entropy,
        unit=selected,
        terms=tuple(terms),
        probabilities=probabilities,
    )


__all__ = ["EntropyResult", "compute_entropy"]
