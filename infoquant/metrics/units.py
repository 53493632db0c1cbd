"""Information units: the same formulas expressed with log base 2, e or 10."""

from __future__ import annotations

import enum
import logging
import math
from typing import List, Tuple, Union

from .mathcore import log_base

logger = logging.getLogger(__name__)


class LogUnit(enum.Enum):
    """Closed set of information units, each tied to a logarithm base."""

    BIT = (2.0, "bit", "log₂")
    NAT = (math.e, "nat", "ln")
    DIT = (10.0, "dit", "log₁₀")

    def __init__(self, base: float, label: str, symbol: str) -> None:
        self.base = base
        self.label = label
        self.symbol = symbol

    def log(self, x: float) -> float:
        """Logarithm of ``x`` in this unit's base (``-inf`` at 0, ``nan`` below)."""

        return log_base(x, self.base)


_ALIASES = {
    "bit": LogUnit.BIT,
    "2": LogUnit.BIT,
    "nat": LogUnit.NAT,
    "e": LogUnit.NAT,
    "dit": LogUnit.DIT,
    "10": LogUnit.DIT,
}

REFERENCE_PROBABILITIES = (0.5, 0.25, 0.1)


def select_base(unit: Union[LogUnit, str, None] = None) -> LogUnit:
    """Resolve a unit selector; anything unrecognised falls back to bits."""

    if isinstance(unit, LogUnit):
        return unit
    key = str(unit).strip().lower() if unit is not None else ""
    selected = _ALIASES.get(key)
    if selected is None:
        logger.debug("unknown unit %r, defaulting to bit", unit)
        return LogUnit.BIT
    return selected


def reference_table(unit: Union[LogUnit, str, None] = None) -> List[Tuple[float, float]]:
    """Information of P=0.5, 0.25 and 0.1 in the selected unit."""

    selected = select_base(unit)
    return [(p, -selected.log(p)) for p in REFERENCE_PROBABILITIES]


__all__ = ["LogUnit", "REFERENCE_PROBABILITIES", "reference_table", "select_base"]
