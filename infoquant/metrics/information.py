"""Information quantity of a single event, I(p) = -log p.

The calculator is total: every input produces an :class:`InformationResult`.
Problems are reported through :class:`Outcome` and a NaN value instead of
exceptions, so callers can render whatever comes back.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Any, Tuple, Union

from .mathcore import UNDEFINED_TEXT, clamp, fmt, is_finite_number, to_float
from .units import LogUnit, select_base


class Outcome(enum.Enum):
    OK = "ok"
    INVALID_INPUT = "invalid_input"
    UNDEFINED = "undefined"


@dataclass(frozen=True)
class InformationResult:
    """Value of one information computation plus its derivation trace."""

    probability: float
    value: float
    unit: LogUnit
    kind: Outcome
    trace: Tuple[str, ...]

    @property
    def is_defined(self) -> bool:
        return self.kind is Outcome.OK

    def display(self, decimals: int = 4) -> str:
        if not self.is_defined:
            return UNDEFINED_TEXT
        return f"{fmt(self.value, decimals)} {self.unit.label}"

    def render(self) -> str:
        return "\n".join(self.trace)


def format_number(value: float) -> str:
    """Shortest readable rendering of a substituted input value."""

    return f"{value:.15g}"


def information_value(p: float, unit: LogUnit = LogUnit.BIT) -> float:
    """-log(p) for an already clamped probability; NaN when p is 0."""

    if p <= 0:
        return math.nan
    value = -unit.log(p)
    # -log(1) is -0.0
    return 0.0 if value == 0 else value


def compute_information(
    p: Any,
    unit: Union[LogUnit, str, None] = LogUnit.BIT,
    decimals: int = 6,
) -> InformationResult:
    """Information carried by an event of probability ``p``.

    Non-finite input yields ``Outcome.INVALID_INPUT``; finite input is clamped
    to ``[0, 1]`` first, so ``p == 0`` (including anything below 0) is the only
    ``Outcome.UNDEFINED`` case.
    """

    selected = select_base(unit)
    if not is_finite_number(p):
        return InformationResult(
            probability=math.nan,
            value=math.nan,
            unit=selected,
            kind=Outcome.INVALID_INPUT,
            trace=("invalid input",),
        )

    prob = clamp(to_float(p), 0.0, 1.0)
    if prob == 0:
        return InformationResult(
            probability=prob,
            value=math.nan,
            unit=selected,
            kind=Outcome.UNDEFINED,
            trace=(f"P=0 ⇒ {selected.symbol}0 undefined.",),
        )

    value = information_value(prob, selected)
    symbol = selected.symbol
    trace = (
        f"I = -{symbol}(P)",
        f"  = -{symbol}({format_number(prob)})",
        f"  = -1 × {fmt(selected.log(prob), decimals)}",
        f"  = {fmt(value, decimals)} {selected.label}",
    )
    return InformationResult(
        probability=prob,
        value=value,
        unit=selected,
        kind=Outcome.OK,
        trace=trace,
    )


__all__ = [
    "InformationResult",
    "Outcome",
    "compute_information",
    "format_number",
    "information_value",
]
