"""Joint information of independent events and the additivity identity.

For independent A and B, P(A∧B) = P(A)·P(B) and therefore
I(A∧B) = I(A) + I(B). :func:`compute_joint` returns both sides so the caller
can show the comparison; it never asserts the identity itself.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Union

from .information import information_value
from .mathcore import clamp, fmt, sanitize_probability, to_float
from .units import LogUnit, select_base

MATCH_TOLERANCE = 1e-3
MAX_APARTMENT_SIDE = 1000


def additivity_match(iab: float, total: float) -> float:
    """Percentage agreement between I(A∧B) and I(A) + I(B).

    Returns NaN if either side is undefined.
    """

    gap = abs(iab - total)
    if math.isnan(gap):
        return math.nan
    if gap < MATCH_TOLERANCE:
        return 100.0
    return max(0.0, 100.0 - gap * 100.0)


@dataclass(frozen=True)
class JointResult:
    pa: float
    pb: float
    ia: float
    ib: float
    pab: float
    iab: float
    total: float
    unit: LogUnit = LogUnit.BIT

    @property
    def match(self) -> float:
        return additivity_match(self.iab, self.total)

    def trace(self, decimals: int = 6) -> List[str]:
        symbol = self.unit.symbol
        return [
            f"independent events: P(A∧B) = P(A) × P(B) = {fmt(self.pa)} × {fmt(self.pb)} = {fmt(self.pab)}",
            f"I(A)   = -{symbol} P(A) = {fmt(self.ia, decimals)}",
            f"I(B)   = -{symbol} P(B) = {fmt(self.ib, decimals)}",
            f"I(A∧B) = -{symbol} P(A∧B) = -{symbol}({fmt(self.pab)}) = {fmt(self.iab, decimals)}",
            "",
            f"check:  I(A∧B)  = I(A) + I(B)  ≈  {fmt(self.total, decimals)}",
        ]


def compute_joint(
    pa: Any,
    pb: Any,
    unit: Union[LogUnit, str, None] = LogUnit.BIT,
) -> JointResult:
    """Information of A, B and of their conjunction assuming independence."""

    selected = select_base(unit)
    prob_a = sanitize_probability(pa)
    prob_b = sanitize_probability(pb)
    prob_ab = prob_a * prob_b
    ia = information_value(prob_a, selected)
    ib = information_value(prob_b, selected)
    return JointResult(
        pa=prob_a,
        pb=prob_b,
        ia=ia,
        ib=ib,
        pab=prob_ab,
        iab=information_value(prob_ab, selected),
        total=ia + ib,
        unit=selected,
    )


@dataclass(frozen=True)
class ApartmentResult:
    """Locating a room = locating the floor + locating the room on it."""

    floors: int
    rooms: int
    floor_bits: float
    room_bits: float
    total_bits: float

    @property
    def total_rooms(self) -> int:
        return self.floors * self.rooms

    def trace(self, decimals: int = 6) -> List[str]:
        return [
            f"total rooms = floors × rooms per floor = {self.floors} × {self.rooms} = {self.total_rooms}",
            f"I(floor)   = -log₂(1/{self.floors}) = {fmt(self.floor_bits, decimals)} bit",
            f"I(room)    = -log₂(1/{self.rooms}) = {fmt(self.room_bits, decimals)} bit",
            f"I(address) = -log₂(1/{self.total_rooms}) = {fmt(self.total_bits, decimals)} bit",
            "",
            f"check: I(floor) + I(room) = {fmt(self.floor_bits + self.room_bits, decimals)}"
            f" ≟ I(address) = {fmt(self.total_bits, decimals)}",
        ]


def _count(value: Any) -> int:
    number = to_float(value)
    if not math.isfinite(number) or number < 1:
        return 1
    return int(clamp(math.floor(number), 1, MAX_APARTMENT_SIDE))


def apartment_information(floors: Any, rooms: Any) -> ApartmentResult:
    """Bits needed to pick a floor, a room on it, and the room overall."""

    f = _count(floors)
    r = _count(rooms)
    return ApartmentResult(
        floors=f,
        rooms=r,
        floor_bits=information_value(1 / f),
        room_bits=information_value(1 / r),
        total_bits=information_value(1 / (f * r)),
    )


__all__ = [
    "ApartmentResult",
    "JointResult",
    "MATCH_TOLERANCE",
    "additivity_match",
    "apartment_information",
    "compute_joint",
]
