"""Compare a learner's felt surprise with the theoretical information.

Surprise is a 1-10 slider. Levels 1-5 map linearly onto 0-2 bits and levels
6-10 onto 6-22 bits, so the scale stays usable for lottery-grade events.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from ..metrics.information import information_value
from ..metrics.mathcore import clamp, fmt, sanitize_probability

logger = logging.getLogger(__name__)

MIN_LEVEL = 1
MAX_LEVEL = 10
# Stand-in for P=0 events when recording points on the chart.
IMPOSSIBLE_BITS = 16.0


def _level(value: int) -> int:
  return int(clamp(int(value), MIN_LEVEL, MAX_LEVEL))


def surprise_to_bits(level: int) -> float:
  level = _level(level)
  if level <= 5:
    return (level - 1) * 0.5
  return 2.0 + (level - 5) * 4.0


def theoretical_bits(probability: float) -> float:
  """-log2(P), with impossible events reported as infinite surprise."""

  p = sanitize_probability(probability)
  return math.inf if p == 0 else information_value(p)


def match_score(level: int, bits: float) -> float:
  """Agreement (0-100) between a surprise level and the information in bits."""

  level = _level(level)
  if bits > 20:
    return 90.0 if level >= 8 else max(10.0, 50.0 - (8 - level) * 10.0)
  if bits > 10:
    if level >= 7:
      return 85.0
    return max(20.0, 70.0 - abs(bits - surprise_to_bits(level)) * 5.0)
  return max(0.0, 100.0 - abs(bits - surprise_to_bits(level)) * 15.0)


def explain(level: int, bits: float, score: float) -> str:
  level = _level(level)
  shown = fmt(bits, 1)
  if bits > 20:
    if level >= 9:
      return f"Surprise {level} fits a lottery-grade event ({shown} bit). Perfect intuition!"
    if level >= 7:
      return f"Surprise {level} is a reasonable reaction to a lottery-grade event ({shown} bit)."
    return f"A lottery-grade event ({shown} bit) deserves more surprise!"
  if bits > 10:
    if level >= 7:
      return f"Surprise {level} is a fitting reaction to a very rare event ({shown} bit)."
    return f"This is a rare {shown} bit event. You could be a little more surprised."
  if score > 80:
    return f"Surprise {level} matches {shown} bit of information well. Excellent intuition!"
  if score > 60:
    return f"Surprise {level} roughly matches {shown} bit of information."
  if score > 40:
    return f"Surprise {level} and {shown} bit of information are somewhat apart."
  return f"Surprise {level} and {shown} bit of information are far apart. Practise thinking in logarithms."


@dataclass(frozen=True)
class IntuitionAssessment:
  level: int
  probability: float
  bits: float
  score: float
  explanation: str

  @property
  def percent(self) -> str:
    return f"{self.probability * 100:.4f}%"


def assess(level: int, probability: float) -> IntuitionAssessment:
  """Score a surprise level against an event of the given probability."""

  lvl = _level(level)
  bits = theoretical_bits(probability)
  score = match_score(lvl, bits)
  return IntuitionAssessment(
    level=lvl,
    probability=sanitize_probability(probability),
    bits=bits,
    score=score,
    explanation=explain(lvl, bits, score),
  )


@dataclass(frozen=True)
class IntuitionPoint:
  surprise: int
  theoretical: float
  event: str


@dataclass
class IntuitionLog:
  """Caller-owned record of (surprise, information) points for the chart."""

  points: List[IntuitionPoint] = field(default_factory=list)

  def add(self, *, surprise: int, probability: float, event: str = "") -> IntuitionPoint:
    bits = theoretical_bits(probability)
    point = IntuitionPoint(
      surprise=_level(surprise),
      theoretical=IMPOSSIBLE_BITS if math.isinf(bits) else bits,
      event=event,
    )
    self.points.append(point)
    logger.debug("recorded intuition point %s", point)
    return point

  def clear(self) -> None:
    self.points.clear()

  def __len__(self) -> int:  # pragma: no cover - trivial
    return len(self.points)

  def to_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
    """Return (surprise_levels, theoretical_bits) arrays for plotting."""

    if not self.points:
      return np.zeros(0, dtype=int), np.zeros(0, dtype=float)
    surprise = np.array([point.surprise for point in self.points], dtype=int)
    bits = np.array([point.theoretical for point in self.points], dtype=float)
    return surprise, bits


__all__ = [
  "IMPOSSIBLE_BITS",
  "IntuitionAssessment",
  "IntuitionLog",
  "IntuitionPoint",
  "assess",
  "explain",
  "match_score",
  "surprise_to_bits",
  "theoretical_bits",
]
