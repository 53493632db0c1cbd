"""Password strength estimated as length × log2(alphabet size)."""

from __future__ import annotations

from dataclasses import dataclass

from ..metrics.mathcore import fmt, log2

# (exclusive lower bound in bits, label), checked from the top.
LEVELS = (
  (80.0, "very strong"),
  (60.0, "strong"),
  (40.0, "moderate"),
)
WEAK = "weak"


@dataclass(frozen=True)
class PasswordStrength:
  length: int
  char_types: int
  bits: float

  @property
  def average_guesses(self) -> float:
    """Expected brute-force attempts: half the keyspace, 2**(bits-1)."""

    try:
      return 2.0 ** (self.bits - 1)
    except OverflowError:
      return float("inf")

  @property
  def level(self) -> str:
    for threshold, label in LEVELS:
      if self.bits > threshold:
        return label
    return WEAK

  def describe(self) -> str:
    return f"{fmt(self.bits, 1)} bit, ~{self.average_guesses:.1e} guesses, {self.level}"


def password_entropy(length: int, char_types: int) -> PasswordStrength:
  if length < 0:
    raise ValueError("length must be non-negative")
  if char_types < 1:
    raise ValueError("char_types must be at least 1")
  return PasswordStrength(length=length, char_types=char_types, bits=length * log2(char_types))


__all__ = ["PasswordStrength", "password_entropy"]
