"""infoquant: information quantity and entropy, worked step by step.

This package bundles:

- ``infoquant.metrics``: the numeric core (information quantity, additivity,
  entropy, unit conversion, distribution checks).
- ``infoquant.demos``: the worked examples (presets, surprise vs. information,
  quiz, password strength).
- ``infoquant.viz``: matplotlib charts (import ``infoquant.viz.plots``).

The most common calculators are re-exported at the top level:

- ``compute_information``, ``compute_joint``, ``compute_entropy``
- ``select_base`` / ``LogUnit``
- ``validate``

"""

from __future__ import annotations

from .metrics import (
  LogUnit,
  Outcome,
  compute_entropy,
  compute_information,
  compute_joint,
  select_base,
  validate,
)

__version__ = "0.1.0"

__all__ = [
  "LogUnit",
  "Outcome",
  "compute_entropy",
  "compute_information",
  "compute_joint",
  "select_base",
  "validate",
]

# Optional convenience: expose subpackages for discoverability.
from . import demos, metrics, viz  # noqa: E402,F401
