"""Display settings shared by the CLI and the chart helpers."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional, Union

from .metrics.units import LogUnit, select_base
from .metrics.validation import DEFAULT_TOLERANCE


@dataclass
class DisplayConfig:
  decimals: int = 4
  trace_decimals: int = 6
  tolerance: float = DEFAULT_TOLERANCE
  unit: str = "bit"
  theme: str = "dark"

  @property
  def log_unit(self) -> LogUnit:
    return select_base(self.unit)

  def to_dict(self) -> dict:
    return asdict(self)


def load_config(path: Optional[Union[str, Path]] = None) -> DisplayConfig:
  """Read a JSON object of overrides; ``None`` returns the defaults."""

  if path is None:
    return DisplayConfig()
  payload = json.loads(Path(path).read_text())
  if not isinstance(payload, dict):
    raise ValueError(f"{path}: expected a JSON object")
  known = {f.name for f in fields(DisplayConfig)}
  unknown = sorted(set(payload) - known)
  if unknown:
    raise ValueError(f"{path}: unknown config keys {unknown}")
  return DisplayConfig(**payload)


__all__ = ["DisplayConfig", "load_config"]
