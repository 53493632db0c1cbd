"""Preset inputs used by the worked examples."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

# Coin toss presets: heads, tails, lands on edge, (unused slot).
PRESETS: Dict[str, Tuple[float, float, float, float]] = {
  "fair": (0.5, 0.5, 0.0, 0.0),
  "biased": (0.6, 0.4, 0.0, 0.0),
  "trick": (1.0, 0.0, 0.0, 0.0),
  "stand": (0.49995, 0.49995, 0.0001, 0.0),
}


@dataclass(frozen=True)
class Scenario:
  """A situation with a handful of events of very different probability."""

  key: str
  title: str
  description: str
  events: Mapping[str, float]

  @property
  def event_names(self) -> List[str]:
    return list(self.events)

  def probability(self, event: str) -> float:
    try:
      return self.events[event]
    except KeyError:
      raise KeyError(f"Unknown event {event!r} for scenario {self.key!r}") from None


SCENARIOS: Dict[str, Scenario] = {
  "coin": Scenario(
    key="coin",
    title="Coin toss",
    description="Tossing an ordinary coin...",
    events={
      "heads": 0.5,
      "tails": 0.5,
      "lands on its edge": 0.0001,
      "breaks in two": 0.00001,
    },
  ),
  "dice": Scenario(
    key="dice",
    title="Dice",
    description="Rolling a standard six-sided die...",
    events={
      "rolled a 1": 1 / 6,
      "rolled an even number": 0.5,
      "rolled a 7": 0.0,
      "every face shows the same number": 0.000001,
    },
  ),
  "lottery": Scenario(
    key="lottery",
    title="Lottery",
    description="Buying a year-end jumbo lottery ticket...",
    events={
      "no prize": 0.999,
      "smallest prize": 0.0009,
      "first prize": 0.00000001,
      "struck by a meteorite": 0.0000000001,
    },
  ),
  "weather": Scenario(
    key="weather",
    title="Weather forecast",
    description="Tomorrow's weather turns out to be...",
    events={
      "sunny": 0.4,
      "rain": 0.3,
      "snow (in summer)": 0.0001,
      "meteor shower": 0.0000000001,
    },
  ),
}


def get_preset(name: str) -> Tuple[float, float, float, float]:
  key = name.strip().lower()
  if key not in PRESETS:
    raise KeyError(f"Unknown preset {name!r} (expected one of {sorted(PRESETS)})")
  return PRESETS[key]


def get_scenario(name: str) -> Scenario:
  key = name.strip().lower()
  if key not in SCENARIOS:
    raise KeyError(f"Unknown scenario {name!r} (expected one of {sorted(SCENARIOS)})")
  return SCENARIOS[key]


__all__ = ["PRESETS", "SCENARIOS", "Scenario", "get_preset", "get_scenario"]
