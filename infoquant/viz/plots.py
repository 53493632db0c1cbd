"""Plotting helpers for the information-quantity charts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from ..demos.intuition import IMPOSSIBLE_BITS, IntuitionLog
from ..metrics.entropy import EntropyResult
from ..metrics.information import information_value
from ..metrics.mathcore import sanitize_probability
from ..metrics.properties import information_curve


@dataclass(frozen=True)
class Theme:
  name: str
  background: str
  text: str
  muted: str
  frame: str
  curve: str
  exp_curve: str
  identity: str
  log_curve: str
  marker: str
  point: str


THEMES = {
  "dark": Theme(
    name="dark",
    background="#0b1220",
    text="#dfe9ff",
    muted="#9fb0c3",
    frame="#2a3b57",
    curve="#5aa9ff",
    exp_curve="#7aa6ff",
    identity="#ffd166",
    log_curve="#4dd0e1",
    marker="#ff6b6b",
    point="#49d492",
  ),
  "light": Theme(
    name="light",
    background="#ffffff",
    text="#495057",
    muted="#6c757d",
    frame="#6c757d",
    curve="#0066cc",
    exp_curve="#4d7fff",
    identity="#ffc107",
    log_curve="#17a2b8",
    marker="#dc3545",
    point="#28a745",
  ),
}


def get_theme(name: Optional[str] = None) -> Theme:
  """Look up a palette by name; anything unknown gets the dark theme."""

  return THEMES.get((name or "dark").lower(), THEMES["dark"])


def _prepare(ax: Optional[plt.Axes], theme: Theme) -> plt.Axes:
  if ax is None:
    _, ax = plt.subplots()
  ax.set_facecolor(theme.background)
  for spine in ax.spines.values():
    spine.set_color(theme.frame)
  ax.tick_params(colors=theme.muted)
  ax.xaxis.label.set_color(theme.text)
  ax.yaxis.label.set_color(theme.text)
  ax.title.set_color(theme.text)
  return ax


def plot_information_curve(
  ax: Optional[plt.Axes] = None,
  theme: Optional[Theme] = None,
  cap: float = 8.0,
  samples: int = 400,
) -> plt.Axes:
  """I = -log2 P over (0, 1], capped at ``cap`` bits near P=0."""

  theme = theme or get_theme()
  ax = _prepare(ax, theme)
  probs, bits = information_curve(samples=samples, cap=cap)
  ax.plot(probs, bits, color=theme.curve, linewidth=2, label="I = -log₂P")
  ax.set_xlim(0.0, 1.0)
  ax.set_ylim(0.0, cap)
  ax.set_xticks([0.0, 0.25, 0.5, 0.75, 1.0])
  ax.set_yticks(np.arange(0, cap + 1, 2))
  ax.set_xlabel("P")
  ax.set_ylabel("I (bit)")
  return ax


def plot_function_comparison(
  base: float = 2.0,
  ax: Optional[plt.Axes] = None,
  theme: Optional[Theme] = None,
  samples: int = 400,
) -> plt.Axes:
  """y = a^x, y = x and y = log_a x on x ∈ [0, 4], y ∈ [-4, 16]."""

  if base <= 0 or base == 1:
    raise ValueError("base must be positive and different from 1")
  theme = theme or get_theme()
  ax = _prepare(ax, theme)
  ymin, ymax = -4.0, 16.0

  xs = np.linspace(0.0, 4.0, samples + 1)
  exp_y = np.power(base, xs)
  visible = (exp_y >= ymin) & (exp_y <= ymax)
  ax.plot(xs[visible], exp_y[visible], color=theme.exp_curve, linewidth=2, label=f"y = {base:g}^x")

  ax.plot([0.0, 4.0], [0.0, 4.0], color=theme.identity, linewidth=2, label="y = x")

  log_x = xs[1:]
  log_y = np.log(log_x) / np.log(base)
  visible = (log_y >= ymin) & (log_y <= ymax)
  ax.plot(log_x[visible], log_y[visible], color=theme.log_curve, linewidth=2, label=f"y = log_{base:g} x")

  ax.axhline(0.0, color=theme.frame, linewidth=0.5)
  ax.axvline(0.0, color=theme.frame, linewidth=0.5)
  ax.set_xlim(0.0, 4.0)
  ax.set_ylim(ymin, ymax)
  ax.set_xlabel("x")
  ax.set_ylabel("y")
  ax.legend(loc="upper left")
  return ax


def plot_monotonic(
  current_p: float,
  ax: Optional[plt.Axes] = None,
  theme: Optional[Theme] = None,
  cap: float = 8.0,
) -> plt.Axes:
  """Information curve with the currently selected probability highlighted."""

  theme = theme or get_theme()
  ax = plot_information_curve(ax=ax, theme=theme, cap=cap)
  p = max(sanitize_probability(current_p), 1e-3)
  ax.scatter([p], [min(information_value(p), cap)], color=theme.marker, s=48, zorder=3)
  ax.set_xticks([0.0, 0.25, 0.5, 0.75, 1.0])
  return ax


def plot_intuition(
  log: IntuitionLog,
  ax: Optional[plt.Axes] = None,
  theme: Optional[Theme] = None,
) -> plt.Axes:
  """Recorded (surprise, information) points against the ideal diagonal."""

  theme = theme or get_theme()
  ax = _prepare(ax, theme)
  ax.plot([1, 10], [0, IMPOSSIBLE_BITS], color=theme.curve, linestyle="--", label="ideal")
  surprise, bits = log.to_arrays()
  ax.scatter(surprise, np.minimum(bits, IMPOSSIBLE_BITS), color=theme.point, s=24)
  ax.set_xlim(1, 10)
  ax.set_ylim(0, IMPOSSIBLE_BITS)
  ax.set_xticks(np.arange(1, 11, 2))
  ax.set_yticks(np.arange(0, IMPOSSIBLE_BITS + 1, 4))
  ax.set_xlabel("Surprise (subjective)")
  ax.set_ylabel("Information (theoretical) [bit]")
  return ax


def plot_entropy_terms(
  result: EntropyResult,
  ax: Optional[plt.Axes] = None,
  theme: Optional[Theme] = None,
) -> plt.Axes:
  """Bar chart of each symbol's -p log p contribution."""

  theme = theme or get_theme()
  ax = _prepare(ax, theme)
  probs = np.asarray(result.probabilities, dtype=float)
  contributions = np.zeros_like(probs)
  positive = np.isfinite(probs) & (probs > 0)
  contributions[positive] = -probs[positive] * np.log(probs[positive]) / np.log(result.unit.base)
  ax.bar(np.arange(len(probs)), contributions, color=theme.curve, alpha=0.8)
  ax.set_xlabel("Symbol")
  ax.set_ylabel(f"-p {result.unit.symbol} p ({result.unit.label})")
  ax.set_title(f"H = {result.value:.4f} {result.unit.label}")
  return ax


__all__ = [
  "THEMES",
  "Theme",
  "get_theme",
  "plot_entropy_terms",
  "plot_function_comparison",
  "plot_information_curve",
  "plot_intuition",
  "plot_monotonic",
]
