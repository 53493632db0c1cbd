"""Command-line front end for the information-quantity calculators.

Every subcommand feeds its arguments through the same sanitize/validate/compute
path a graphical front end would use and prints the results verbatim.
"""
from __future__ import annotations

import argparse
import logging
import sys
import textwrap
from typing import Sequence

from .config import DisplayConfig, load_config
from .demos import QUESTIONS, assess, get_preset, get_scenario, password_entropy
from .metrics import (
  apartment_information,
  compute_entropy,
  compute_information,
  compute_joint,
  continuity_check,
  fmt,
  reference_table,
  select_base,
  validate,
)

logger = logging.getLogger("infoquant")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _unit(args: argparse.Namespace, config: DisplayConfig):
  return select_base(args.unit or config.unit)


def _print_check(values: Sequence[float], config: DisplayConfig) -> None:
  check = validate(values, tolerance=config.tolerance)
  print(f"sum: {check.sum:.5f}")
  if not check.within_tolerance:
    print(f"warning: probabilities do not sum to 1 (off by {fmt(check.deviation, config.trace_decimals)})")


def _cmd_info(args: argparse.Namespace, config: DisplayConfig) -> int:
  unit = _unit(args, config)
  if len(args.probabilities) > 1:
    _print_check(args.probabilities, config)
  for p in args.probabilities:
    result = compute_information(p, unit=unit, decimals=config.trace_decimals)
    print(f"P = {p}: {result.display(config.decimals)}")
    print(textwrap.indent(result.render(), "  "))
  return 0


def _cmd_joint(args: argparse.Namespace, config: DisplayConfig) -> int:
  result = compute_joint(args.pa, args.pb, unit=_unit(args, config))
  for line in result.trace(config.trace_decimals):
    print(line)
  print(f"additivity match: {fmt(result.match, 0)}%")
  return 0


def _cmd_entropy(args: argparse.Namespace, config: DisplayConfig) -> int:
  _print_check(args.probabilities, config)
  result = compute_entropy(args.probabilities, unit=_unit(args, config))
  print(result.render(config.trace_decimals))
  return 0


def _cmd_validate(args: argparse.Namespace, config: DisplayConfig) -> int:
  check = validate(args.probabilities, tolerance=config.tolerance)
  print(f"sum: {check.sum:.5f}")
  print(f"within tolerance: {'yes' if check.within_tolerance else 'no'}")
  print(f"deviation: {fmt(check.deviation, config.trace_decimals)}")
  return 0 if check.within_tolerance else 1


def _cmd_units(args: argparse.Namespace, config: DisplayConfig) -> int:
  unit = _unit(args, config)
  for p, value in reference_table(unit):
    print(f"P = {p:g}: {fmt(value, 3)} {unit.label}")
  return 0


def _cmd_apartment(args: argparse.Namespace, config: DisplayConfig) -> int:
  result = apartment_information(args.floors, args.rooms)
  for line in result.trace(config.trace_decimals):
    print(line)
  return 0


def _cmd_continuity(args: argparse.Namespace, config: DisplayConfig) -> int:
  result = continuity_check(args.p1, args.p2)
  print(f"I(P1) = {fmt(result.i1, config.decimals)}")
  print(f"I(P2) = {fmt(result.i2, config.decimals)}")
  print(f"|ΔP| = {fmt(result.p_diff, config.decimals)}")
  print(f"|ΔI| = {fmt(result.i_diff, config.decimals)}")
  print(result.verdict.value)
  return 0


def _cmd_password(args: argparse.Namespace, config: DisplayConfig) -> int:
  strength = password_entropy(args.length, args.char_types)
  print(strength.describe())
  return 0


def _cmd_preset(args: argparse.Namespace, config: DisplayConfig) -> int:
  values = list(get_preset(args.name))
  _print_check(values, config)
  for idx, p in enumerate(values):
    result = compute_information(p, decimals=config.trace_decimals)
    print(f"[{idx}] P = {p:g}: {result.display(config.decimals)}")
  return 0


def _cmd_surprise(args: argparse.Namespace, config: DisplayConfig) -> int:
  scenario = get_scenario(args.scenario)
  event = args.event or scenario.event_names[0]
  assessment = assess(args.level, scenario.probability(event))
  print(f"{scenario.title}: {event}")
  print(f"actual probability: {assessment.percent}")
  print(f"theoretical information: {fmt(assessment.bits, 2)} bit")
  print(f"match: {round(assessment.score)}%")
  print(assessment.explanation)
  return 0


def _cmd_quiz(args: argparse.Namespace, config: DisplayConfig) -> int:
  for qid, question in QUESTIONS.items():
    choices = "  ".join(f"{key}) {text}" for key, text in question.choices.items())
    print(f"{qid}: {question.prompt}  {choices}")
  return 0


def _cmd_plot(args: argparse.Namespace, config: DisplayConfig) -> int:
  import matplotlib

  matplotlib.use("Agg")
  from .viz import plots

  theme = plots.get_theme(args.theme or config.theme)
  if args.kind == "information":
    ax = plots.plot_information_curve(theme=theme)
  elif args.kind == "compare":
    ax = plots.plot_function_comparison(base=args.base, theme=theme)
  elif args.kind == "monotonic":
    ax = plots.plot_monotonic(args.p, theme=theme)
  else:
    result = compute_entropy(args.probabilities or [0.5, 0.5], unit=config.log_unit)
    ax = plots.plot_entropy_terms(result, theme=theme)
  ax.figure.savefig(args.output, facecolor=theme.background)
  print(f"chart written to {args.output}")
  return 0


def _probability_list(subparser: argparse.ArgumentParser, nargs: str = "+") -> None:
  subparser.add_argument("probabilities", nargs=nargs, type=float, help="Probabilities of each outcome.")


def _unit_option(subparser: argparse.ArgumentParser) -> None:
  subparser.add_argument("--unit", help="Information unit: bit, nat or dit (default from config).")


def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(description="Information quantity and entropy calculators.")
  parser.add_argument("--config", help="Path to a JSON file with display settings.")
  parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
  subparsers = parser.add_subparsers(dest="command", required=True)

  info = subparsers.add_parser("info", help="Information quantity I = -log P of each probability.")
  _probability_list(info)
  _unit_option(info)
  info.set_defaults(func=_cmd_info)

  joint = subparsers.add_parser("joint", help="Additivity of two independent events.")
  joint.add_argument("pa", type=float)
  joint.add_argument("pb", type=float)
  _unit_option(joint)
  joint.set_defaults(func=_cmd_joint)

  entropy = subparsers.add_parser("entropy", help="Shannon entropy of a distribution.")
  _probability_list(entropy)
  _unit_option(entropy)
  entropy.set_defaults(func=_cmd_entropy)

  check = subparsers.add_parser("validate", help="Check that probabilities sum to 1.")
  _probability_list(check)
  check.set_defaults(func=_cmd_validate)

  units = subparsers.add_parser("units", help="Reference values for P=0.5, 0.25, 0.1.")
  _unit_option(units)
  units.set_defaults(func=_cmd_units)

  apartment = subparsers.add_parser("apartment", help="Floor/room additivity example.")
  apartment.add_argument("floors", type=float)
  apartment.add_argument("rooms", type=float)
  apartment.set_defaults(func=_cmd_apartment)

  continuity = subparsers.add_parser("continuity", help="Compare I at two nearby probabilities.")
  continuity.add_argument("p1", type=float)
  continuity.add_argument("p2", type=float)
  continuity.set_defaults(func=_cmd_continuity)

  password = subparsers.add_parser("password", help="Entropy of a random password.")
  password.add_argument("length", type=int)
  password.add_argument("char_types", type=int, help="Size of the character set.")
  password.set_defaults(func=_cmd_password)

  preset = subparsers.add_parser("preset", help="Coin toss presets: fair, biased, trick, stand.")
  preset.add_argument("name")
  preset.set_defaults(func=_cmd_preset)

  surprise = subparsers.add_parser("surprise", help="Compare a surprise level with the information.")
  surprise.add_argument("scenario", help="coin, dice, lottery or weather")
  surprise.add_argument("level", type=int, help="Surprise level 1-10.")
  surprise.add_argument("--event", help="Event name (default: first event of the scenario).")
  surprise.set_defaults(func=_cmd_surprise)

  quiz = subparsers.add_parser("quiz", help="List the logarithm warm-up questions.")
  quiz.set_defaults(func=_cmd_quiz)

  plot = subparsers.add_parser("plot", help="Render a chart to an image file.")
  plot.add_argument("kind", choices=["information", "compare", "monotonic", "entropy"])
  plot.add_argument("--output", required=True, help="Image path, e.g. chart.png.")
  plot.add_argument("--theme", help="dark or light (default from config).")
  plot.add_argument("--base", type=float, default=2.0, help="Base a for the compare chart.")
  plot.add_argument("--p", type=float, default=0.5, help="Highlighted P for the monotonic chart.")
  _probability_list(plot, nargs="*")
  plot.set_defaults(func=_cmd_plot)

  return parser


def main(argv: Sequence[str] | None = None) -> int:
  parser = build_parser()
  args = parser.parse_args(argv)
  logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)
  try:
    config = load_config(args.config)
    return args.func(args, config)
  except (KeyError, ValueError, OSError) as exc:
    logger.debug("command failed", exc_info=True)
    message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
    print(f"error: {message}", file=sys.stderr)
    return 2


if __name__ == "__main__":
  sys.exit(main())
