# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Command-line entry point: play one local match and print the result.

Usage:
    gridcommand [--rounds N] [--width W] [--height H] [--seed S]
                [--map-seed M] [--log-level LEVEL] [--json]
"""

from __future__ import annotations

import argparse
import json
import sys

from .config import Settings, get_settings
from .diagnostics import configure_logging
from .match import MatchRunner, MatchSummary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridcommand",
        description="Play a local grid match between two controller teams.",
    )
    parser.add_argument("--rounds", type=int, help="rounds to play")
    parser.add_argument("--width", type=int, help="map width in cells")
    parser.add_argument("--height", type=int, help="map height in cells")
    parser.add_argument("--seed", type=int, help="decision RNG seed")
    parser.add_argument("--map-seed", type=int, help="uranium field seed")
    parser.add_argument("--log-level", help="loguru level (TRACE..CRITICAL)")
    parser.add_argument("--json", action="store_true", help="print the summary as JSON")
    return parser


def settings_from_args(args: argparse.Namespace, base: Settings | None = None) -> Settings:
    base = base if base is not None else get_settings()
    overrides = {
        "match_rounds": args.rounds,
        "map_width": args.width,
        "map_height": args.height,
        "rng_seed": args.seed,
        "map_seed": args.map_seed,
        "log_level": args.log_level,
    }
    update = {k: v for k, v in overrides.items() if v is not None}
    # Re-validate so bad CLI values fail the same way bad env values do.
    return Settings.model_validate({**base.model_dump(), **update})


def format_summary(summary: MatchSummary) -> str:
    lines = [f"rounds played: {summary.rounds}"]
    for team, tally in summary.teams.items():
        orders = ", ".join(f"{k.value}={v}" for k, v in sorted(tally.orders.items(), key=lambda kv: kv[0].value))
        lines.append(
            f"team {team.value}: robots={tally.robots} health={tally.total_health} "
            f"uranium={tally.uranium} built={tally.built}"
            + (f" [{orders}]" if orders else "")
        )
    lines.append(f"winner: {summary.winner.value if summary.winner else 'tie'}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = settings_from_args(args)
    except ValueError as exc:
        print(f"gridcommand: invalid settings: {exc}", file=sys.stderr)
        return 2
    configure_logging(settings.log_level)

    runner = MatchRunner.new_match(settings)
    try:
        summary = runner.play(settings.match_rounds)
    finally:
        runner.close()

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print(format_summary(summary))
    return 0
