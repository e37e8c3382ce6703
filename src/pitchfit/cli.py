"""Command-line interface for position and formation analysis."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from pitchfit.config import TacticalTables, default_tables
from pitchfit.config_loader import load_tables
from pitchfit.ingest import load_roster_json
from pitchfit.positions import PositionNormalizer
from pitchfit.scoring import FlexibilityScorer, FormationComparer, FormationResolver


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Analyse football positions and formation fit")
    parser.add_argument("--tables", type=Path, default=None, help="Optional tables profile JSON")
    subparsers = parser.add_subparsers(dest="command", required=True)

    positions = subparsers.add_parser("positions", help="Standardize position spellings")
    positions.add_argument("raw", nargs="+", help="Position spellings (e.g., 'Centre Back', ST)")

    flex = subparsers.add_parser("flex", help="Rank roster players by positional flexibility")
    flex.add_argument("roster", type=Path, help="Path to roster JSON")
    flex.add_argument("--player", default=None, help="Only report this player")

    fit = subparsers.add_parser("fit", help="Resolve roster coverage of a formation")
    fit.add_argument("roster", type=Path, help="Path to roster JSON")
    fit.add_argument("--formation", required=True, help="Formation name (e.g., 4-4-2)")
    fit.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Optional path to write the slot breakdown JSON",
    )

    compare = subparsers.add_parser("compare", help="Compare up to three formation variants")
    compare.add_argument("names", nargs="+", help="Variant names (e.g., 4-4-2 4-1-2-1-2)")

    subparsers.add_parser("formations", help="List known formations and layouts")
    return parser.parse_args(argv)


def _positions(args: argparse.Namespace, tables: TacticalTables) -> None:
    normalizer = PositionNormalizer(tables)
    for raw in args.raw:
        standard = normalizer.standardize(raw)
        print(f"{raw}: {standard} ({normalizer.category(raw)}) {normalizer.description(raw)}")


def _flex(args: argparse.Namespace, tables: TacticalTables) -> None:
    roster = load_roster_json(args.roster, tables=tables)
    if args.player:
        roster = [player for player in roster if player.name == args.player]
        if not roster:
            raise ValueError(f"Player {args.player!r} not found in {args.roster}")
    for result in FlexibilityScorer(tables).rank(roster):
        positions = "/".join(result.primary_positions)
        print(f"{result.flexibility_score:>3}  {result.name} [{positions}] {result.explanation}")


def _fit(args: argparse.Namespace, tables: TacticalTables) -> None:
    roster = load_roster_json(args.roster, tables=tables)
    fit = FormationResolver(tables).resolve(args.formation, roster)
    if not fit.slots:
        print(f"Unknown formation {args.formation}; compatibility 0%")
    else:
        print(f"{fit.formation}: {fit.filled_slots}/{fit.total_slots} slots covered ({fit.compatibility_score}%)")
        for slot in fit.slots:
            players = ", ".join(slot.players) or "-"
            print(f"  {slot.position:<4} {players}")

    if args.report:
        report_payload = {
            "formation": fit.formation,
            "compatibility_score": fit.compatibility_score,
            "filled_slots": fit.filled_slots,
            "total_slots": fit.total_slots,
            "slots": [
                {
                    "position": slot.position,
                    "category": slot.category,
                    "natural": slot.natural_players,
                    "adaptable": [candidate.label for candidate in slot.adaptable_players],
                }
                for slot in fit.slots
            ],
        }
        args.report.write_text(json.dumps(report_payload, indent=2), encoding="utf-8")
        print(f"Wrote fit report to {args.report}")


def _compare(args: argparse.Namespace, tables: TacticalTables) -> None:
    for comparison in FormationComparer(tables).compare(args.names):
        record = comparison.sub_formation
        breakdown = " ".join(f"{key}={value}" for key, value in comparison.summary.position_breakdown.items())
        print(f"{record.name} ({record.parent}, {record.shape}): {breakdown}")
        print(f"  {record.description}")


def _formations(args: argparse.Namespace, tables: TacticalTables) -> None:
    for name in tables.formation_names():
        print(name)
    print("Layouts:")
    for record in FormationComparer(tables).sub_formations():
        print(f"  {record.name} ({record.parent})")


_COMMANDS = {
    "positions": _positions,
    "flex": _flex,
    "fit": _fit,
    "compare": _compare,
    "formations": _formations,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        tables = load_tables(args.tables) if args.tables else default_tables()
        _COMMANDS[args.command](args, tables)
    except (FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
