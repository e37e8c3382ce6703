"""Helpers to load roster tables and emit canonical players."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, Field

from pitchfit.config import ROLE_CATEGORIES, TacticalTables, default_tables
from pitchfit.models import Player


logger = logging.getLogger(__name__)

_POSITION_SPLIT = re.compile(r"[/,]+")


class RosterRow(BaseModel):
    """One raw roster listing before names are merged across positions."""

    raw_name: str
    raw_positions: List[str] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "RosterRow":
        name = record.get("name")
        raw = record.get("positions")
        if raw is None:
            raw = record.get("position")

        if raw is None:
            tokens: List[str] = []
        elif isinstance(raw, str):
            tokens = [token.strip() for token in _POSITION_SPLIT.split(raw) if token.strip()]
        else:
            tokens = [str(token).strip() for token in raw if str(token).strip()]
        return cls(raw_name=str(name).strip() if name is not None else "", raw_positions=tokens)


@dataclass
class RosterReport:
    total_rows: int = 0
    players: int = 0
    skipped_rows: List[str] = field(default_factory=list)


def rows_from_grouped(data: Mapping[str, Any]) -> List[RosterRow]:
    """Flatten the category-grouped roster table into rows.

    ``GK`` is a flat list of names; ``DF``/``MF``/``FW`` map sub-positions to
    name lists. A flat list under an outfield category tags each name with
    the category label itself.
    """

    rows: List[RosterRow] = []
    for category, section in data.items():
        if section is None:
            continue
        if isinstance(section, Mapping):
            for position, names in section.items():
                for name in names or ():
                    rows.append(RosterRow(raw_name=str(name).strip(), raw_positions=[str(position)]))
        elif isinstance(section, Sequence) and not isinstance(section, str):
            label = str(category).upper()
            for name in section:
                rows.append(RosterRow(raw_name=str(name).strip(), raw_positions=[label]))
        else:
            logger.warning("Ignoring roster section %r with unsupported shape %s", category, type(section).__name__)
    return rows


def rows_from_records(records: Iterable[Mapping[str, Any]]) -> List[RosterRow]:
    rows: List[RosterRow] = []
    for record in records:
        if not isinstance(record, Mapping):
            raise ValueError(f"Roster records must be objects, got {type(record).__name__}")
        rows.append(RosterRow.from_record(record))
    return rows


def build_roster(
    rows: Sequence[RosterRow],
    *,
    tables: Optional[TacticalTables] = None,
) -> Tuple[List[Player], RosterReport]:
    """Merge rows by player name into canonical :class:`Player` records.

    Names are unique keys: a name seen under several positions becomes one
    player whose positions keep their first-seen order.
    """

    tables = tables or default_tables()
    report = RosterReport(total_rows=len(rows))
    merged: Dict[str, List[str]] = {}
    for row in rows:
        if not row.raw_name:
            report.skipped_rows.append("<missing name>")
            logger.warning("Skipping roster row without a name (positions=%s)", row.raw_positions)
            continue
        positions = [tables.standardize(position) for position in row.raw_positions]
        if not positions:
            report.skipped_rows.append(row.raw_name)
            logger.warning("Skipping roster row for %s: no positions listed", row.raw_name)
            continue
        bucket = merged.setdefault(row.raw_name, [])
        for position in positions:
            if position not in bucket:
                bucket.append(position)

    players = [Player(name=name, positions=tuple(positions)) for name, positions in merged.items()]
    report.players = len(players)
    return players, report


def _rows_from_data(data: Any) -> List[RosterRow]:
    if isinstance(data, Mapping) and "players" in data:
        data = data["players"]
    if isinstance(data, Mapping):
        return rows_from_grouped(data)
    if isinstance(data, Sequence) and not isinstance(data, str):
        return rows_from_records(data)
    raise ValueError(f"Unsupported roster payload of type {type(data).__name__}")


def roster_from_grouped(data: Mapping[str, Any], *, tables: Optional[TacticalTables] = None) -> List[Player]:
    players, _ = build_roster(rows_from_grouped(data), tables=tables)
    return players


def roster_from_records(
    records: Iterable[Mapping[str, Any]],
    *,
    tables: Optional[TacticalTables] = None,
) -> List[Player]:
    players, _ = build_roster(rows_from_records(records), tables=tables)
    return players


def load_roster(data: Any, *, tables: Optional[TacticalTables] = None) -> List[Player]:
    """Accept either roster shape, optionally wrapped in ``{"players": ...}``."""

    players, _ = build_roster(_rows_from_data(data), tables=tables)
    return players


def load_roster_with_report(
    data: Any,
    *,
    tables: Optional[TacticalTables] = None,
) -> Tuple[List[Player], RosterReport]:
    return build_roster(_rows_from_data(data), tables=tables)


def load_roster_json(path: Path, *, tables: Optional[TacticalTables] = None) -> List[Player]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Roster JSON not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    return load_roster(data, tables=tables)


@dataclass(frozen=True)
class PositionGroup:
    position: str
    category: str
    players: List[str]

    @property
    def count(self) -> int:
        return len(self.players)


def group_by_position(
    roster: Sequence[Player],
    *,
    tables: Optional[TacticalTables] = None,
) -> List[PositionGroup]:
    """Distribute players across positions, grouped GK, DF, MF, FW.

    Every canonical position is listed even when empty; unknown positions
    found in the roster come last in first-seen order.
    """

    tables = tables or default_tables()
    buckets: Dict[str, List[str]] = {mapping.standard: [] for mapping in tables.position_mappings}
    for player in roster:
        for position in player.positions:
            buckets.setdefault(tables.standardize(position), []).append(player.name)

    category_rank = {category: index for index, category in enumerate(ROLE_CATEGORIES)}
    groups = [
        PositionGroup(position=position, category=tables.category_of(position), players=names)
        for position, names in buckets.items()
    ]
    # Stable sort keeps table order inside each category.
    groups.sort(key=lambda group: category_rank.get(group.category, len(category_rank)))
    return groups
