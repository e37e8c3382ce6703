"""Canonical position vocabulary and the aliases that feed it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Tuple


@dataclass(frozen=True)
class PositionMapping:
    standard: str
    variations: Tuple[str, ...]
    category: str
    description: str


ROLE_CATEGORIES: Tuple[str, ...] = ("GK", "DF", "MF", "FW")

UNKNOWN_CATEGORY = "Unknown"

_POSITION_MAPPINGS: Tuple[PositionMapping, ...] = (
    PositionMapping("GK", ("GK", "Goalkeeper", "Keeper"), "GK", "Goalkeeper"),
    PositionMapping(
        "CB",
        ("CB", "Center Back", "Centre Back", "Central Defender", "LCB", "RCB"),
        "DF",
        "Center Back",
    ),
    PositionMapping("LB", ("LB", "Left Back", "Left Defender"), "DF", "Left Back"),
    PositionMapping("RB", ("RB", "Right Back", "Right Defender"), "DF", "Right Back"),
    PositionMapping(
        "CM",
        ("CM", "Central Midfielder", "Center Midfielder"),
        "MF",
        "Central Midfielder",
    ),
    PositionMapping(
        "AM",
        ("AM", "CAM", "Attacking Midfielder", "Central Attacking Midfielder"),
        "MF",
        "Attacking Midfielder",
    ),
    PositionMapping(
        "DM",
        ("DM", "CDM", "Defensive Midfielder", "Central Defensive Midfielder"),
        "MF",
        "Defensive Midfielder",
    ),
    PositionMapping("LM", ("LM", "Left Midfielder", "Left Wing Midfielder"), "MF", "Left Midfielder"),
    PositionMapping("RM", ("RM", "Right Midfielder", "Right Wing Midfielder"), "MF", "Right Midfielder"),
    PositionMapping("LWB", ("LWB", "Left Wing Back", "Left Wing-Back"), "MF", "Left Wing Back"),
    PositionMapping("RWB", ("RWB", "Right Wing Back", "Right Wing-Back"), "MF", "Right Wing Back"),
    PositionMapping(
        "CF",
        ("CF", "ST", "Striker", "Center Forward", "Centre Forward"),
        "FW",
        "Center Forward",
    ),
    PositionMapping("LW", ("LW", "LF", "Left Winger", "Left Forward"), "FW", "Left Winger"),
    PositionMapping("RW", ("RW", "RF", "Right Winger", "Right Forward"), "FW", "Right Winger"),
    PositionMapping("SS", ("SS", "Second Striker", "Supporting Striker"), "FW", "Second Striker"),
)

# Narrow "who else could stand here" hints shown next to a position. Distinct
# from both the compatibility matrix and the adaptable fallback lists.
_TACTICAL_ALTERNATIVES: Dict[str, Tuple[str, ...]] = {
    "LB": ("LWB", "LM"),
    "RB": ("RWB", "RM"),
    "CB": ("DM",),
    "CM": ("AM", "DM"),
    "AM": ("CM", "LW", "RW", "CF"),
    "DM": ("CM", "CB"),
    "LM": ("LW", "LB", "LWB"),
    "RM": ("RW", "RB", "RWB"),
    "LWB": ("LB", "LM", "LW"),
    "RWB": ("RB", "RM", "RW"),
    "CF": ("AM", "LW", "RW"),
    "LW": ("LM", "CF", "AM"),
    "RW": ("RM", "CF", "AM"),
    "SS": ("AM", "CF", "LW", "RW"),
}


def default_position_mappings() -> Tuple[PositionMapping, ...]:
    return _POSITION_MAPPINGS


def default_tactical_alternatives() -> Mapping[str, Tuple[str, ...]]:
    return dict(_TACTICAL_ALTERNATIVES)


def mappings_from_aliases(
    aliases: Mapping[str, Mapping[str, object]],
    base: Tuple[PositionMapping, ...] = _POSITION_MAPPINGS,
) -> Tuple[PositionMapping, ...]:
    """Overlay JSON-style alias entries on ``base``.

    ``aliases`` maps a standard code to ``{"variations": [...], "category": ...,
    "description": ...}``; any omitted field keeps the base value. Unknown codes
    are appended as new mappings and must name a category.
    """

    merged: Dict[str, PositionMapping] = {mapping.standard: mapping for mapping in base}
    for standard, entry in aliases.items():
        current = merged.get(standard)
        if current is None:
            if not entry.get("category"):
                raise ValueError(f"alias entry for new position {standard!r} needs a category")
            current = PositionMapping(standard, (standard,), str(entry["category"]), standard)

        variations = entry.get("variations")
        merged[standard] = PositionMapping(
            standard=standard,
            variations=tuple(str(v) for v in variations) if variations else current.variations,
            category=str(entry.get("category") or current.category),
            description=str(entry.get("description") or current.description),
        )
    return tuple(merged.values())
