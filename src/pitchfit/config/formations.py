"""Formation requirement tables used for squad compatibility checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Sequence, Tuple


@dataclass(frozen=True)
class SlotRequirement:
    position: str
    alternatives: Tuple[str, ...] = ()
    required: bool = True


@dataclass(frozen=True)
class FormationRequirements:
    formation: str
    description: str
    tactical_notes: str
    slots: Tuple[SlotRequirement, ...]


def _slots(*entries: Tuple[str, Tuple[str, ...]]) -> Tuple[SlotRequirement, ...]:
    return tuple(SlotRequirement(position, alternatives) for position, alternatives in entries)


_BACK_FOUR = (
    ("GK", ()),
    ("LB", ("LWB",)),
    ("CB", ()),
    ("CB", ()),
    ("RB", ("RWB",)),
)
_BACK_THREE = (("GK", ()), ("CB", ()), ("CB", ()), ("CB", ()))
_BACK_FIVE = (
    ("GK", ()),
    ("LWB", ("LB",)),
    ("CB", ()),
    ("CB", ()),
    ("CB", ()),
    ("RWB", ("RB",)),
)
_CM = ("CM", ("AM", "DM"))
_LM = ("LM", ("LW", "LWB"))
_RM = ("RM", ("RW", "RWB"))
_CF = ("CF", ())


_FORMATIONS: Dict[str, FormationRequirements] = {
    "4-4-2": FormationRequirements(
        formation="4-4-2",
        description="Classic balanced formation with four defenders, four midfielders, and two strikers",
        tactical_notes="Balanced formation requiring good wing play and central midfield control",
        slots=_slots(*_BACK_FOUR, _LM, _CM, _CM, _RM, _CF, _CF),
    ),
    "4-3-3": FormationRequirements(
        formation="4-3-3",
        description="Attacking formation with three forwards and three central midfielders",
        tactical_notes="Attacking formation requiring pacey wingers and creative midfielders",
        slots=_slots(*_BACK_FOUR, _CM, _CM, _CM, ("LW", ("LM",)), _CF, ("RW", ("RM",))),
    ),
    "3-4-3": FormationRequirements(
        formation="3-4-3",
        description="Attacking formation with three defenders and three forwards",
        tactical_notes="High-risk, high-reward formation requiring strong wing-backs and creative midfielders",
        slots=_slots(*_BACK_THREE, _LM, _CM, _CM, _RM, ("LW", ("LM",)), _CF, ("RW", ("RM",))),
    ),
    "4-2-3-1": FormationRequirements(
        formation="4-2-3-1",
        description="Balanced formation with two defensive midfielders and an attacking midfielder",
        tactical_notes="Tactically flexible formation with strong defensive base and creative attacking options",
        slots=_slots(
            *_BACK_FOUR,
            ("DM", ("CM",)),
            ("DM", ("CM",)),
            ("AM", ("CM",)),
            ("LW", ("LM",)),
            ("RW", ("RM",)),
            _CF,
        ),
    ),
    "4-1-4-1": FormationRequirements(
        formation="4-1-4-1",
        description="Defensive formation with one holding midfielder and four attacking midfielders",
        tactical_notes="Defensive formation requiring strong holding midfielder and pacey wingers",
        slots=_slots(
            *_BACK_FOUR,
            ("DM", ("CM",)),
            _LM,
            ("CM", ("AM",)),
            ("CM", ("AM",)),
            _RM,
            _CF,
        ),
    ),
    "3-5-2": FormationRequirements(
        formation="3-5-2",
        description="Midfield-heavy formation with three defenders and five midfielders",
        tactical_notes="Midfield-dominant formation requiring versatile wing-backs and strong central midfielders",
        slots=_slots(
            *_BACK_THREE,
            ("LWB", ("LM", "LB")),
            _CM,
            _CM,
            _CM,
            ("RWB", ("RM", "RB")),
            _CF,
            _CF,
        ),
    ),
    "5-3-2": FormationRequirements(
        formation="5-3-2",
        description="Defensive formation with five defenders and three midfielders",
        tactical_notes="Ultra-defensive formation requiring strong wing-backs and creative midfielders",
        slots=_slots(*_BACK_FIVE, _CM, _CM, _CM, _CF, _CF),
    ),
    "5-4-1": FormationRequirements(
        formation="5-4-1",
        description="Defensive formation with five defenders and four midfielders",
        tactical_notes="Defensive formation requiring strong wing-backs and a hardworking lone striker",
        slots=_slots(*_BACK_FIVE, _LM, _CM, _CM, _RM, _CF),
    ),
}


def default_formations() -> Tuple[FormationRequirements, ...]:
    return tuple(_FORMATIONS.values())


def requirements_from_records(records: Iterable[Mapping[str, object]]) -> Tuple[FormationRequirements, ...]:
    """Parse JSON-style ``{"formation", "description", "tactical_notes", "positions"}`` records."""

    parsed = []
    for record in records:
        name = record.get("formation")
        if not name:
            raise ValueError("formation record is missing 'formation'")
        positions = record.get("positions") or []
        if not isinstance(positions, Sequence):
            raise ValueError(f"formation {name!r}: 'positions' must be a list")
        slots = []
        for entry in positions:
            if not isinstance(entry, Mapping) or not entry.get("position"):
                raise ValueError(f"formation {name!r}: every slot needs a 'position'")
            slots.append(
                SlotRequirement(
                    position=str(entry["position"]),
                    alternatives=tuple(str(alt) for alt in entry.get("alternatives") or ()),
                    required=bool(entry.get("required", entry.get("isRequired", True))),
                )
            )
        parsed.append(
            FormationRequirements(
                formation=str(name),
                description=str(record.get("description", "")),
                tactical_notes=str(record.get("tactical_notes", record.get("tacticalNotes", ""))),
                slots=tuple(slots),
            )
        )
    return tuple(parsed)
