"""Hand-authored tactical compatibility data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Tuple


@dataclass(frozen=True)
class CompatibilityEntry:
    """Positions a player listed at ``position`` can competently occupy."""

    position: str
    compatible: Tuple[str, ...]
    score: int


# Includes the key itself in every entry. Scores are the specialization weight
# of the position alone (share of the 15 canonical positions, rounded).
_COMPATIBILITY_MATRIX: Tuple[CompatibilityEntry, ...] = (
    CompatibilityEntry("GK", ("GK",), 7),
    CompatibilityEntry("CB", ("CB", "DM", "CM"), 20),
    CompatibilityEntry("LB", ("LB", "LWB", "LM", "CB"), 27),
    CompatibilityEntry("RB", ("RB", "RWB", "RM", "CB"), 27),
    CompatibilityEntry("CM", ("CM", "AM", "DM", "LM", "RM", "CB", "LB", "RB"), 53),
    CompatibilityEntry("AM", ("AM", "CM", "LW", "RW", "CF"), 33),
    CompatibilityEntry("DM", ("DM", "CM", "CB"), 20),
    CompatibilityEntry("LM", ("LM", "LW", "CM", "LB"), 27),
    CompatibilityEntry("RM", ("RM", "RW", "CM", "RB"), 27),
    CompatibilityEntry("LWB", ("LWB", "LB", "LM", "LW"), 27),
    CompatibilityEntry("RWB", ("RWB", "RB", "RM", "RW"), 27),
    CompatibilityEntry("CF", ("CF", "AM", "LW", "RW"), 27),
    CompatibilityEntry("LW", ("LW", "LM", "CF", "AM"), 27),
    CompatibilityEntry("RW", ("RW", "RM", "CF", "AM"), 27),
    CompatibilityEntry("SS", ("SS", "AM", "CF", "LW", "RW"), 33),
)

# Slot position -> natural positions whose players may be suggested for it.
# Narrower than the matrix above on purpose; the two are kept separate.
_ADAPTABLE_FALLBACKS: Dict[str, Tuple[str, ...]] = {
    "LM": ("LW", "LB"),
    "RM": ("RW", "RB"),
    "CM": ("AM", "DM"),
    "LW": ("LM",),
    "RW": ("RM",),
}

FALLBACK_LIMIT = 3


def default_compatibility() -> Tuple[CompatibilityEntry, ...]:
    return _COMPATIBILITY_MATRIX


def default_fallbacks() -> Mapping[str, Tuple[str, ...]]:
    return dict(_ADAPTABLE_FALLBACKS)


def compatibility_from_mapping(
    data: Mapping[str, Mapping[str, object]],
    base: Tuple[CompatibilityEntry, ...] = _COMPATIBILITY_MATRIX,
) -> Tuple[CompatibilityEntry, ...]:
    """Overlay ``{"CM": {"compatible": [...], "score": 53}}`` entries on ``base``."""

    merged: Dict[str, CompatibilityEntry] = {entry.position: entry for entry in base}
    for position, raw in data.items():
        current = merged.get(position)
        compatible = raw.get("compatible")
        score = raw.get("score")
        if current is None and (compatible is None or score is None):
            raise ValueError(f"compatibility entry for {position!r} needs 'compatible' and 'score'")
        try:
            merged[position] = CompatibilityEntry(
                position=position,
                compatible=tuple(str(p) for p in compatible) if compatible is not None else current.compatible,  # type: ignore[union-attr]
                score=int(score) if score is not None else current.score,  # type: ignore[union-attr, arg-type]
            )
        except (TypeError, ValueError) as exc:
            raise ValueError(f"invalid compatibility entry for {position!r}: {exc}") from exc
    return tuple(merged.values())
