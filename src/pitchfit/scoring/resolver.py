"""Resolve how well a roster covers a formation's required slots."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

from pitchfit.config import TacticalTables, default_tables
from pitchfit.ingest.adapters import formation_from_layout
from pitchfit.models import Formation, FormationSlot, Player

from .common import percentage


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdaptableCandidate:
    name: str
    position: str
    category: str

    @property
    def label(self) -> str:
        return f"{self.name} ({self.position})"


@dataclass(frozen=True)
class SlotFit:
    """Coverage of a single slot: natural players plus capped fallback suggestions."""

    index: int
    position: str
    category: str
    required: bool
    alternatives: Tuple[str, ...]
    natural_players: List[str] = field(default_factory=list)
    adaptable_players: List[AdaptableCandidate] = field(default_factory=list)

    @property
    def natural_count(self) -> int:
        return len(self.natural_players)

    @property
    def adaptable_count(self) -> int:
        return len(self.adaptable_players)

    @property
    def total_available(self) -> int:
        return self.natural_count + self.adaptable_count

    @property
    def has_players(self) -> bool:
        return self.total_available > 0

    @property
    def players(self) -> List[str]:
        return [*self.natural_players, *(candidate.label for candidate in self.adaptable_players)]


@dataclass(frozen=True)
class FormationFit:
    formation: str
    description: str
    tactical_notes: str
    slots: List[SlotFit]
    compatibility_score: int

    @property
    def total_slots(self) -> int:
        return len(self.slots)

    @property
    def filled_slots(self) -> int:
        return sum(1 for slot in self.slots if slot.has_players)


class FormationResolver:
    """Pure function of (formation definition, roster snapshot)."""

    def __init__(self, tables: Optional[TacticalTables] = None) -> None:
        self.tables = tables or default_tables()

    def lookup(self, name: str) -> Optional[Formation]:
        """Requirement table first, then bundled layouts; ``None`` when unknown."""

        formation = self.tables.find_formation(name)
        if formation is not None:
            return formation
        sub_formation = self.tables.find_sub_formation(name)
        if sub_formation is not None:
            return formation_from_layout(sub_formation, tables=self.tables)
        return None

    def _index(self, roster: Sequence[Player]) -> Dict[str, List[Player]]:
        by_position: Dict[str, List[Player]] = {}
        for player in roster:
            for position in player.positions:
                listed = by_position.setdefault(self.tables.standardize(position), [])
                if player not in listed:
                    listed.append(player)
        return by_position

    def _resolve_slot(
        self,
        index: int,
        slot: FormationSlot,
        by_position: Dict[str, List[Player]],
    ) -> SlotFit:
        natural = []
        for player in by_position.get(slot.position, ()):
            if player.name not in natural:
                natural.append(player.name)

        # Every listing from each source counts; naturals and repeats are not filtered.
        adaptable: List[AdaptableCandidate] = []
        for source in self.tables.fallbacks.get(slot.position, ()):
            for player in by_position.get(source, ()):
                adaptable.append(
                    AdaptableCandidate(
                        name=player.name,
                        position=source,
                        category=self.tables.category_of(source),
                    )
                )
        del adaptable[self.tables.fallback_limit :]

        return SlotFit(
            index=index,
            position=slot.position,
            category=slot.category,
            required=slot.required,
            alternatives=slot.alternatives,
            natural_players=natural,
            adaptable_players=adaptable,
        )

    def resolve(self, formation: Union[Formation, str], roster: Sequence[Player]) -> FormationFit:
        if isinstance(formation, str):
            resolved = self.lookup(formation)
            if resolved is None:
                logger.debug("Unknown formation %r; returning empty fit", formation)
                return FormationFit(
                    formation=formation,
                    description="",
                    tactical_notes="",
                    slots=[],
                    compatibility_score=0,
                )
            formation = resolved

        by_position = self._index(roster)
        slots = [self._resolve_slot(index, slot, by_position) for index, slot in enumerate(formation.slots)]
        filled = sum(1 for slot in slots if slot.has_players)
        return FormationFit(
            formation=formation.name,
            description=formation.description,
            tactical_notes=formation.tactical_notes,
            slots=slots,
            compatibility_score=percentage(filled, len(slots)),
        )


def get_formation_compatibility(
    name: str,
    *,
    tables: Optional[TacticalTables] = None,
) -> Optional[Formation]:
    """Formation requirements by name, or ``None`` when not in the requirement table."""

    return (tables or default_tables()).find_formation(name)


def get_all_formations(*, tables: Optional[TacticalTables] = None) -> List[str]:
    return (tables or default_tables()).formation_names()


def is_valid_formation(name: str, *, tables: Optional[TacticalTables] = None) -> bool:
    return name in (tables or default_tables()).formations


def resolve_formation_fit(
    formation: Union[Formation, str],
    roster: Sequence[Player],
    *,
    tables: Optional[TacticalTables] = None,
) -> FormationFit:
    return FormationResolver(tables).resolve(formation, roster)
