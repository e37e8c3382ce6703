"""Player flexibility scoring over the tactical compatibility matrix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from pitchfit.config import TacticalTables, default_tables
from pitchfit.models import Player

from .common import percentage


NO_POSITIONS_EXPLANATION = "No positions assigned"

_SINGLE_CATEGORY_EXPLANATIONS: Dict[str, str] = {
    "GK": "Goalkeeper specialist - highly specialized position with limited flexibility",
    "DF": "Defensive specialist - can adapt to defensive midfield roles",
    "MF": "Midfield specialist - naturally versatile with good tactical awareness",
    "FW": "Attacking specialist - can adapt to various attacking roles",
}
_VERSATILE_MIDFIELDER = "Versatile midfielder - excellent tactical flexibility across multiple areas"
_DEFENSIVE_UTILITY = "Defensive utility player - strong in both defense and midfield"
_ATTACKING_MIDFIELDER = "Attacking midfielder - creative player with good attacking instincts"
_MULTI_POSITIONAL = "Multi-positional player - valuable tactical flexibility"


@dataclass(frozen=True)
class PositionFlexibility:
    """Diagnostic detail for one listed position (its own entry, not the union)."""

    position: str
    category: str
    compatible_positions: List[str]
    flexibility_score: int


@dataclass(frozen=True)
class FlexibilityResult:
    name: str
    primary_positions: List[str]
    flexibility_score: int
    breakdown: List[PositionFlexibility]
    explanation: str
    compatible_positions: List[str]


def explain_categories(categories: Sequence[str]) -> str:
    """Pick the explanation phrase for the distinct categories a player spans."""

    unique: List[str] = []
    for category in categories:
        if category not in unique:
            unique.append(category)

    if len(unique) == 1 and unique[0] in _SINGLE_CATEGORY_EXPLANATIONS:
        return _SINGLE_CATEGORY_EXPLANATIONS[unique[0]]
    if "MF" in unique and len(unique) > 1:
        return _VERSATILE_MIDFIELDER
    # Both rules below are shadowed by the one above; kept in table order.
    if "DF" in unique and "MF" in unique:
        return _DEFENSIVE_UTILITY
    if "MF" in unique and "FW" in unique:
        return _ATTACKING_MIDFIELDER
    return _MULTI_POSITIONAL


class FlexibilityScorer:
    """Scores how many canonical positions a player can competently occupy."""

    def __init__(self, tables: Optional[TacticalTables] = None) -> None:
        self.tables = tables or default_tables()

    def score(self, name: str, positions: Sequence[str]) -> FlexibilityResult:
        if not positions:
            return FlexibilityResult(
                name=name,
                primary_positions=[],
                flexibility_score=0,
                breakdown=[],
                explanation=NO_POSITIONS_EXPLANATION,
                compatible_positions=[],
            )

        standardized = [self.tables.standardize(position) for position in positions]
        reachable = set()
        breakdown: List[PositionFlexibility] = []
        for position in standardized:
            entry = self.tables.compatibility.get(position)
            if entry is None:
                continue
            reachable.update(entry.compatible)
            breakdown.append(
                PositionFlexibility(
                    position=position,
                    category=self.tables.category_of(position),
                    compatible_positions=list(entry.compatible),
                    flexibility_score=entry.score,
                )
            )

        ordered = [mapping.standard for mapping in self.tables.position_mappings if mapping.standard in reachable]
        return FlexibilityResult(
            name=name,
            primary_positions=standardized,
            flexibility_score=percentage(len(reachable), self.tables.total_positions),
            breakdown=breakdown,
            explanation=explain_categories([self.tables.category_of(position) for position in standardized]),
            compatible_positions=ordered,
        )

    def score_player(self, player: Player) -> FlexibilityResult:
        return self.score(player.name, list(player.positions))

    def rank(self, roster: Sequence[Player]) -> List[FlexibilityResult]:
        """Score every player, most flexible first (ties by name)."""

        results = [self.score_player(player) for player in roster]
        results.sort(key=lambda result: (-result.flexibility_score, result.name))
        return results


def calculate_player_flexibility(
    name: str,
    positions: Sequence[str],
    *,
    tables: Optional[TacticalTables] = None,
) -> FlexibilityResult:
    return FlexibilityScorer(tables).score(name, positions)


def rank_roster_flexibility(
    roster: Sequence[Player],
    *,
    tables: Optional[TacticalTables] = None,
) -> List[FlexibilityResult]:
    return FlexibilityScorer(tables).rank(roster)
