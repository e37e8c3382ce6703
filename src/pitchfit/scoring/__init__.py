"""Flexibility scoring, formation fit resolution and comparison."""

from .common import percentage
from .comparison import (
    MAX_COMPARED,
    FormationComparer,
    FormationComparison,
    compare_formations,
    get_formation_layout,
)
from .flexibility import (
    NO_POSITIONS_EXPLANATION,
    FlexibilityResult,
    FlexibilityScorer,
    PositionFlexibility,
    calculate_player_flexibility,
    explain_categories,
    rank_roster_flexibility,
)
from .resolver import (
    AdaptableCandidate,
    FormationFit,
    FormationResolver,
    SlotFit,
    get_all_formations,
    get_formation_compatibility,
    is_valid_formation,
    resolve_formation_fit,
)

__all__ = [
    "AdaptableCandidate",
    "FlexibilityResult",
    "FlexibilityScorer",
    "FormationComparer",
    "FormationComparison",
    "FormationFit",
    "FormationResolver",
    "MAX_COMPARED",
    "NO_POSITIONS_EXPLANATION",
    "PositionFlexibility",
    "SlotFit",
    "calculate_player_flexibility",
    "compare_formations",
    "explain_categories",
    "get_all_formations",
    "get_formation_compatibility",
    "get_formation_layout",
    "is_valid_formation",
    "percentage",
    "rank_roster_flexibility",
    "resolve_formation_fit",
]
