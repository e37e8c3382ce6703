"""Football formation and position-compatibility analysis."""

from pitchfit.positions import get_position_category, standardize_position
from pitchfit.scoring import (
    calculate_player_flexibility,
    get_formation_compatibility,
    resolve_formation_fit,
)

__all__ = [
    "calculate_player_flexibility",
    "get_formation_compatibility",
    "get_position_category",
    "resolve_formation_fit",
    "standardize_position",
]
