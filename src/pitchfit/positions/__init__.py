"""Position normalization helpers."""

from .normalizer import (
    PositionNormalizer,
    are_positions_equal,
    get_all_positions,
    get_all_standard_positions,
    get_position_category,
    get_position_compatibility,
    get_position_description,
    get_position_mapping,
    get_position_variations,
    get_positions_by_category,
    get_tactical_alternatives,
    standardize_position,
    standardize_positions,
)

__all__ = [
    "PositionNormalizer",
    "are_positions_equal",
    "get_all_positions",
    "get_all_standard_positions",
    "get_position_category",
    "get_position_compatibility",
    "get_position_description",
    "get_position_mapping",
    "get_position_variations",
    "get_positions_by_category",
    "get_tactical_alternatives",
    "standardize_position",
    "standardize_positions",
]
