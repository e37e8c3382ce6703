"""Map free-form position spellings onto the canonical vocabulary."""

from __future__ import annotations

from typing import List, Optional, Sequence

from pitchfit.config import (
    UNKNOWN_CATEGORY,
    CompatibilityEntry,
    PositionMapping,
    TacticalTables,
    default_tables,
)


class PositionNormalizer:
    """Total, side-effect free lookups over the alias table.

    Unknown spellings are never rejected: ``standardize`` echoes them back and
    ``category`` reports ``"Unknown"``.
    """

    def __init__(self, tables: Optional[TacticalTables] = None) -> None:
        self.tables = tables or default_tables()

    def standardize(self, raw: str) -> str:
        return self.tables.standardize(raw)

    def standardize_many(self, positions: Sequence[str]) -> List[str]:
        return [self.standardize(position) for position in positions]

    def mapping(self, raw: str) -> Optional[PositionMapping]:
        return self.tables.standard_lookup.get(self.standardize(raw))

    def category(self, raw: str) -> str:
        mapping = self.mapping(raw)
        return mapping.category if mapping else UNKNOWN_CATEGORY

    def equal(self, first: str, second: str) -> bool:
        return self.standardize(first) == self.standardize(second)

    def variations(self, raw: str) -> List[str]:
        mapping = self.mapping(raw)
        return list(mapping.variations) if mapping else [raw]

    def description(self, raw: str) -> str:
        mapping = self.mapping(raw)
        return mapping.description if mapping else raw

    def all_standard(self) -> List[str]:
        return [mapping.standard for mapping in self.tables.position_mappings]

    def by_category(self, category: str) -> List[str]:
        return [
            mapping.standard
            for mapping in self.tables.position_mappings
            if mapping.category == category
        ]

    def tactical_alternatives(self, raw: str) -> List[str]:
        return list(self.tables.tactical_alternatives.get(self.standardize(raw), ()))

    def compatibility(self, raw: str) -> Optional[CompatibilityEntry]:
        return self.tables.compatibility.get(self.standardize(raw))


def _default() -> PositionNormalizer:
    return PositionNormalizer(default_tables())


def standardize_position(position: str) -> str:
    """Convert any position name to its standard form, echoing unknown input."""

    return _default().standardize(position)


def standardize_positions(positions: Sequence[str]) -> List[str]:
    return _default().standardize_many(positions)


def get_position_mapping(position: str) -> Optional[PositionMapping]:
    return _default().mapping(position)


def get_position_category(position: str) -> str:
    """Return ``GK``/``DF``/``MF``/``FW``, or ``"Unknown"`` for unmapped input."""

    return _default().category(position)


def are_positions_equal(first: str, second: str) -> bool:
    return _default().equal(first, second)


def get_position_variations(position: str) -> List[str]:
    return _default().variations(position)


def get_position_description(position: str) -> str:
    return _default().description(position)


def get_all_standard_positions() -> List[str]:
    return _default().all_standard()


def get_positions_by_category(category: str) -> List[str]:
    return _default().by_category(category)


def get_tactical_alternatives(position: str) -> List[str]:
    return _default().tactical_alternatives(position)


def get_position_compatibility(position: str) -> Optional[CompatibilityEntry]:
    return _default().compatibility(position)


def get_all_positions() -> List[str]:
    return list(default_tables().compatibility)
