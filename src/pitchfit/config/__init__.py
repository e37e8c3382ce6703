"""Static reference tables for positions, compatibility and formations."""

from .compatibility import FALLBACK_LIMIT, CompatibilityEntry
from .formations import FormationRequirements, SlotRequirement
from .positions import ROLE_CATEGORIES, UNKNOWN_CATEGORY, PositionMapping
from .tables import TacticalTables, build_tables, default_tables

__all__ = [
    "FALLBACK_LIMIT",
    "CompatibilityEntry",
    "FormationRequirements",
    "PositionMapping",
    "ROLE_CATEGORIES",
    "SlotRequirement",
    "TacticalTables",
    "UNKNOWN_CATEGORY",
    "build_tables",
    "default_tables",
]
