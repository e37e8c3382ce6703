"""Input adapters that normalize raw roster and formation data."""

from .adapters import (
    FormationSummary,
    SimplePosition,
    UniquePosition,
    convert_coordinates_to_slots,
    convert_percent_to_slots,
    convert_slots_to_simple,
    convert_to_simple_positions,
    create_formation_summary,
    extract_unique_positions,
    formation_from_layout,
    formation_from_slots,
    merge_formation_data,
    validate_formation_data,
)
from .roster import (
    PositionGroup,
    RosterReport,
    RosterRow,
    build_roster,
    group_by_position,
    load_roster,
    load_roster_json,
    load_roster_with_report,
    roster_from_grouped,
    roster_from_records,
)

__all__ = [
    "FormationSummary",
    "PositionGroup",
    "RosterReport",
    "RosterRow",
    "SimplePosition",
    "UniquePosition",
    "build_roster",
    "convert_coordinates_to_slots",
    "convert_percent_to_slots",
    "convert_slots_to_simple",
    "convert_to_simple_positions",
    "create_formation_summary",
    "extract_unique_positions",
    "formation_from_layout",
    "formation_from_slots",
    "group_by_position",
    "load_roster",
    "load_roster_json",
    "load_roster_with_report",
    "merge_formation_data",
    "roster_from_grouped",
    "roster_from_records",
    "validate_formation_data",
]
