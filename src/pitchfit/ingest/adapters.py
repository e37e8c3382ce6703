"""Adapters between the positional data shapes found in formation tables.

Three shapes show up at ingestion boundaries:

``coordinates``
    ``{"x", "y", "position", "category"}`` points (or :class:`LayoutPoint`).
``percent``
    ``{"xPercent", "yPercent", "role", "id"?}`` points.
``compatibility``
    :class:`FormationSlot` records or ``{"position", "category", "isRequired"}``.

Each is converted into canonical :class:`FormationSlot` lists, and any of them
(plus ``simple`` ``{"position", "category"}`` pairs) into :class:`SimplePosition`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Literal, Mapping, Optional, Sequence, Tuple

from pitchfit.config import TacticalTables, default_tables
from pitchfit.models import Formation, FormationSlot, SubFormation


logger = logging.getLogger(__name__)

DataFormat = Literal["coordinates", "percent", "compatibility", "simple"]

_MISSING = object()


@dataclass(frozen=True)
class SimplePosition:
    position: str
    category: str


@dataclass(frozen=True)
class UniquePosition:
    position: str
    category: str
    count: int


@dataclass(frozen=True)
class FormationSummary:
    formation: str
    total_positions: int
    position_breakdown: Dict[str, int]
    unique_positions: List[UniquePosition]


def _field(item: Any, *names: str, default: Any = _MISSING) -> Any:
    for name in names:
        if isinstance(item, Mapping):
            if name in item:
                return item[name]
        elif hasattr(item, name):
            return getattr(item, name)
    if default is _MISSING:
        raise KeyError(f"missing field {names[0]!r}")
    return default


def convert_coordinates_to_slots(
    points: Iterable[Any],
    *,
    tables: Optional[TacticalTables] = None,
) -> List[FormationSlot]:
    tables = tables or default_tables()
    slots = []
    for point in points:
        raw = str(_field(point, "position"))
        slots.append(
            FormationSlot(
                position=tables.standardize(raw),
                category=tables.category_of(raw),
                x=float(_field(point, "x")),
                y=float(_field(point, "y")),
            )
        )
    return slots


def convert_percent_to_slots(
    points: Iterable[Any],
    *,
    tables: Optional[TacticalTables] = None,
) -> List[FormationSlot]:
    tables = tables or default_tables()
    slots = []
    for point in points:
        raw = str(_field(point, "role"))
        slots.append(
            FormationSlot(
                position=tables.standardize(raw),
                category=tables.category_of(raw),
                x=float(_field(point, "xPercent", "x_percent")),
                y=float(_field(point, "yPercent", "y_percent")),
            )
        )
    return slots


def convert_slots_to_simple(slots: Iterable[Any]) -> List[SimplePosition]:
    return [
        SimplePosition(position=str(_field(slot, "position")), category=str(_field(slot, "category")))
        for slot in slots
    ]


def convert_to_simple_positions(
    data: Sequence[Any],
    data_format: DataFormat,
    *,
    tables: Optional[TacticalTables] = None,
) -> List[SimplePosition]:
    if data_format == "coordinates":
        return convert_slots_to_simple(convert_coordinates_to_slots(data, tables=tables))
    if data_format == "percent":
        return convert_slots_to_simple(convert_percent_to_slots(data, tables=tables))
    if data_format in ("compatibility", "simple"):
        return convert_slots_to_simple(data)
    raise ValueError(f"Unknown format: {data_format}")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_formation_data(data: Any, expected_format: str) -> bool:
    """Check that every entry of ``data`` carries the fields ``expected_format`` needs."""

    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        return False

    def check(item: Any) -> bool:
        def get(*names: str) -> Any:
            return _field(item, *names, default=None)

        if expected_format == "coordinates":
            return (
                _is_number(get("x"))
                and _is_number(get("y"))
                and isinstance(get("position"), str)
                and isinstance(get("category"), str)
            )
        if expected_format == "percent":
            return (
                _is_number(get("xPercent", "x_percent"))
                and _is_number(get("yPercent", "y_percent"))
                and isinstance(get("role"), str)
            )
        if expected_format == "compatibility":
            return (
                isinstance(get("position"), str)
                and isinstance(get("category"), str)
                and isinstance(get("isRequired", "required"), bool)
            )
        if expected_format == "simple":
            return isinstance(get("position"), str) and isinstance(get("category"), str)
        return False

    if expected_format not in ("coordinates", "percent", "compatibility", "simple"):
        return False
    return all(check(item) for item in data)


def merge_formation_data(
    sources: Iterable[Tuple[Sequence[Any], DataFormat]],
    *,
    tables: Optional[TacticalTables] = None,
) -> List[SimplePosition]:
    """Concatenate several sources; a source that fails to convert is skipped."""

    merged: List[SimplePosition] = []
    for data, data_format in sources:
        try:
            merged.extend(convert_to_simple_positions(data, data_format, tables=tables))
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Failed to convert formation data (%s): %s", data_format, exc)
    return merged


def extract_unique_positions(
    positions: Iterable[SimplePosition],
    *,
    tables: Optional[TacticalTables] = None,
) -> List[UniquePosition]:
    tables = tables or default_tables()
    counts: Dict[str, List[Any]] = {}
    for pos in positions:
        standard = tables.standardize(pos.position)
        entry = counts.get(standard)
        if entry is None:
            counts[standard] = [tables.category_of(pos.position), 1]
        else:
            entry[1] += 1
    return [UniquePosition(position=position, category=category, count=count) for position, (category, count) in counts.items()]


def create_formation_summary(
    positions: Sequence[SimplePosition],
    formation_name: str,
    *,
    tables: Optional[TacticalTables] = None,
) -> FormationSummary:
    unique = extract_unique_positions(positions, tables=tables)
    breakdown: Dict[str, int] = {}
    for pos in unique:
        breakdown[pos.category] = breakdown.get(pos.category, 0) + pos.count
    return FormationSummary(
        formation=formation_name,
        total_positions=len(positions),
        position_breakdown=breakdown,
        unique_positions=unique,
    )


def formation_from_slots(
    name: str,
    slots: Sequence[FormationSlot],
    *,
    description: str = "",
    tactical_notes: str = "",
) -> Formation:
    """Wrap converted slots in a validated :class:`Formation` (11 slots, one GK)."""

    return Formation(
        name=name,
        description=description,
        tactical_notes=tactical_notes,
        slots=tuple(slots),
    )


def formation_from_layout(
    sub_formation: SubFormation,
    *,
    tables: Optional[TacticalTables] = None,
) -> Formation:
    return formation_from_slots(
        sub_formation.name,
        convert_coordinates_to_slots(sub_formation.layout, tables=tables),
        description=sub_formation.description,
        tactical_notes=sub_formation.notes,
    )
