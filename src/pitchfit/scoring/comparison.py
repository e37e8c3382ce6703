"""Side-by-side comparison of formation variants."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from pitchfit.config import TacticalTables, default_tables
from pitchfit.ingest.adapters import (
    FormationSummary,
    SimplePosition,
    convert_to_simple_positions,
    create_formation_summary,
)
from pitchfit.models import LayoutPoint, SubFormation


logger = logging.getLogger(__name__)

MAX_COMPARED = 3


@dataclass(frozen=True)
class FormationComparison:
    sub_formation: SubFormation
    summary: FormationSummary


class FormationComparer:
    def __init__(self, tables: Optional[TacticalTables] = None) -> None:
        self.tables = tables or default_tables()

    def sub_formations(self, parent: Optional[str] = None) -> List[SubFormation]:
        records = list(self.tables.sub_formations.values())
        if parent is None:
            return records
        return [record for record in records if record.parent == parent]

    def layout(self, name: str) -> List[LayoutPoint]:
        record = self.tables.find_sub_formation(name)
        return list(record.layout) if record else []

    def summarize(self, name: str) -> Optional[FormationComparison]:
        record = self.tables.find_sub_formation(name)
        if record is None:
            return None
        positions: List[SimplePosition] = convert_to_simple_positions(
            record.layout, "coordinates", tables=self.tables
        )
        return FormationComparison(
            sub_formation=record,
            summary=create_formation_summary(positions, record.name, tables=self.tables),
        )

    def compare(self, names: Sequence[str]) -> List[FormationComparison]:
        """Summaries for up to three variants, in request order; unknown names are skipped."""

        if len(names) > MAX_COMPARED:
            raise ValueError(f"At most {MAX_COMPARED} formations can be compared at once, got {len(names)}")

        results = []
        for name in names:
            comparison = self.summarize(name)
            if comparison is None:
                logger.warning("Skipping unknown formation %r in comparison", name)
                continue
            results.append(comparison)
        return results


def get_formation_layout(name: str, *, tables: Optional[TacticalTables] = None) -> List[LayoutPoint]:
    return FormationComparer(tables).layout(name)


def compare_formations(
    names: Sequence[str],
    *,
    tables: Optional[TacticalTables] = None,
) -> List[FormationComparison]:
    return FormationComparer(tables or default_tables()).compare(names)
