"""Persist and load JSON table profiles that override the bundled tables."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from pitchfit.config import TacticalTables, build_tables
from pitchfit.config.compatibility import compatibility_from_mapping, default_fallbacks
from pitchfit.config.formations import default_formations, requirements_from_records
from pitchfit.config.positions import mappings_from_aliases


@dataclass
class TablesProfile:
    aliases: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    compatibility: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    fallbacks: Dict[str, List[str]] = field(default_factory=dict)
    formations: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def load(cls, path: Path) -> "TablesProfile":
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid tables profile {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Tables profile {path} must contain a JSON object")
        return cls(
            aliases=data.get("aliases", {}),
            compatibility=data.get("compatibility", {}),
            fallbacks=data.get("fallbacks", {}),
            formations=data.get("formations", []),
        )

    def save(self, path: Path) -> None:
        Path(path).write_text(json.dumps(asdict(self), indent=2), encoding="utf-8")

    def to_tables(self) -> TacticalTables:
        """Overlay the profile on the bundled data.

        Aliases and compatibility entries merge per position; fallback lists
        merge per slot; formation records are added to (or replace) the
        bundled formations by name.
        """

        fallbacks = dict(default_fallbacks())
        fallbacks.update({slot: tuple(sources) for slot, sources in self.fallbacks.items()})

        formations = {requirements.formation: requirements for requirements in default_formations()}
        for requirements in requirements_from_records(self.formations):
            formations[requirements.formation] = requirements

        return build_tables(
            position_mappings=mappings_from_aliases(self.aliases),
            compatibility=compatibility_from_mapping(self.compatibility),
            fallbacks=fallbacks,
            formations=formations.values(),
        )


def load_tables(path: Path) -> TacticalTables:
    return TablesProfile.load(path).to_tables()
