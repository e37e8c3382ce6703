"""Immutable bundle of every static table the engine reads."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from pitchfit.models import Formation, FormationSlot, SubFormation

from .compatibility import FALLBACK_LIMIT, CompatibilityEntry, default_compatibility, default_fallbacks
from .formations import FormationRequirements, default_formations
from .layouts import default_sub_formations
from .positions import (
    UNKNOWN_CATEGORY,
    PositionMapping,
    default_position_mappings,
    default_tactical_alternatives,
)


@dataclass(frozen=True)
class TacticalTables:
    """Lookup tables built once and shared read-only by every engine object."""

    position_mappings: Tuple[PositionMapping, ...]
    alias_lookup: Mapping[str, str]
    standard_lookup: Mapping[str, PositionMapping]
    compatibility: Mapping[str, CompatibilityEntry]
    fallbacks: Mapping[str, Tuple[str, ...]]
    tactical_alternatives: Mapping[str, Tuple[str, ...]]
    formations: Mapping[str, Formation]
    sub_formations: Mapping[str, SubFormation]
    fallback_limit: int = FALLBACK_LIMIT

    @property
    def total_positions(self) -> int:
        return len(self.position_mappings)

    def standardize(self, raw: str) -> str:
        if not raw:
            return raw
        return self.alias_lookup.get(raw.upper(), raw)

    def category_of(self, raw: str) -> str:
        mapping = self.standard_lookup.get(self.standardize(raw))
        return mapping.category if mapping else UNKNOWN_CATEGORY

    def find_formation(self, name: str) -> Optional[Formation]:
        return self.formations.get(name)

    def get_formation(self, name: str) -> Formation:
        """Fetch a formation by name, raising KeyError if missing."""

        if name not in self.formations:
            raise KeyError(f"No formation requirements configured for {name!r}")
        return self.formations[name]

    def find_sub_formation(self, name: str) -> Optional[SubFormation]:
        """Variant record for ``name``; only the first token counts (``"4-4-2 Flat"`` -> ``"4-4-2"``)."""

        key = name.split(" ")[0] if name else name
        return self.sub_formations.get(key)

    def formation_names(self) -> List[str]:
        return list(self.formations)


def _alias_lookup(mappings: Iterable[PositionMapping]) -> Dict[str, str]:
    lookup: Dict[str, str] = {}
    for mapping in mappings:
        for variation in (mapping.standard, *mapping.variations):
            key = variation.upper()
            existing = lookup.get(key)
            if existing is not None and existing != mapping.standard:
                raise ValueError(
                    f"alias {variation!r} maps to both {existing!r} and {mapping.standard!r}"
                )
            lookup[key] = mapping.standard
    return lookup


def _check_compatibility(
    standards: Mapping[str, PositionMapping],
    entries: Iterable[CompatibilityEntry],
) -> Dict[str, CompatibilityEntry]:
    matrix: Dict[str, CompatibilityEntry] = {}
    for entry in entries:
        if entry.position in matrix:
            raise ValueError(f"duplicate compatibility entry for {entry.position!r}")
        if entry.position not in entry.compatible:
            raise ValueError(f"compatibility entry for {entry.position!r} must include itself")
        unknown = [pos for pos in entry.compatible if pos not in standards]
        if unknown:
            raise ValueError(f"compatibility entry for {entry.position!r} lists unknown positions {unknown}")
        if len(set(entry.compatible)) != len(entry.compatible):
            raise ValueError(f"compatibility entry for {entry.position!r} repeats a position")
        if not 0 <= entry.score <= 100:
            raise ValueError(f"compatibility score for {entry.position!r} must be within 0-100")
        matrix[entry.position] = entry

    missing = [standard for standard in standards if standard not in matrix]
    if missing:
        raise ValueError(f"no compatibility entry for positions {missing}")
    return matrix


def _build_formation(
    requirements: FormationRequirements,
    alias_lookup: Mapping[str, str],
    standards: Mapping[str, PositionMapping],
) -> Formation:
    def canonical(raw: str) -> str:
        return alias_lookup.get(raw.upper(), raw)

    slots = []
    for requirement in requirements.slots:
        position = canonical(requirement.position)
        mapping = standards.get(position)
        if mapping is None:
            raise ValueError(f"formation {requirements.formation!r} uses unknown position {requirement.position!r}")
        alternatives: List[str] = []
        for alt in requirement.alternatives:
            alt_position = canonical(alt)
            if alt_position != position and alt_position not in alternatives:
                alternatives.append(alt_position)
        slots.append(
            FormationSlot(
                position=position,
                category=mapping.category,
                required=requirement.required,
                alternatives=tuple(alternatives),
            )
        )
    return Formation(
        name=requirements.formation,
        description=requirements.description,
        tactical_notes=requirements.tactical_notes,
        slots=tuple(slots),
    )


def build_tables(
    *,
    position_mappings: Optional[Iterable[PositionMapping]] = None,
    compatibility: Optional[Iterable[CompatibilityEntry]] = None,
    fallbacks: Optional[Mapping[str, Iterable[str]]] = None,
    tactical_alternatives: Optional[Mapping[str, Iterable[str]]] = None,
    formations: Optional[Iterable[FormationRequirements]] = None,
    sub_formations: Optional[Iterable[SubFormation]] = None,
    fallback_limit: int = FALLBACK_LIMIT,
) -> TacticalTables:
    """Assemble and validate a :class:`TacticalTables`; omitted tables use the bundled data."""

    mappings = tuple(position_mappings if position_mappings is not None else default_position_mappings())
    standards: Dict[str, PositionMapping] = {}
    for mapping in mappings:
        if mapping.standard in standards:
            raise ValueError(f"duplicate position mapping for {mapping.standard!r}")
        standards[mapping.standard] = mapping
    alias_lookup = _alias_lookup(mappings)

    matrix = _check_compatibility(
        standards,
        compatibility if compatibility is not None else default_compatibility(),
    )

    def canonical_table(table: Mapping[str, Iterable[str]], label: str) -> Dict[str, Tuple[str, ...]]:
        result: Dict[str, Tuple[str, ...]] = {}
        for key, values in table.items():
            positions = (key, *values)
            unknown = [pos for pos in positions if pos not in standards]
            if unknown:
                raise ValueError(f"{label} for {key!r} uses unknown positions {unknown}")
            result[key] = tuple(values)
        return result

    fallback_table = canonical_table(fallbacks if fallbacks is not None else default_fallbacks(), "fallbacks")
    alternatives_table = canonical_table(
        tactical_alternatives if tactical_alternatives is not None else default_tactical_alternatives(),
        "tactical alternatives",
    )

    if fallback_limit < 0:
        raise ValueError("fallback_limit must be non-negative")

    formation_table: Dict[str, Formation] = {}
    for requirements in formations if formations is not None else default_formations():
        if requirements.formation in formation_table:
            raise ValueError(f"duplicate formation {requirements.formation!r}")
        formation_table[requirements.formation] = _build_formation(requirements, alias_lookup, standards)

    sub_table: Dict[str, SubFormation] = {}
    for sub in sub_formations if sub_formations is not None else default_sub_formations():
        sub_table[sub.name] = sub

    return TacticalTables(
        position_mappings=mappings,
        alias_lookup=MappingProxyType(alias_lookup),
        standard_lookup=MappingProxyType(standards),
        compatibility=MappingProxyType(matrix),
        fallbacks=MappingProxyType(fallback_table),
        tactical_alternatives=MappingProxyType(alternatives_table),
        formations=MappingProxyType(formation_table),
        sub_formations=MappingProxyType(sub_table),
        fallback_limit=fallback_limit,
    )


@lru_cache(maxsize=1)
def default_tables() -> TacticalTables:
    """Return the process-wide tables built from the bundled data."""

    return build_tables()
