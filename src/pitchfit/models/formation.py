"""Formation records consumed by the requirement resolver and adapters."""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


FORMATION_SIZE = 11


class FormationSlot(BaseModel):
    """One required role in a formation, in canonical position codes."""

    position: str = Field(..., min_length=1)
    category: str
    required: bool = True
    alternatives: Tuple[str, ...] = ()
    x: Optional[float] = None
    y: Optional[float] = None

    model_config = ConfigDict(frozen=True)


class Formation(BaseModel):
    """Ordered sequence of exactly eleven slots with a single goalkeeper."""

    name: str = Field(..., min_length=1)
    description: str = ""
    tactical_notes: str = ""
    slots: Tuple[FormationSlot, ...]

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_shape(self) -> "Formation":
        if len(self.slots) != FORMATION_SIZE:
            raise ValueError(
                f"formation {self.name!r} has {len(self.slots)} slots, expected {FORMATION_SIZE}"
            )
        keepers = sum(1 for slot in self.slots if slot.category == "GK")
        if keepers != 1:
            raise ValueError(f"formation {self.name!r} has {keepers} goalkeeper slots, expected 1")
        return self

    @property
    def total_positions(self) -> int:
        return len(self.slots)


class LayoutPoint(BaseModel):
    """Raw pitch coordinate as authored in layout tables (0-100 on both axes)."""

    x: float = Field(..., ge=0.0, le=100.0)
    y: float = Field(..., ge=0.0, le=100.0)
    position: str
    category: str

    model_config = ConfigDict(frozen=True)


class SubFormation(BaseModel):
    """Named variant of a formation family, e.g. the 4-1-2-1-2 diamond of 4-4-2."""

    name: str = Field(..., min_length=1)
    parent: str
    description: str = ""
    shape: str = ""
    notes: str = ""
    layout: Tuple[LayoutPoint, ...] = ()

    model_config = ConfigDict(frozen=True)
