"""Canonical player model shared across ingestion and scoring layers."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Player(BaseModel):
    """Roster entry: a unique name plus one or more natural positions."""

    name: str = Field(..., min_length=1)
    positions: Tuple[str, ...] = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    @property
    def primary_position(self) -> str:
        return self.positions[0]
