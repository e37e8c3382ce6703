from __future__ import annotations

from typing import List

from pydantic import BaseModel


class CompatibilityResponse(BaseModel):
    compatible: List[str]
    score: int


class PositionResponse(BaseModel):
    raw: str
    standard: str
    category: str
    description: str
    variations: List[str]
    tactical_alternatives: List[str]
    compatibility: CompatibilityResponse | None = None


class PositionListItem(BaseModel):
    standard: str
    category: str
    description: str
    variations: List[str]
