from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field


class FlexibilityRequest(BaseModel):
    name: str
    positions: List[str] = Field(default_factory=list)


class PositionFlexibilityResponse(BaseModel):
    position: str
    category: str
    compatible_positions: List[str]
    flexibility_score: int = Field(..., ge=0, le=100)


class FlexibilityResponse(BaseModel):
    name: str
    primary_positions: List[str]
    flexibility_score: int = Field(..., ge=0, le=100)
    breakdown: List[PositionFlexibilityResponse]
    explanation: str
    compatible_positions: List[str]


class RosterPayload(BaseModel):
    """Roster in either the category-grouped or the flat record shape."""

    players: Any
