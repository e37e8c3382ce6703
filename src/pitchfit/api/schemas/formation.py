from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class FormationSlotResponse(BaseModel):
    position: str
    category: str
    required: bool
    alternatives: List[str]


class FormationResponse(BaseModel):
    formation: str
    description: str
    tactical_notes: str
    total_positions: int
    positions: List[FormationSlotResponse]


class AdaptableCandidateResponse(BaseModel):
    name: str
    position: str
    category: str


class SlotFitResponse(BaseModel):
    position: str
    category: str
    required: bool
    alternatives: List[str]
    available_players: int
    fallback_players: int
    total_available: int
    has_players: bool
    natural: List[str]
    adaptable: List[AdaptableCandidateResponse]
    players: List[str]


class FormationFitResponse(BaseModel):
    formation: str
    description: str
    tactical_notes: str
    compatibility_score: int = Field(..., ge=0, le=100)
    filled_slots: int
    total_slots: int
    slots: List[SlotFitResponse]


class CompareRequest(BaseModel):
    formations: List[str] = Field(..., min_length=1)


class UniquePositionResponse(BaseModel):
    position: str
    category: str
    count: int


class FormationSummaryResponse(BaseModel):
    name: str
    parent: str
    shape: str
    description: str
    notes: str
    total_positions: int
    position_breakdown: Dict[str, int]
    unique_positions: List[UniquePositionResponse]
