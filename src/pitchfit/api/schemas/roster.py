from __future__ import annotations

from typing import List

from pydantic import BaseModel


class PositionGroupResponse(BaseModel):
    position: str
    category: str
    players: List[str]
    count: int


class RosterPositionsResponse(BaseModel):
    total_rows: int
    players: int
    skipped_rows: List[str]
    positions: List[PositionGroupResponse]
