"""Pydantic models for API I/O."""

from .flexibility import (
    FlexibilityRequest,
    FlexibilityResponse,
    PositionFlexibilityResponse,
    RosterPayload,
)
from .formation import (
    AdaptableCandidateResponse,
    CompareRequest,
    FormationFitResponse,
    FormationResponse,
    FormationSlotResponse,
    FormationSummaryResponse,
    SlotFitResponse,
    UniquePositionResponse,
)
from .positions import CompatibilityResponse, PositionListItem, PositionResponse
from .roster import PositionGroupResponse, RosterPositionsResponse

__all__ = [
    "AdaptableCandidateResponse",
    "CompareRequest",
    "CompatibilityResponse",
    "FlexibilityRequest",
    "FlexibilityResponse",
    "FormationFitResponse",
    "FormationResponse",
    "FormationSlotResponse",
    "FormationSummaryResponse",
    "PositionFlexibilityResponse",
    "PositionGroupResponse",
    "PositionListItem",
    "PositionResponse",
    "RosterPayload",
    "RosterPositionsResponse",
    "SlotFitResponse",
    "UniquePositionResponse",
]
