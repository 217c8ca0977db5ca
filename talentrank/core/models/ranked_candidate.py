"""Ranker input/output models (Pydantic only, never persisted)."""

from pydantic import Field

from .base import EngineBaseModel


class RankerCandidate(EngineBaseModel):
    """Per-candidate signals fed to the ranker."""

    id: str = Field(..., min_length=1, description="Candidate (or match) identifier")
    match_score: float = Field(..., ge=0.0, le=100.0, description="Match score")
    confidence_score: float = Field(..., ge=0.0, le=100.0, description="Confidence score")
    recency_days: float = Field(0.0, ge=0.0, description="Days since the profile was updated")
    role_alignment: float = Field(50.0, ge=0.0, le=100.0, description="Role alignment")


class RankedCandidate(RankerCandidate):
    """Ranker output used purely for ordering."""

    priority_score: int = Field(..., ge=0, le=100, description="Combined priority")
    recency_score: int = Field(..., ge=0, le=100, description="Recency 0-100")
