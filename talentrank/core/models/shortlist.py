"""Shortlist input/output models (Pydantic only)."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from .base import EngineBaseModel
from .enums import ConfidenceBand, ShortlistStrategy


class ShortlistMatch(EngineBaseModel):
    """A scored candidate eligible for shortlisting."""

    candidate_id: str = Field(..., min_length=1, description="Candidate identifier")
    score: float = Field(..., ge=0.0, le=100.0, description="Score used for selection")
    confidence_band: ConfidenceBand = Field(ConfidenceBand.LOW, description="Confidence band")
    signals: dict[str, float] | None = Field(None, description="Key signals for diversity checks")
    rank: int | None = Field(
        None, ge=0, description="Upstream ranking position; breaks score ties before the id"
    )

    @field_validator("confidence_band", mode="before")
    @classmethod
    def _default_band(cls, value: Any) -> Any:
        if value is None:
            return ConfidenceBand.LOW
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("signals", mode="before")
    @classmethod
    def _signals_to_dict(cls, value: Any) -> Any:
        if isinstance(value, BaseModel):
            return value.model_dump()
        return value


class ShortlistResult(EngineBaseModel):
    """Bounded, ordered shortlist for one job."""

    shortlisted_candidate_ids: list[str] = Field(default_factory=list, description="Ordered IDs")
    cutoff_score: float | None = Field(None, description="Score of the last included candidate")
    strategy: ShortlistStrategy = Field(..., description="Strategy applied")
    max_candidates: int = Field(..., ge=1, description="Size bound applied")
    notes: list[str] = Field(default_factory=list, description="Selection notes")
