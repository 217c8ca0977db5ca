"""Aggregate result of one engine run for a job."""

from pydantic import Field

from .base import EngineBaseModel
from .enums import ConfigSource
from .ranked_candidate import RankedCandidate
from .scorecard import ConfidenceResult, MatchResult
from .shortlist import ShortlistResult


class EngineResult(EngineBaseModel):
    """Scores, ranking and shortlist for one job."""

    job_id: str = Field(..., description="Job identifier")
    matches: list[MatchResult] = Field(default_factory=list, description="Match per candidate")
    confidences: list[ConfidenceResult] = Field(
        default_factory=list, description="Confidence per candidate"
    )
    ranked: list[RankedCandidate] = Field(
        default_factory=list, description="Candidates above matcher_min_score, priority order"
    )
    shortlist: ShortlistResult = Field(..., description="Final shortlist")
    filtered_candidate_ids: list[str] = Field(
        default_factory=list, description="Candidates dropped by matcher_min_score"
    )
    guardrail_source: ConfigSource = Field(ConfigSource.DEFAULT, description="Guardrail source")
