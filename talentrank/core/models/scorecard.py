"""Match and confidence result models for a candidate-job pairing (Pydantic only)."""

from pydantic import Field

from .base import EngineBaseModel
from .enums import ConfidenceBand


# =============================================================================
# Match
# =============================================================================


class MatchSignals(EngineBaseModel):
    """Normalized 0-1 signals behind a match score.

    The shortlist diversity strategy compares these to detect look-alike candidates.
    """

    must_have_skills_coverage: float = Field(1.0, ge=0.0, le=1.0, description="Required skills covered")
    nice_to_have_skills_coverage: float = Field(
        1.0, ge=0.0, le=1.0, description="Preferred skills covered"
    )
    experience_alignment: float = Field(0.5, ge=0.0, le=1.0, description="Tenure alignment")
    location_alignment: float = Field(0.5, ge=0.0, le=1.0, description="Location alignment")


class MatchResult(EngineBaseModel):
    """Match score between one candidate and one job."""

    candidate_id: str = Field(..., description="Candidate identifier")
    job_id: str = Field(..., description="Job identifier")
    score: int = Field(..., ge=0, le=100, description="Overall match 0-100")
    reasons: list[str] = Field(default_factory=list, description="Ordered explanation")

    # Sub-scores
    skill_score: int = Field(0, ge=0, le=100, description="Weighted skill coverage")
    seniority_score: int = Field(0, ge=0, le=100, description="Seniority alignment")
    location_score: int = Field(0, ge=0, le=100, description="Location alignment")
    tenure_score: int = Field(0, ge=0, le=100, description="Experience years alignment")

    signals: MatchSignals = Field(default_factory=MatchSignals, description="Normalized signals")

    # Skill detail
    matched_skills: list[str] = Field(default_factory=list, description="Matched job skills")
    missing_required_skills: list[str] = Field(
        default_factory=list, description="Required skills the candidate lacks"
    )
    missing_preferred_skills: list[str] = Field(
        default_factory=list, description="Preferred skills the candidate lacks"
    )


# =============================================================================
# Confidence
# =============================================================================


class ConfidenceBreakdown(EngineBaseModel):
    """Factors behind a confidence score."""

    skill_coverage: float = Field(0.0, ge=0.0, le=1.0, description="Fraction of job skills present")
    profile_completeness: float = Field(
        0.0, ge=0.0, le=1.0, description="Fraction of critical profile fields populated"
    )
    recency_score: int = Field(50, ge=0, le=100, description="Profile freshness 0-100")
    missing_fields: list[str] = Field(default_factory=list, description="Missing critical fields")
    placeholder_fields: list[str] = Field(
        default_factory=list, description="Fields holding placeholder values like 'N/A'"
    )
    parsing_confidence: float | None = Field(None, ge=0.0, le=1.0, description="Parser confidence")


class ConfidenceResult(EngineBaseModel):
    """How trustworthy a match score is for a candidate."""

    candidate_id: str = Field(..., description="Candidate identifier")
    score: int = Field(..., ge=0, le=100, description="Confidence 0-100")
    band: ConfidenceBand = Field(..., description="HIGH / MEDIUM / LOW")
    reasons: list[str] = Field(default_factory=list, description="Ordered explanation")
    breakdown: ConfidenceBreakdown = Field(..., description="Factor breakdown")
