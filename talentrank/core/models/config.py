"""Scoring configuration models: weights, thresholds and tenant guardrails."""

from pydantic import Field

from .base import EngineBaseModel
from .enums import ConfigSource, ExplainLevel, ShortlistStrategy


# =============================================================================
# Weights
# =============================================================================


class MatcherWeights(EngineBaseModel):
    """Weights for the match score sub-scores."""

    skills: float = Field(0.6, ge=0.0)
    experience: float = Field(0.2, ge=0.0, description="Applied to the seniority sub-score")
    location: float = Field(0.1, ge=0.0)
    tenure: float = Field(0.1, ge=0.0, description="Applied to the experience-years sub-score")


class ConfidenceWeights(EngineBaseModel):
    """Weights for the confidence factors."""

    data_completeness: float = Field(0.4, ge=0.0)
    skill_overlap: float = Field(0.4, ge=0.0)
    recency: float = Field(0.2, ge=0.0)


class RankerWeights(EngineBaseModel):
    """Weights for the ranker priority score."""

    match: float = Field(0.5, ge=0.0)
    confidence: float = Field(0.2, ge=0.0)
    recency: float = Field(0.15, ge=0.0)
    role: float = Field(0.15, ge=0.0)


class ScoringWeights(EngineBaseModel):
    """All weight tables used by the engine."""

    matcher: MatcherWeights = Field(default_factory=MatcherWeights)
    confidence: ConfidenceWeights = Field(default_factory=ConfidenceWeights)
    ranker: RankerWeights = Field(default_factory=RankerWeights)


class ConfidenceThresholds(EngineBaseModel):
    """Score cut points for confidence bands."""

    high: float = Field(75.0, description="Minimum score for HIGH")
    medium: float = Field(50.0, description="Scores below this are LOW")


# =============================================================================
# Guardrails
# =============================================================================


class GuardrailConfig(EngineBaseModel):
    """Per-tenant guardrails merged over documented defaults."""

    matcher_min_score: float = Field(40.0, description="Matches below this are dropped")
    shortlist_min_score: float = Field(70.0, description="Strict strategy score floor")
    shortlist_max_candidates: int = Field(5, description="Shortlist size bound")
    require_must_have_skills: bool = Field(False, description="Zero the score on missing must-haves")
    explain_level: ExplainLevel = Field(ExplainLevel.STANDARD, description="Reason verbosity")
    confidence_passing_score: float = Field(70.0, description="Minimum confidence for HIGH")
    shortlist_strategy: ShortlistStrategy = Field(
        ShortlistStrategy.QUALITY, description="Default shortlist strategy"
    )


class ResolvedGuardrails(EngineBaseModel):
    """Merged guardrails plus where they came from."""

    config: GuardrailConfig = Field(..., description="Effective guardrails")
    source: ConfigSource = Field(ConfigSource.DEFAULT, description="default or database")
    preset: str | None = Field(None, description="Preset the override was merged onto")


class ScoringConfig(EngineBaseModel):
    """Fully resolved engine configuration for one tenant."""

    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    confidence_thresholds: ConfidenceThresholds = Field(default_factory=ConfidenceThresholds)
    location_partial_score: float = Field(
        40.0, ge=0.0, le=100.0, description="Location score for same-region matches"
    )
    diversity_epsilon: float = Field(
        0.02, ge=0.0, le=1.0, description="Signal distance treated as a near-duplicate"
    )
    guardrails: GuardrailConfig = Field(default_factory=GuardrailConfig)
    guardrail_source: ConfigSource = Field(ConfigSource.DEFAULT, description="Guardrail source")
    preset: str | None = Field(None, description="Guardrail preset name")
