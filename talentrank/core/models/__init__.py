"""Engine data models for jobs, candidates, scoring, ranking and shortlists."""

from .base import EngineBaseModel, coerce_model, utc_now
from .candidate_profile import Candidate, CandidateSkill
from .config import (
    ConfidenceThresholds,
    ConfidenceWeights,
    GuardrailConfig,
    MatcherWeights,
    RankerWeights,
    ResolvedGuardrails,
    ScoringConfig,
    ScoringWeights,
)
from .engine_result import EngineResult
from .enums import (
    ConfidenceBand,
    ConfigSource,
    ExplainLevel,
    SeniorityLevel,
    ShortlistStrategy,
)
from .job_profile import Job, JobSkill
from .ranked_candidate import RankedCandidate, RankerCandidate
from .scorecard import ConfidenceBreakdown, ConfidenceResult, MatchResult, MatchSignals
from .shortlist import ShortlistMatch, ShortlistResult

__all__ = [
    # Base
    "EngineBaseModel",
    "coerce_model",
    "utc_now",
    # Enums
    "SeniorityLevel",
    "ConfidenceBand",
    "ShortlistStrategy",
    "ExplainLevel",
    "ConfigSource",
    # Job / Candidate
    "Job",
    "JobSkill",
    "Candidate",
    "CandidateSkill",
    # Config
    "MatcherWeights",
    "ConfidenceWeights",
    "RankerWeights",
    "ScoringWeights",
    "ConfidenceThresholds",
    "GuardrailConfig",
    "ResolvedGuardrails",
    "ScoringConfig",
    # Scorecard
    "MatchSignals",
    "MatchResult",
    "ConfidenceBreakdown",
    "ConfidenceResult",
    # Ranking
    "RankerCandidate",
    "RankedCandidate",
    # Shortlist
    "ShortlistMatch",
    "ShortlistResult",
    "EngineResult",
]
