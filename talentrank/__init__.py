"""talentrank - deterministic candidate scoring, ranking and shortlisting."""

from ._version import __version__
from .core.config import (
    DEFAULT_SCORING_CONFIG,
    GUARDRAIL_PRESETS,
    load_scoring_config,
    normalize_weights,
    resolve_guardrails,
    resolve_scoring_config,
)
from .core.engine import run_engine
from .core.errors import ConfigurationError, InvalidInputError, TalentRankError
from .core.scoring import (
    build_shortlist,
    compute_match_confidence,
    compute_match_score,
    rank_candidates,
)

__all__ = [
    "__version__",
    "run_engine",
    "compute_match_score",
    "compute_match_confidence",
    "rank_candidates",
    "build_shortlist",
    "normalize_weights",
    "resolve_guardrails",
    "resolve_scoring_config",
    "load_scoring_config",
    "DEFAULT_SCORING_CONFIG",
    "GUARDRAIL_PRESETS",
    "TalentRankError",
    "InvalidInputError",
    "ConfigurationError",
]
