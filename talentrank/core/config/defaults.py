"""Canonical default configuration and named guardrail presets.

Every default the engine uses lives on the models in ``core.models.config``;
this module only instantiates them once and lists the preset overrides.
"""

from typing import Any

from ..models.config import GuardrailConfig, ScoringConfig

DEFAULT_SCORING_CONFIG = ScoringConfig()
DEFAULT_GUARDRAILS: GuardrailConfig = DEFAULT_SCORING_CONFIG.guardrails

DEFAULT_PRESET = "balanced"

# Partial overrides applied on top of DEFAULT_GUARDRAILS
GUARDRAIL_PRESETS: dict[str, dict[str, Any]] = {
    "conservative": {
        "matcher_min_score": 60,
        "shortlist_min_score": 80,
        "shortlist_max_candidates": 3,
        "require_must_have_skills": True,
        "explain_level": "detailed",
        "confidence_passing_score": 80,
        "shortlist_strategy": "strict",
    },
    "balanced": {},
    "aggressive": {
        "matcher_min_score": 30,
        "shortlist_min_score": 55,
        "shortlist_max_candidates": 10,
        "explain_level": "brief",
        "confidence_passing_score": 60,
        "shortlist_strategy": "fast",
    },
    "demo-safe": {
        "matcher_min_score": 50,
        "shortlist_min_score": 65,
        "explain_level": "detailed",
        "shortlist_strategy": "diversity",
    },
}


def normalize_preset(preset: str | None) -> str:
    """Map a stored preset name to a known preset, defaulting to balanced."""
    if not preset:
        return DEFAULT_PRESET
    name = preset.strip().lower()
    return name if name in GUARDRAIL_PRESETS else DEFAULT_PRESET
