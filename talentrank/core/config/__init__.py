"""Scoring configuration: defaults, weight normalization, guardrails and settings."""

from .defaults import DEFAULT_GUARDRAILS, DEFAULT_SCORING_CONFIG, GUARDRAIL_PRESETS
from .guardrails import (
    load_scoring_config,
    resolve_guardrails,
    resolve_scoring_config,
    validate_guardrails,
)
from .loader import ConfigLoader, load_config
from .weights import deep_merge, normalize_weights

__all__ = [
    "DEFAULT_SCORING_CONFIG",
    "DEFAULT_GUARDRAILS",
    "GUARDRAIL_PRESETS",
    "normalize_weights",
    "deep_merge",
    "resolve_guardrails",
    "validate_guardrails",
    "resolve_scoring_config",
    "load_scoring_config",
    "ConfigLoader",
    "load_config",
]
