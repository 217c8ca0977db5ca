"""Tenant guardrail resolution and scoring config assembly."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_snake

from ..errors import ConfigurationError
from ..models.config import (
    ConfidenceThresholds,
    GuardrailConfig,
    ResolvedGuardrails,
    ScoringConfig,
)
from ..models.enums import ConfigSource
from ...observability.logger import get_logger
from .defaults import DEFAULT_GUARDRAILS, DEFAULT_SCORING_CONFIG, GUARDRAIL_PRESETS, normalize_preset
from .loader import load_config
from .weights import deep_merge

logger = get_logger(__name__)

_SCORE_THRESHOLDS = ("matcher_min_score", "shortlist_min_score", "confidence_passing_score")


def resolve_guardrails(
    stored: Mapping[str, Any] | GuardrailConfig | None = None,
    preset: str | None = None,
    base: GuardrailConfig | None = None,
) -> ResolvedGuardrails:
    """Merge a stored tenant override onto the preset and documented defaults.

    Unknown keys in the override are ignored and keys that are missing or
    null keep their default. The source is ``database`` exactly when an
    override was supplied, regardless of its contents.

    Args:
        stored: Partial override loaded from the tenant settings store (snake or camel case)
        preset: Preset name; falls back to the override's ``preset`` key, then balanced
        base: Guardrails to merge onto (defaults to DEFAULT_GUARDRAILS)

    Returns:
        ResolvedGuardrails with the effective config and its source

    Raises:
        ConfigurationError: If the merged guardrails are invalid or inconsistent
    """
    override = _override_dict(stored)
    preset_name = normalize_preset(preset or override.pop("preset", None))

    known = set(GuardrailConfig.model_fields)
    applied = {key: value for key, value in override.items() if key in known and value is not None}
    ignored = sorted(set(override) - known)

    merged = deep_merge((base or DEFAULT_GUARDRAILS).model_dump(), GUARDRAIL_PRESETS[preset_name])
    merged = deep_merge(merged, applied)

    try:
        config = GuardrailConfig.model_validate(merged)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(f"Invalid guardrail {field}: {first.get('msg')}", field=field) from e

    validate_guardrails(config)

    source = ConfigSource.DATABASE if stored is not None else ConfigSource.DEFAULT
    logger.info(
        "guardrails_resolved",
        source=source.value,
        preset=preset_name,
        overridden=sorted(applied),
        ignored=ignored,
    )
    return ResolvedGuardrails(config=config, source=source, preset=preset_name)


def validate_guardrails(
    config: GuardrailConfig, thresholds: ConfidenceThresholds | None = None
) -> None:
    """Reject guardrails that would silently empty every result.

    Raises:
        ConfigurationError: If a threshold is out of range or inconsistent
    """
    for field in _SCORE_THRESHOLDS:
        value = getattr(config, field)
        if not 0 <= value <= 100:
            raise ConfigurationError(
                f"{field}={value} is outside 0-100; no score could satisfy it", field=field
            )

    if config.shortlist_max_candidates < 1:
        raise ConfigurationError(
            f"shortlist_max_candidates={config.shortlist_max_candidates} must be at least 1",
            field="shortlist_max_candidates",
        )

    if thresholds is not None:
        if not 0 <= thresholds.medium <= thresholds.high <= 100:
            raise ConfigurationError(
                f"Confidence thresholds must satisfy 0 <= medium ({thresholds.medium}) "
                f"<= high ({thresholds.high}) <= 100",
                field="confidence_thresholds",
            )


def resolve_scoring_config(
    overrides: Mapping[str, Any] | None = None,
    stored_guardrails: Mapping[str, Any] | GuardrailConfig | None = None,
    preset: str | None = None,
) -> ScoringConfig:
    """Build the engine config for one tenant.

    Hierarchy (later overrides earlier):
    1. DEFAULT_SCORING_CONFIG
    2. Deployment overrides (the ``scoring`` section of the settings files)
    3. Guardrail preset
    4. Stored tenant guardrail override

    Args:
        overrides: Deployment-level scoring overrides (weights, thresholds, guardrails)
        stored_guardrails: Tenant guardrail override, None when the tenant has none
        preset: Guardrail preset name

    Returns:
        Validated ScoringConfig

    Raises:
        ConfigurationError: If any layer produces an invalid config
    """
    merged = deep_merge(DEFAULT_SCORING_CONFIG.model_dump(), _snake_case_keys(overrides or {}))

    try:
        config = ScoringConfig.model_validate(merged)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(f"Invalid scoring config {field}: {first.get('msg')}", field=field) from e

    validate_guardrails(config.guardrails, config.confidence_thresholds)

    resolved = resolve_guardrails(stored_guardrails, preset=preset, base=config.guardrails)
    return config.model_copy(
        update={
            "guardrails": resolved.config,
            "guardrail_source": resolved.source,
            "preset": resolved.preset,
        }
    )


def load_scoring_config(
    tenant_id: str | None = None,
    stored_guardrails: Mapping[str, Any] | GuardrailConfig | None = None,
    preset: str | None = None,
) -> ScoringConfig:
    """Load deployment settings and resolve the scoring config (convenience function).

    Args:
        tenant_id: Tenant identifier (for tenant settings files)
        stored_guardrails: Tenant guardrail override from the settings store
        preset: Guardrail preset name

    Returns:
        Resolved ScoringConfig
    """
    settings = load_config(tenant_id=tenant_id)
    return resolve_scoring_config(
        overrides=settings.get("scoring") or {},
        stored_guardrails=stored_guardrails,
        preset=preset,
    )


def _override_dict(stored: Mapping[str, Any] | GuardrailConfig | None) -> dict[str, Any]:
    if stored is None:
        return {}
    if isinstance(stored, BaseModel):
        return stored.model_dump(exclude_unset=True)
    if not isinstance(stored, Mapping):
        raise ConfigurationError(
            f"Stored guardrails must be a mapping, got {type(stored).__name__}", field="guardrails"
        )
    return _snake_case_keys(stored)


def _snake_case_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in data.items():
        snake = to_snake(key) if isinstance(key, str) else key
        result[snake] = _snake_case_keys(value) if isinstance(value, Mapping) else value
    return result
