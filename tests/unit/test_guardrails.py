"""Guardrail merge, presets, source tracking and validation."""

import pytest

from talentrank.core.config import (
    DEFAULT_GUARDRAILS,
    resolve_guardrails,
    resolve_scoring_config,
)
from talentrank.core.errors import ConfigurationError
from talentrank.core.models.config import GuardrailConfig
from talentrank.core.models.enums import ConfigSource, ShortlistStrategy


def test_no_override_uses_defaults():
    resolved = resolve_guardrails()

    assert resolved.source == ConfigSource.DEFAULT
    assert resolved.preset == "balanced"
    assert resolved.config == DEFAULT_GUARDRAILS
    assert resolved.config.matcher_min_score == 40
    assert resolved.config.shortlist_min_score == 70
    assert resolved.config.shortlist_max_candidates == 5
    assert resolved.config.shortlist_strategy == ShortlistStrategy.QUALITY


def test_empty_stored_override_is_still_database_sourced():
    resolved = resolve_guardrails({})

    assert resolved.source == ConfigSource.DATABASE
    assert resolved.config == DEFAULT_GUARDRAILS


def test_partial_override_merges_onto_defaults():
    resolved = resolve_guardrails(
        {"shortlistMaxCandidates": 8, "explain_level": "brief", "unknownKey": 1, "matcherMinScore": None}
    )

    assert resolved.source == ConfigSource.DATABASE
    assert resolved.config.shortlist_max_candidates == 8
    assert resolved.config.explain_level == "brief"
    # Null and missing keys keep the default
    assert resolved.config.matcher_min_score == 40
    assert resolved.config.shortlist_min_score == 70


def test_preset_applies_before_override():
    resolved = resolve_guardrails({"shortlistMaxCandidates": 4}, preset="conservative")

    assert resolved.preset == "conservative"
    assert resolved.config.shortlist_strategy == "strict"
    assert resolved.config.require_must_have_skills is True
    assert resolved.config.shortlist_max_candidates == 4


def test_preset_can_come_from_stored_override():
    resolved = resolve_guardrails({"preset": "aggressive"})

    assert resolved.preset == "aggressive"
    assert resolved.config.shortlist_strategy == "fast"
    assert resolved.config.shortlist_max_candidates == 10


def test_unknown_preset_falls_back_to_balanced():
    resolved = resolve_guardrails(preset="yolo")

    assert resolved.preset == "balanced"
    assert resolved.config == DEFAULT_GUARDRAILS


def test_model_override_is_accepted():
    resolved = resolve_guardrails(GuardrailConfig(shortlist_strategy="diversity"))

    assert resolved.source == ConfigSource.DATABASE
    assert resolved.config.shortlist_strategy == "diversity"


@pytest.mark.parametrize(
    "override",
    [
        {"matcherMinScore": 150},
        {"shortlistMinScore": -5},
        {"confidencePassingScore": 101},
        {"shortlistMaxCandidates": 0},
        {"shortlistMaxCandidates": "lots"},
        {"shortlistStrategy": "random"},
    ],
)
def test_invalid_guardrails_raise(override):
    with pytest.raises(ConfigurationError):
        resolve_guardrails(override)


def test_non_mapping_override_raises():
    with pytest.raises(ConfigurationError):
        resolve_guardrails(["matcherMinScore", 50])


def test_scoring_config_overrides_merge_deeply():
    config = resolve_scoring_config(
        overrides={"weights": {"matcher": {"skills": 1.0}}, "locationPartialScore": 25}
    )

    assert config.weights.matcher.skills == 1.0
    assert config.weights.matcher.location == 0.1
    assert config.weights.ranker.match == 0.5
    assert config.location_partial_score == 25
    assert config.guardrail_source == ConfigSource.DEFAULT


def test_scoring_config_tracks_stored_guardrails():
    config = resolve_scoring_config(stored_guardrails={"shortlistStrategy": "strict"}, preset="demo-safe")

    assert config.guardrail_source == ConfigSource.DATABASE
    assert config.preset == "demo-safe"
    assert config.guardrails.shortlist_strategy == "strict"
    assert config.guardrails.matcher_min_score == 50


def test_inverted_confidence_thresholds_raise():
    with pytest.raises(ConfigurationError) as exc:
        resolve_scoring_config(overrides={"confidenceThresholds": {"high": 40, "medium": 60}})

    assert exc.value.field == "confidence_thresholds"


def test_unparsable_weight_override_raises():
    with pytest.raises(ConfigurationError):
        resolve_scoring_config(overrides={"weights": {"ranker": {"match": "heavy"}}})
