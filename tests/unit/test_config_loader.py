"""Layered deployment settings: YAML files, tenants and environment variables."""

from talentrank.core.config import loader as loader_module
from talentrank.core.config.guardrails import load_scoring_config
from talentrank.core.config.loader import ConfigLoader
from talentrank.core.models.enums import ConfigSource


def test_layers_merge_in_order(settings_dir, monkeypatch):
    monkeypatch.setenv("TALENTRANK_ENV", "staging")
    loader = ConfigLoader(settings_dir)

    settings = loader.load(tenant_id="acme", overrides={"scoring": {"diversity_epsilon": 0.05}})

    assert settings["logging"]["level"] == "WARNING"
    assert settings["scoring"]["location_partial_score"] == 40
    assert settings["scoring"]["guardrails"]["shortlist_max_candidates"] == 7
    assert settings["scoring"]["diversity_epsilon"] == 0.05


def test_missing_files_yield_empty_layers(tmp_path, monkeypatch):
    monkeypatch.delenv("TALENTRANK_ENV", raising=False)
    loader = ConfigLoader(tmp_path / "nowhere")

    assert loader.load(tenant_id="ghost") == {}


def test_env_vars_override_nested_keys(settings_dir, monkeypatch):
    monkeypatch.delenv("TALENTRANK_ENV", raising=False)
    monkeypatch.setenv("TALENTRANK_SCORING__LOCATION_PARTIAL_SCORE", "25")
    monkeypatch.setenv("TALENTRANK_SCORING__GUARDRAILS__REQUIRE_MUST_HAVE_SKILLS", "true")
    monkeypatch.setenv("TALENTRANK_SCORING__DIVERSITY_EPSILON", "0.1")
    monkeypatch.setenv("TALENTRANK_LOGGING__FORMAT", "console")
    loader = ConfigLoader(settings_dir)

    settings = loader.load()

    assert settings["scoring"]["location_partial_score"] == 25
    assert settings["scoring"]["guardrails"]["require_must_have_skills"] is True
    assert settings["scoring"]["diversity_epsilon"] == 0.1
    assert settings["logging"]["format"] == "console"


def test_reserved_env_vars_are_not_mapped(settings_dir, tmp_path, monkeypatch):
    monkeypatch.setenv("TALENTRANK_ENV", "staging")
    monkeypatch.setenv("TALENTRANK_CONFIG_DIR", str(tmp_path))
    loader = ConfigLoader(settings_dir)

    settings = loader.load()

    assert "env" not in settings
    assert "config_dir" not in settings


def test_config_dir_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("TALENTRANK_CONFIG_DIR", str(tmp_path / "custom"))

    assert ConfigLoader().config_dir == tmp_path / "custom"


def test_load_scoring_config_for_tenant(settings_dir, monkeypatch):
    monkeypatch.delenv("TALENTRANK_ENV", raising=False)
    monkeypatch.setattr(loader_module, "_config_loader", ConfigLoader(settings_dir))

    config = load_scoring_config(tenant_id="acme", stored_guardrails={"matcherMinScore": 55})

    assert config.guardrails.shortlist_max_candidates == 7
    assert config.guardrails.shortlist_strategy == "diversity"
    assert config.guardrails.matcher_min_score == 55
    assert config.guardrail_source == ConfigSource.DATABASE


def test_env_var_reaches_scoring_guardrails(settings_dir, monkeypatch):
    monkeypatch.delenv("TALENTRANK_ENV", raising=False)
    monkeypatch.setenv("TALENTRANK_SCORING__GUARDRAILS__SHORTLIST_MAX_CANDIDATES", "8")
    monkeypatch.setattr(loader_module, "_config_loader", ConfigLoader(settings_dir))

    config = load_scoring_config()

    assert config.guardrails.shortlist_max_candidates == 8
