"""Shared pytest fixtures."""

import textwrap

import pytest

from talentrank.observability.logger import setup_logging


def _write(path, content):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content))


@pytest.fixture
def settings_dir(tmp_path):
    """Settings tree with default, staging and one tenant layer."""
    config_dir = tmp_path / "config"
    _write(
        config_dir / "default.yaml",
        """
        logging:
          level: INFO
        scoring:
          location_partial_score: 40
          guardrails:
            shortlist_max_candidates: 5
        """,
    )
    _write(
        config_dir / "environments" / "staging.yaml",
        """
        logging:
          level: WARNING
        """,
    )
    _write(
        config_dir / "tenants" / "acme.yaml",
        """
        scoring:
          guardrails:
            shortlist_max_candidates: 7
            shortlist_strategy: diversity
        """,
    )
    return config_dir


@pytest.fixture
def restore_logging():
    yield
    setup_logging()
