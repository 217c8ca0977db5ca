"""structlog setup driven by deployment settings."""

import json
import logging

from talentrank._version import __version__
from talentrank.observability.logger import (
    add_app_context,
    bound_job,
    get_logger,
    setup_logging,
    setup_logging_from_settings,
)


def test_app_context_is_added():
    event = add_app_context(None, "info", {"event": "shortlist_built"})

    assert event["app"] == "talentrank"
    assert event["version"] == __version__


def test_settings_control_package_log_level(restore_logging):
    setup_logging_from_settings({"logging": {"level": "DEBUG", "format": "console"}})
    assert logging.getLogger("talentrank").level == logging.DEBUG

    setup_logging_from_settings({})
    assert logging.getLogger("talentrank").level == logging.INFO


def test_json_events_are_written_to_log_file(tmp_path, restore_logging):
    log_path = tmp_path / "logs" / "engine.log"
    setup_logging(log_level="INFO", log_format="json", log_file=log_path)
    handler = logging.getLogger().handlers[-1]

    try:
        with bound_job("job-1", tenant="acme"):
            get_logger("talentrank.tests").info("shortlist_built", shortlisted=3)
        get_logger("talentrank.tests").info("engine_idle")
        handler.flush()
    finally:
        logging.getLogger().removeHandler(handler)
        handler.close()

    bound, unbound = [json.loads(line) for line in log_path.read_text().strip().splitlines()[-2:]]
    assert bound["event"] == "shortlist_built"
    assert bound["job_id"] == "job-1"
    assert bound["tenant"] == "acme"
    assert bound["app"] == "talentrank"
    assert unbound["event"] == "engine_idle"
    assert "job_id" not in unbound
