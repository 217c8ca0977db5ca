"""Structured logging for the scoring engine (structlog over stdlib logging)."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from .._version import __version__

PACKAGE_LOGGER = "talentrank"
LOG_FORMATS = ("json", "console")


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Stamp every event with the engine name and version."""
    event_dict["app"] = PACKAGE_LOGGER
    event_dict["version"] = __version__
    return event_dict


def _renderer(log_format: str) -> list[Processor]:
    if log_format == "console":
        return [structlog.dev.ConsoleRenderer(colors=False)]
    return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer(sort_keys=True)]


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    log_file: str | Path | None = None,
) -> None:
    """Configure structlog and the ``talentrank`` stdlib logger.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (unknown names fall back to INFO)
        log_format: "json" for one JSON object per line, "console" for key=value text
        log_file: Optional file that receives the same lines as stdout
    """
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        level = logging.INFO
    if log_format not in LOG_FORMATS:
        log_format = "json"

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            add_app_context,
            *_renderer(log_format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logging.getLogger().addHandler(handler)


def setup_logging_from_settings(settings: dict[str, Any]) -> None:
    """Apply the ``logging`` section of ``load_config()`` output."""
    section = settings.get("logging") or {}
    setup_logging(
        log_level=str(section.get("level", "INFO")),
        log_format=str(section.get("format", "json")),
        log_file=section.get("file"),
    )


@contextmanager
def bound_job(job_id: str, **context: Any) -> Iterator[None]:
    """Attach ``job_id`` (and any extra keys) to every event logged inside the block."""
    with structlog.contextvars.bound_contextvars(job_id=job_id, **context):
        yield


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structured logger, usually ``get_logger(__name__)``.

    Example:
        logger.info("shortlist_built", strategy="quality", shortlisted=5)
    """
    return structlog.get_logger(name)


# Defaults until the host application calls setup_logging_from_settings()
setup_logging()
