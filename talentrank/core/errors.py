"""Exception types raised by the scoring engine."""

from typing import Any


class TalentRankError(Exception):
    """Base class for all engine errors."""


class InvalidInputError(TalentRankError, ValueError):
    """A job, candidate, match or weight input is missing or malformed.

    Args:
        message: Human-readable description
        details: Optional structured details (e.g., pydantic error list)
    """

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.details = details or []


class ConfigurationError(TalentRankError, ValueError):
    """Guardrail or weight configuration is internally inconsistent."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
