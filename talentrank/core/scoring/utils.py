"""Numeric and text helpers shared by the scorers."""

import math
import re
from datetime import datetime, timezone

_SPLIT_PATTERN = re.compile(r"[,/\-|]")
_TOKEN_PATTERN = re.compile(r"[a-z0-9+#.]+")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 rounding up."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float, low: float = 0.0, high: float = 100.0) -> int:
    """Round half-up and clamp into [low, high]."""
    return int(max(low, min(high, round_half_up(value))))


def normalize_key(value: str | None) -> str:
    """Trimmed lowercase form used for case-insensitive comparison."""
    return (value or "").strip().lower()


def split_location(value: str) -> set[str]:
    """Split a normalized location into its comma/dash-separated parts."""
    return {part.strip() for part in _SPLIT_PATTERN.split(value) if part.strip()}


def tokenize(value: str | None) -> set[str]:
    """Lowercase word tokens of a title."""
    return set(_TOKEN_PATTERN.findall(normalize_key(value)))


def days_between(earlier: datetime, later: datetime) -> float:
    """Non-negative days from ``earlier`` to ``later``; naive datetimes are treated as UTC."""
    if earlier.tzinfo is None:
        earlier = earlier.replace(tzinfo=timezone.utc)
    if later.tzinfo is None:
        later = later.replace(tzinfo=timezone.utc)
    return max(0.0, (later - earlier).total_seconds() / 86400.0)
