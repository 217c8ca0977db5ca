"""Enumeration types for engine models."""

from enum import Enum


class SeniorityLevel(str, Enum):
    """Seniority levels for jobs and candidates."""

    INTERN = "intern"
    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"
    STAFF = "staff"
    PRINCIPAL = "principal"
    DIRECTOR = "director"
    VP = "vp"
    C_LEVEL = "c_level"


class ConfidenceBand(str, Enum):
    """Categorical trust level attached to a match score."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class ShortlistStrategy(str, Enum):
    """Selection strategies for building a shortlist."""

    QUALITY = "quality"
    STRICT = "strict"
    FAST = "fast"
    DIVERSITY = "diversity"


class ExplainLevel(str, Enum):
    """How much reasoning detail match results carry."""

    BRIEF = "brief"
    STANDARD = "standard"
    DETAILED = "detailed"


class ConfigSource(str, Enum):
    """Where a resolved guardrail config came from."""

    DEFAULT = "default"
    DATABASE = "database"
