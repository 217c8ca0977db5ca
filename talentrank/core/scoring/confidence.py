"""Confidence scorer - how trustworthy a candidate's match score is."""

import re
from datetime import datetime
from typing import Any

from ..config.defaults import DEFAULT_SCORING_CONFIG
from ..config.weights import normalize_weights
from ..models.base import coerce_model, utc_now
from ..models.candidate_profile import Candidate
from ..models.config import ScoringConfig
from ..models.enums import ConfidenceBand
from ..models.job_profile import Job
from ..models.scorecard import ConfidenceBreakdown, ConfidenceResult
from ...observability.logger import get_logger
from .utils import clamp_score, days_between

logger = get_logger(__name__)

# Field name -> label used in reasons
CRITICAL_FIELDS: dict[str, str] = {
    "location": "location",
    "current_title": "current title",
    "seniority_level": "seniority level",
    "skills": "skills",
}

PLACEHOLDER_PATTERN = re.compile(
    r"(?:unknown|n/?a|none|null|not provided|not specified|unspecified|tbd|-+|\?+)",
    re.IGNORECASE,
)

NEUTRAL_SKILL_COVERAGE = 0.5
NEUTRAL_RECENCY = 50
RECENCY_FLOOR = 20
RECENCY_WINDOW_DAYS = 365
LOW_PARSING_CONFIDENCE = 0.5


def compute_match_confidence(
    candidate: Candidate | dict[str, Any],
    job: Job | dict[str, Any],
    config: ScoringConfig | None = None,
    *,
    now: datetime | None = None,
) -> ConfidenceResult:
    """Compute a 0-100 confidence score and band for a candidate-job match.

    Args:
        candidate: Candidate model or mapping
        job: Job model or mapping
        config: Resolved scoring config (defaults to DEFAULT_SCORING_CONFIG)
        now: Reference time for recency (defaults to the current UTC time)

    Returns:
        ConfidenceResult with band, reasons and breakdown

    Raises:
        InvalidInputError: If the job or candidate is missing or malformed
    """
    job = coerce_model(Job, job, "job")
    candidate = coerce_model(Candidate, candidate, "candidate")
    config = config or DEFAULT_SCORING_CONFIG
    now = now or utc_now()

    missing, placeholders = _profile_gaps(candidate)
    present = len(CRITICAL_FIELDS) - len(missing) - len(placeholders)
    completeness = present / len(CRITICAL_FIELDS)

    job_keys = [skill.match_key for skill in job.skills]
    candidate_keys = candidate.skill_keys
    matched = sum(1 for key in job_keys if key in candidate_keys)
    coverage = matched / len(job_keys) if job_keys else NEUTRAL_SKILL_COVERAGE

    activity_at = candidate.last_activity_at
    recency = _recency_score(activity_at, now)

    weights = normalize_weights(config.weights.confidence.model_dump())
    score = clamp_score(
        completeness * 100 * weights["data_completeness"]
        + coverage * 100 * weights["skill_overlap"]
        + recency * weights["recency"]
    )

    critical_missing = len(missing) + len(placeholders)
    low_parsing = (
        candidate.parsing_confidence is not None
        and candidate.parsing_confidence < LOW_PARSING_CONFIDENCE
    )
    band = _determine_band(score, critical_missing, low_parsing, config)

    reasons = [f"Candidate profile is missing {CRITICAL_FIELDS[f]}; completeness reduced." for f in missing]
    reasons += [
        f"Candidate {CRITICAL_FIELDS[f]} is a placeholder value; treated as missing."
        for f in placeholders
    ]
    if job_keys:
        reasons.append(
            f"Skill overlap covers {matched} of {len(job_keys)} job skill(s) ({coverage:.0%})."
        )
    else:
        reasons.append("Job lists no skills; skill overlap uses a neutral value.")
    if activity_at is not None:
        reasons.append(
            f"Profile recency contributes {recency}/100 (last updated {activity_at.date().isoformat()})."
        )
    else:
        reasons.append(f"Profile recency contributes {recency}/100 (no update time available).")
    if candidate.parsing_confidence is not None:
        pct = f"{candidate.parsing_confidence:.0%}"
        if low_parsing:
            reasons.append(f"Low resume parsing confidence ({pct}) caps confidence below HIGH.")
        else:
            reasons.append(f"Resume parsing confidence at {pct}.")
    reasons.append(f"Overall confidence categorized as {ConfidenceBand(band).value}.")

    return ConfidenceResult(
        candidate_id=candidate.id,
        score=score,
        band=band,
        reasons=reasons,
        breakdown=ConfidenceBreakdown(
            skill_coverage=coverage,
            profile_completeness=completeness,
            recency_score=recency,
            missing_fields=missing,
            placeholder_fields=placeholders,
            parsing_confidence=candidate.parsing_confidence,
        ),
    )


def _profile_gaps(candidate: Candidate) -> tuple[list[str], list[str]]:
    missing: list[str] = []
    placeholders: list[str] = []
    for field in CRITICAL_FIELDS:
        value = getattr(candidate, field)
        if field == "skills":
            if not value:
                missing.append(field)
        elif not value:
            missing.append(field)
        elif PLACEHOLDER_PATTERN.fullmatch(value.strip()):
            placeholders.append(field)
    return missing, placeholders


def _recency_score(activity_at: datetime | None, now: datetime) -> int:
    if activity_at is None:
        return NEUTRAL_RECENCY
    days = min(days_between(activity_at, now), RECENCY_WINDOW_DAYS)
    return clamp_score(max(RECENCY_FLOOR, 100 - days / RECENCY_WINDOW_DAYS * (100 - RECENCY_FLOOR)))


def _determine_band(
    score: int, critical_missing: int, low_parsing: bool, config: ScoringConfig
) -> ConfidenceBand:
    thresholds = config.confidence_thresholds
    high_cut = max(thresholds.high, config.guardrails.confidence_passing_score)

    if score < thresholds.medium or critical_missing >= 2:
        return ConfidenceBand.LOW
    if score >= high_cut and critical_missing == 0 and not low_parsing:
        return ConfidenceBand.HIGH
    return ConfidenceBand.MEDIUM
