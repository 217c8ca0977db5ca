"""Match scorer - computes a 0-100 match score between one candidate and one job."""

from typing import Any

from ..config.defaults import DEFAULT_SCORING_CONFIG
from ..config.weights import normalize_weights
from ..models.base import coerce_model
from ..models.candidate_profile import Candidate
from ..models.config import ScoringConfig
from ..models.enums import ExplainLevel, SeniorityLevel
from ..models.job_profile import Job
from ..models.scorecard import MatchResult, MatchSignals
from ...observability.logger import get_logger
from .utils import clamp_score, normalize_key, round_half_up, split_location

logger = get_logger(__name__)

NEUTRAL_SCORE = 50
BRIEF_REASON_LIMIT = 3

SENIORITY_ORDER: dict[SeniorityLevel, int] = {
    SeniorityLevel.INTERN: 0,
    SeniorityLevel.JUNIOR: 1,
    SeniorityLevel.MID: 2,
    SeniorityLevel.SENIOR: 3,
    SeniorityLevel.STAFF: 4,
    SeniorityLevel.PRINCIPAL: 5,
    SeniorityLevel.DIRECTOR: 6,
    SeniorityLevel.VP: 7,
    SeniorityLevel.C_LEVEL: 8,
}

# Score by distance on SENIORITY_ORDER; anything further scores the last entry
SENIORITY_DISTANCE_SCORES = (100, 60, 20)

SENIORITY_ALIASES: dict[str, SeniorityLevel] = {
    "intern": SeniorityLevel.INTERN,
    "internship": SeniorityLevel.INTERN,
    "trainee": SeniorityLevel.INTERN,
    "junior": SeniorityLevel.JUNIOR,
    "jr": SeniorityLevel.JUNIOR,
    "entry": SeniorityLevel.JUNIOR,
    "entry level": SeniorityLevel.JUNIOR,
    "graduate": SeniorityLevel.JUNIOR,
    "associate": SeniorityLevel.JUNIOR,
    "mid": SeniorityLevel.MID,
    "mid level": SeniorityLevel.MID,
    "middle": SeniorityLevel.MID,
    "intermediate": SeniorityLevel.MID,
    "senior": SeniorityLevel.SENIOR,
    "sr": SeniorityLevel.SENIOR,
    "staff": SeniorityLevel.STAFF,
    "lead": SeniorityLevel.STAFF,
    "tech lead": SeniorityLevel.STAFF,
    "principal": SeniorityLevel.PRINCIPAL,
    "architect": SeniorityLevel.PRINCIPAL,
    "director": SeniorityLevel.DIRECTOR,
    "head": SeniorityLevel.DIRECTOR,
    "vp": SeniorityLevel.VP,
    "vice president": SeniorityLevel.VP,
    "c level": SeniorityLevel.C_LEVEL,
    "executive": SeniorityLevel.C_LEVEL,
    "chief": SeniorityLevel.C_LEVEL,
}


def parse_seniority(label: str | None) -> SeniorityLevel | None:
    """Map a free-text seniority label onto the ordered scale.

    Returns:
        SeniorityLevel, or None when the label is empty or unrecognised
    """
    key = normalize_key(label).replace("-", " ").replace("_", " ").replace(".", "")
    key = " ".join(key.split())
    if not key:
        return None
    return SENIORITY_ALIASES.get(key)


def compute_match_score(
    candidate: Candidate | dict[str, Any],
    job: Job | dict[str, Any],
    config: ScoringConfig | None = None,
) -> MatchResult:
    """Score how well a candidate fits a job.

    The score is a weighted sum of four sub-scores (skills, seniority,
    location, tenure) using the normalized matcher weights. Reasons are
    ordered: required-skill gaps, preferred-skill gaps, matched skills, then
    seniority, location and tenure facts.

    Args:
        candidate: Candidate model or mapping
        job: Job model or mapping
        config: Resolved scoring config (defaults to DEFAULT_SCORING_CONFIG)

    Returns:
        MatchResult with score, sub-scores, signals and reasons

    Raises:
        InvalidInputError: If the job or candidate is missing or malformed
    """
    job = coerce_model(Job, job, "job")
    candidate = coerce_model(Candidate, candidate, "candidate")
    config = config or DEFAULT_SCORING_CONFIG
    guardrails = config.guardrails

    skill = _score_skills(candidate, job)
    seniority_score, seniority_reason = _score_seniority(candidate.seniority_level, job.seniority_level)
    location_score, location_reason = _score_location(
        candidate.location, job.location, config.location_partial_score
    )
    tenure_score, tenure_reason = _score_tenure(candidate, job)

    weights = normalize_weights(config.weights.matcher.model_dump())
    score = clamp_score(
        skill["score"] * weights["skills"]
        + seniority_score * weights["experience"]
        + location_score * weights["location"]
        + tenure_score * weights["tenure"]
    )

    reasons = [f"Missing required skill: {name}" for name in skill["missing_required"]]
    reasons += [f"Missing nice-to-have skill: {name}" for name in skill["missing_preferred"]]
    reasons += [f"Required skill matched: {name}" for name in skill["matched_required"]]
    reasons += [f"Nice-to-have skill matched: {name}" for name in skill["matched_preferred"]]
    if not job.skills:
        reasons.append("Skill comparison is limited: job lists no skills")
    reasons += [seniority_reason, location_reason, tenure_reason]

    if guardrails.require_must_have_skills and skill["missing_required"]:
        score = 0
        reasons.append("Score set to 0: required skills are missing and must-have skills are enforced")

    if guardrails.explain_level == ExplainLevel.BRIEF:
        reasons = reasons[:BRIEF_REASON_LIMIT]
    elif guardrails.explain_level == ExplainLevel.DETAILED:
        reasons.append(
            f"Score breakdown: skills {skill['score']}, seniority {seniority_score}, "
            f"location {location_score}, tenure {tenure_score} -> {score}"
        )

    signals = MatchSignals(
        must_have_skills_coverage=skill["must_have_coverage"],
        nice_to_have_skills_coverage=skill["nice_to_have_coverage"],
        experience_alignment=tenure_score / 100,
        location_alignment=location_score / 100,
    )

    logger.debug(
        "match_scored",
        job_id=job.id,
        candidate_id=candidate.id,
        score=score,
        skill_score=skill["score"],
    )

    return MatchResult(
        candidate_id=candidate.id,
        job_id=job.id,
        score=score,
        reasons=reasons,
        skill_score=skill["score"],
        seniority_score=seniority_score,
        location_score=location_score,
        tenure_score=tenure_score,
        signals=signals,
        matched_skills=skill["matched_required"] + skill["matched_preferred"],
        missing_required_skills=skill["missing_required"],
        missing_preferred_skills=skill["missing_preferred"],
    )


def _score_skills(candidate: Candidate, job: Job) -> dict[str, Any]:
    candidate_keys = candidate.skill_keys

    matched_weight = 0.0
    total_weight = 0.0
    matched_required: list[str] = []
    matched_preferred: list[str] = []
    missing_required: list[str] = []
    missing_preferred: list[str] = []

    for job_skill in job.skills:
        weight = job_skill.effective_weight
        total_weight += weight
        if job_skill.match_key in candidate_keys:
            matched_weight += weight
            (matched_required if job_skill.required else matched_preferred).append(job_skill.name)
        else:
            (missing_required if job_skill.required else missing_preferred).append(job_skill.name)

    if total_weight > 0:
        score = clamp_score(matched_weight / total_weight * 100)
    else:
        score = NEUTRAL_SCORE

    required_count = len(matched_required) + len(missing_required)
    preferred_count = len(matched_preferred) + len(missing_preferred)

    return {
        "score": score,
        "matched_required": matched_required,
        "matched_preferred": matched_preferred,
        "missing_required": missing_required,
        "missing_preferred": missing_preferred,
        "must_have_coverage": len(matched_required) / required_count if required_count else 1.0,
        "nice_to_have_coverage": (
            len(matched_preferred) / preferred_count if preferred_count else 1.0
        ),
    }


def _score_seniority(candidate_label: str | None, job_label: str | None) -> tuple[int, str]:
    candidate_level = parse_seniority(candidate_label)
    job_level = parse_seniority(job_label)

    if candidate_level is None or job_level is None:
        return NEUTRAL_SCORE, "Seniority comparison is limited due to missing data"

    distance = abs(SENIORITY_ORDER[candidate_level] - SENIORITY_ORDER[job_level])
    score = SENIORITY_DISTANCE_SCORES[min(distance, len(SENIORITY_DISTANCE_SCORES) - 1)]

    if distance == 0:
        return score, f"Seniority aligns: {candidate_label}"
    direction = "above" if SENIORITY_ORDER[candidate_level] > SENIORITY_ORDER[job_level] else "below"
    return score, (
        f"Seniority {distance} level(s) {direction} the job: candidate is "
        f"{candidate_label}, job requires {job_label}"
    )


def _score_location(
    candidate_location: str | None, job_location: str | None, partial_score: float
) -> tuple[int, str]:
    candidate_key = normalize_key(candidate_location)
    job_key = normalize_key(job_location)

    if not candidate_key or not job_key:
        return 100, "Location unspecified; treated as compatible"
    if candidate_key == job_key:
        return 100, f"Location matches: {candidate_location}"
    if "remote" in candidate_key or "remote" in job_key:
        return 100, "Remote-compatible location"
    if split_location(candidate_key) & split_location(job_key):
        return round_half_up(partial_score), (
            f"Same region: candidate in {candidate_location}, job in {job_location}"
        )
    return 0, f"Location mismatch: candidate in {candidate_location}, job in {job_location}"


def _score_tenure(candidate: Candidate, job: Job) -> tuple[int, str]:
    years = candidate.total_experience_years
    min_years = job.min_experience_years
    max_years = job.max_experience_years

    if years is None:
        return NEUTRAL_SCORE, "Experience comparison is limited: candidate years unknown"
    if min_years is None and max_years is None:
        return 100, f"Experience of {years:g} years; job sets no range"
    if min_years is not None and years < min_years:
        return clamp_score(years / max(min_years, 1) * 100), (
            f"Experience below minimum: {years:g} years vs {min_years:g} required"
        )
    if max_years is not None and years > max_years:
        return clamp_score(max_years / max(years, 1) * 100), (
            f"Experience above maximum: {years:g} years vs {max_years:g} expected"
        )
    return 100, f"Experience within range: {years:g} years"
