"""Engine - runs match, confidence, ranking and shortlisting for one job."""

import time
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from .config.defaults import DEFAULT_SCORING_CONFIG
from .config.guardrails import resolve_scoring_config
from .errors import InvalidInputError, TalentRankError
from .models.base import coerce_model, utc_now
from .models.candidate_profile import Candidate
from .models.config import ScoringConfig
from .models.engine_result import EngineResult
from .models.enums import ShortlistStrategy
from .models.job_profile import Job
from .models.ranked_candidate import RankerCandidate
from .models.scorecard import MatchResult
from .models.shortlist import ShortlistMatch
from .scoring.confidence import compute_match_confidence
from .scoring.match import NEUTRAL_SCORE, compute_match_score
from .scoring.ranker import RECENCY_HORIZON_DAYS, rank_candidates
from .scoring.shortlist import build_shortlist
from .scoring.utils import clamp_score, days_between, tokenize
from ..observability.logger import bound_job, get_logger

logger = get_logger(__name__)

# Profiles without timestamps sit at the middle of the recency horizon
UNKNOWN_RECENCY_DAYS = RECENCY_HORIZON_DAYS / 2


def run_engine(
    job: Job | dict[str, Any],
    candidates: Iterable[Candidate | dict[str, Any]],
    config: ScoringConfig | Mapping[str, Any] | None = None,
    *,
    strategy: ShortlistStrategy | str | None = None,
    now: datetime | None = None,
) -> EngineResult:
    """Score, rank and shortlist candidates for a job.

    Args:
        job: Job model or mapping
        candidates: Candidate models or mappings
        config: Resolved ScoringConfig, or raw overrides to resolve
        strategy: Shortlist strategy override
        now: Reference time for recency (defaults to the current UTC time)

    Returns:
        EngineResult with per-candidate scores, ranking and shortlist

    Raises:
        InvalidInputError: If inputs are missing, malformed or duplicated
        ConfigurationError: If the config is invalid
    """
    job = coerce_model(Job, job, "job")
    if candidates is None:
        raise InvalidInputError("candidates is required")
    candidates = [coerce_model(Candidate, raw, "candidate") for raw in candidates]
    _check_unique_ids(candidates)

    if config is None:
        config = DEFAULT_SCORING_CONFIG
    elif not isinstance(config, ScoringConfig):
        config = resolve_scoring_config(overrides=config)
    now = now or utc_now()

    with bound_job(job.id):
        return _run(job, candidates, config, strategy, now)


def _run(
    job: Job,
    candidates: list[Candidate],
    config: ScoringConfig,
    strategy: ShortlistStrategy | str | None,
    now: datetime,
) -> EngineResult:
    logger.info("engine_started", candidates=len(candidates))
    start = time.perf_counter()

    try:
        matches = [compute_match_score(c, job, config) for c in candidates]
        confidences = [compute_match_confidence(c, job, config, now=now) for c in candidates]

        min_score = config.guardrails.matcher_min_score
        kept = [i for i, match in enumerate(matches) if match.score >= min_score]
        filtered_ids = [m.candidate_id for m in matches if m.score < min_score]
        logger.info(
            "candidates_filtered",
            matcher_min_score=min_score,
            kept=len(kept),
            filtered=len(filtered_ids),
        )

        ranked = rank_candidates(
            [
                RankerCandidate(
                    id=candidates[i].id,
                    match_score=matches[i].score,
                    confidence_score=confidences[i].score,
                    recency_days=_recency_days(candidates[i], now),
                    role_alignment=_role_alignment(candidates[i], job, matches[i]),
                )
                for i in kept
            ],
            config.weights.ranker.model_dump(),
        )

        by_id = {candidates[i].id: i for i in kept}
        shortlist = build_shortlist(
            [
                ShortlistMatch(
                    candidate_id=entry.id,
                    score=entry.priority_score,
                    confidence_band=confidences[by_id[entry.id]].band,
                    signals=matches[by_id[entry.id]].signals,
                    rank=position,
                )
                for position, entry in enumerate(ranked)
            ],
            config,
            strategy,
        )
    except TalentRankError as e:
        logger.error("engine_failed", error=str(e))
        raise

    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "engine_completed",
        duration_ms=round(duration_ms, 2),
        ranked=len(ranked),
        shortlisted=len(shortlist.shortlisted_candidate_ids),
        strategy=shortlist.strategy,
    )

    return EngineResult(
        job_id=job.id,
        matches=matches,
        confidences=confidences,
        ranked=ranked,
        shortlist=shortlist,
        filtered_candidate_ids=filtered_ids,
        guardrail_source=config.guardrail_source,
    )


def _check_unique_ids(candidates: list[Candidate]) -> None:
    seen: set[str] = set()
    duplicates: list[str] = []
    for candidate in candidates:
        if candidate.id in seen:
            duplicates.append(candidate.id)
        seen.add(candidate.id)
    if duplicates:
        raise InvalidInputError(
            f"Duplicate candidate ids: {', '.join(sorted(set(duplicates)))}",
            details=[{"type": "duplicate", "loc": ["candidates", "id"], "msg": d} for d in duplicates],
        )


def _recency_days(candidate: Candidate, now: datetime) -> float:
    activity_at = candidate.last_activity_at
    if activity_at is None:
        return UNKNOWN_RECENCY_DAYS
    return days_between(activity_at, now)


def _role_alignment(candidate: Candidate, job: Job, match: MatchResult) -> int:
    """Title-token overlap, falling back to job skill coverage, then neutral."""
    job_tokens = tokenize(job.title)
    title_tokens = tokenize(candidate.current_title)
    if job_tokens and title_tokens:
        return clamp_score(len(job_tokens & title_tokens) / len(job_tokens) * 100)
    if job.skills:
        return clamp_score(len(match.matched_skills) / len(job.skills) * 100)
    return NEUTRAL_SCORE
