"""Ranker - combines match, confidence, recency and role alignment into one priority."""

from collections.abc import Iterable, Mapping
from typing import Any

from ..config.defaults import DEFAULT_SCORING_CONFIG
from ..config.weights import deep_merge, normalize_weights
from ..errors import InvalidInputError
from ..models.base import coerce_model
from ..models.ranked_candidate import RankedCandidate, RankerCandidate
from .utils import clamp_score

RECENCY_HORIZON_DAYS = 180


def recency_score(recency_days: float) -> int:
    """Linear decay from 100 (today) to 0 at 180 days or older."""
    days = min(max(recency_days, 0.0), RECENCY_HORIZON_DAYS)
    return clamp_score(100 - days / RECENCY_HORIZON_DAYS * 100)


def rank_candidates(
    candidates: Iterable[RankerCandidate | dict[str, Any]],
    weights: Mapping[str, float] | None = None,
) -> list[RankedCandidate]:
    """Order candidates by priority score with deterministic tie-breaks.

    Ties on priority are broken by fresher profile, higher match, higher
    confidence, higher role alignment, then ascending id.

    Args:
        candidates: Ranker inputs (models or mappings)
        weights: Partial ranker weights (match, confidence, recency, role) merged
            over the defaults and normalized

    Returns:
        New list of RankedCandidate, highest priority first

    Raises:
        InvalidInputError: If an input is malformed
    """
    if candidates is None:
        raise InvalidInputError("candidates is required")

    normalized = normalize_weights(
        deep_merge(DEFAULT_SCORING_CONFIG.weights.ranker.model_dump(), _known_weights(weights))
    )

    ranked = []
    for raw in candidates:
        candidate = coerce_model(RankerCandidate, raw, "ranker candidate")
        recency = recency_score(candidate.recency_days)
        priority = clamp_score(
            candidate.match_score * normalized["match"]
            + candidate.confidence_score * normalized["confidence"]
            + recency * normalized["recency"]
            + candidate.role_alignment * normalized["role"]
        )
        ranked.append(
            RankedCandidate(
                **candidate.model_dump(),
                priority_score=priority,
                recency_score=recency,
            )
        )

    return sorted(ranked, key=_sort_key)


def _known_weights(weights: Mapping[str, float] | None) -> dict[str, float]:
    if not weights:
        return {}
    known = set(DEFAULT_SCORING_CONFIG.weights.ranker.model_dump())
    return {key: value for key, value in weights.items() if key in known}


def _sort_key(candidate: RankedCandidate) -> tuple:
    return (
        -candidate.priority_score,
        candidate.recency_days,
        -candidate.match_score,
        -candidate.confidence_score,
        -candidate.role_alignment,
        candidate.id,
    )
