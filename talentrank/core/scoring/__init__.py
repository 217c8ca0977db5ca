"""Deterministic scorers: match, confidence, ranking and shortlisting."""

from .confidence import compute_match_confidence
from .match import compute_match_score, parse_seniority
from .ranker import rank_candidates, recency_score
from .shortlist import STRATEGIES, build_shortlist, resolve_strategy
from .utils import clamp_score, round_half_up

__all__ = [
    "compute_match_score",
    "parse_seniority",
    "compute_match_confidence",
    "rank_candidates",
    "recency_score",
    "build_shortlist",
    "resolve_strategy",
    "STRATEGIES",
    "clamp_score",
    "round_half_up",
]
