"""Shortlist engine - applies a selection strategy over scored candidates."""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from ..config.guardrails import validate_guardrails
from ..errors import ConfigurationError, InvalidInputError
from ..models.base import coerce_model
from ..models.config import GuardrailConfig, ScoringConfig
from ..models.enums import ConfidenceBand, ShortlistStrategy
from ..models.shortlist import ShortlistMatch, ShortlistResult
from ...observability.logger import get_logger

logger = get_logger(__name__)

CONFIDENCE_PRIORITY: dict[str, int] = {
    ConfidenceBand.HIGH.value: 3,
    ConfidenceBand.MEDIUM.value: 2,
    ConfidenceBand.LOW.value: 1,
}

DEFAULT_DIVERSITY_EPSILON = 0.02
# Same-band picks closer than this in score count as look-alikes
SCORE_SIMILARITY_EPSILON = 0.5
# Absorbs float error so signals exactly epsilon apart still count as similar
SIGNAL_TOLERANCE = 1e-9


@dataclass(frozen=True)
class SelectionContext:
    """Resolved limits handed to a strategy."""

    max_candidates: int
    min_score: float
    diversity_epsilon: float


StrategyFn = Callable[[list[ShortlistMatch], SelectionContext], tuple[list[ShortlistMatch], list[str]]]


def build_shortlist(
    matches: Iterable[ShortlistMatch | dict[str, Any]],
    config: GuardrailConfig | ScoringConfig | Mapping[str, Any] | None = None,
    strategy: ShortlistStrategy | str | None = None,
    *,
    max_candidates: int | None = None,
    diversity_epsilon: float | None = None,
) -> ShortlistResult:
    """Select a bounded, ordered shortlist.

    Args:
        matches: Scored candidates (models or mappings)
        config: Merged guardrails (or a full ScoringConfig); defaults when None
        strategy: Strategy override; falls back to ``config.shortlist_strategy``
        max_candidates: Size bound override; falls back to ``shortlist_max_candidates``
        diversity_epsilon: Signal distance treated as a near-duplicate

    Returns:
        ShortlistResult with ordered IDs, cutoff score and strategy applied

    Raises:
        InvalidInputError: If a match is malformed, duplicated, or the strategy is unknown
        ConfigurationError: If the guardrails or size bound are invalid
    """
    guardrails, epsilon = _resolve_config(config)
    if diversity_epsilon is not None:
        epsilon = diversity_epsilon

    limit = guardrails.shortlist_max_candidates if max_candidates is None else max_candidates
    if limit < 1:
        raise ConfigurationError(
            f"max_candidates={limit} must be at least 1", field="shortlist_max_candidates"
        )

    selected_strategy = resolve_strategy(strategy, guardrails)
    normalized = _normalize_matches(matches)
    context = SelectionContext(
        max_candidates=limit,
        min_score=guardrails.shortlist_min_score,
        diversity_epsilon=epsilon,
    )

    if normalized:
        chosen, notes = STRATEGIES[selected_strategy](normalized, context)
    else:
        chosen, notes = [], []
    chosen = chosen[:limit]

    result = ShortlistResult(
        shortlisted_candidate_ids=[m.candidate_id for m in chosen],
        cutoff_score=chosen[-1].score if chosen else None,
        strategy=selected_strategy,
        max_candidates=limit,
        notes=[f"strategy={selected_strategy.value}"] + notes,
    )

    logger.info(
        "shortlist_built",
        strategy=selected_strategy.value,
        candidates=len(normalized),
        shortlisted=len(chosen),
        cutoff_score=result.cutoff_score,
    )
    return result


def resolve_strategy(
    strategy: ShortlistStrategy | str | None, guardrails: GuardrailConfig
) -> ShortlistStrategy:
    """Pick the strategy: explicit argument, then the configured default.

    Raises:
        InvalidInputError: If the name is not a known strategy
    """
    name = strategy if strategy is not None else guardrails.shortlist_strategy
    try:
        return ShortlistStrategy(name.strip().lower() if isinstance(name, str) else name)
    except ValueError as e:
        known = ", ".join(s.value for s in ShortlistStrategy)
        raise InvalidInputError(f"Unknown shortlist strategy {name!r}; expected one of {known}") from e


# =============================================================================
# Strategies
# =============================================================================


def _select_quality(
    matches: list[ShortlistMatch], context: SelectionContext
) -> tuple[list[ShortlistMatch], list[str]]:
    return sorted(matches, key=_quality_key)[: context.max_candidates], []


def _select_strict(
    matches: list[ShortlistMatch], context: SelectionContext
) -> tuple[list[ShortlistMatch], list[str]]:
    survivors = [
        m
        for m in matches
        if m.confidence_band == ConfidenceBand.HIGH and m.score >= context.min_score
    ]
    notes = [
        f"minScore={context.min_score:g}",
        f"excluded={len(matches) - len(survivors)}",
    ]
    return sorted(survivors, key=_quality_key)[: context.max_candidates], notes


def _select_fast(
    matches: list[ShortlistMatch], context: SelectionContext
) -> tuple[list[ShortlistMatch], list[str]]:
    return sorted(matches, key=_fast_key)[: context.max_candidates], []


def _select_diversity(
    matches: list[ShortlistMatch], context: SelectionContext
) -> tuple[list[ShortlistMatch], list[str]]:
    selected: list[ShortlistMatch] = []
    skipped: list[ShortlistMatch] = []

    for match in sorted(matches, key=_quality_key):
        if len(selected) >= context.max_candidates:
            break
        if selected and (
            any(_signals_similar(s.signals, match.signals, context.diversity_epsilon) for s in selected)
            or _scores_too_close(selected[-1], match)
        ):
            skipped.append(match)
            continue
        selected.append(match)

    notes = []
    if skipped:
        notes.append("near_duplicates=" + ",".join(m.candidate_id for m in skipped))

    # Fill remaining slots with look-alikes rather than returning a short list
    room = context.max_candidates - len(selected)
    if room > 0 and skipped:
        backfill = skipped[:room]
        selected.extend(backfill)
        notes.append("backfilled=" + ",".join(m.candidate_id for m in backfill))

    return selected, notes


STRATEGIES: dict[ShortlistStrategy, StrategyFn] = {
    ShortlistStrategy.QUALITY: _select_quality,
    ShortlistStrategy.STRICT: _select_strict,
    ShortlistStrategy.FAST: _select_fast,
    ShortlistStrategy.DIVERSITY: _select_diversity,
}


# =============================================================================
# Helpers
# =============================================================================


def _quality_key(match: ShortlistMatch) -> tuple:
    return (-match.score, -CONFIDENCE_PRIORITY[match.confidence_band], *_rank_key(match))


def _fast_key(match: ShortlistMatch) -> tuple:
    return (-match.score, *_rank_key(match))


def _rank_key(match: ShortlistMatch) -> tuple:
    # Upstream rank position first, unranked entries after, id last
    return (match.rank is None, match.rank or 0, match.candidate_id)


def _signals_similar(
    a: dict[str, float] | None, b: dict[str, float] | None, epsilon: float
) -> bool:
    if not a or not b:
        return False
    limit = epsilon + SIGNAL_TOLERANCE
    return all(abs(a.get(key, 0.0) - b.get(key, 0.0)) <= limit for key in set(a) | set(b))


def _scores_too_close(previous: ShortlistMatch, match: ShortlistMatch) -> bool:
    return (
        previous.confidence_band == match.confidence_band
        and abs(previous.score - match.score) < SCORE_SIMILARITY_EPSILON
    )


def _resolve_config(
    config: GuardrailConfig | ScoringConfig | Mapping[str, Any] | None,
) -> tuple[GuardrailConfig, float]:
    if config is None:
        return GuardrailConfig(), DEFAULT_DIVERSITY_EPSILON
    if isinstance(config, ScoringConfig):
        return config.guardrails, config.diversity_epsilon
    if isinstance(config, GuardrailConfig):
        guardrails = config
    elif isinstance(config, Mapping):
        try:
            guardrails = GuardrailConfig.model_validate(config)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid guardrails: {e.error_count()} validation error(s)") from e
    else:
        raise ConfigurationError(f"Unsupported shortlist config type {type(config).__name__}")
    validate_guardrails(guardrails)
    return guardrails, DEFAULT_DIVERSITY_EPSILON


def _normalize_matches(matches: Iterable[ShortlistMatch | dict[str, Any]]) -> list[ShortlistMatch]:
    if matches is None:
        raise InvalidInputError("matches is required")
    normalized: list[ShortlistMatch] = []
    seen: set[str] = set()
    for raw in matches:
        match = coerce_model(ShortlistMatch, raw, "shortlist match")
        if match.candidate_id in seen:
            raise InvalidInputError(f"Duplicate candidate in matches: {match.candidate_id}")
        seen.add(match.candidate_id)
        normalized.append(match)
    return normalized
