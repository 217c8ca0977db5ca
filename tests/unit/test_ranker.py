"""Ranker: priority scores, recency decay and deterministic ordering."""

import pytest

from talentrank.core.errors import InvalidInputError
from talentrank.core.models.ranked_candidate import RankerCandidate
from talentrank.core.scoring.ranker import rank_candidates, recency_score


@pytest.mark.parametrize("days,expected", [(0, 100), (45, 75), (90, 50), (180, 0), (400, 0)])
def test_recency_score_linear_decay(days, expected):
    assert recency_score(days) == expected


def test_priority_score_uses_normalized_weights():
    ranked = rank_candidates(
        [{"id": "a", "matchScore": 80, "confidenceScore": 60, "recencyDays": 90, "roleAlignment": 50}]
    )

    # 80*.5 + 60*.2 + 50*.15 + 50*.15 = 67
    assert ranked[0].priority_score == 67
    assert ranked[0].recency_score == 50


def test_partial_weights_merge_over_defaults():
    candidates = [{"id": "a", "matchScore": 100, "confidenceScore": 0, "recencyDays": 180, "roleAlignment": 0}]

    # match 2, confidence .2, recency .15, role .15 -> match share 2/2.5
    ranked = rank_candidates(candidates, weights={"match": 2})

    assert ranked[0].priority_score == 80


def test_unknown_weight_keys_are_ignored():
    candidates = [RankerCandidate(id="a", match_score=70, confidence_score=50)]

    assert rank_candidates(candidates, {"bogus": 10}) == rank_candidates(candidates)


def test_higher_priority_ranks_first():
    ranked = rank_candidates(
        [
            {"id": "low", "matchScore": 40, "confidenceScore": 40},
            {"id": "high", "matchScore": 95, "confidenceScore": 90},
            {"id": "mid", "matchScore": 70, "confidenceScore": 70},
        ]
    )

    assert [c.id for c in ranked] == ["high", "mid", "low"]


def test_equal_priority_fresher_candidate_wins():
    ranked = rank_candidates(
        [
            {"id": "stale", "matchScore": 80, "confidenceScore": 80, "recencyDays": 10},
            {"id": "fresh", "matchScore": 80, "confidenceScore": 80, "recencyDays": 2},
        ],
        weights={"recency": 0},
    )

    assert ranked[0].priority_score == ranked[1].priority_score
    assert [c.id for c in ranked] == ["fresh", "stale"]


def test_tie_breaks_fall_through_to_id():
    ranked = rank_candidates(
        [
            {"id": "b", "matchScore": 70, "confidenceScore": 70},
            {"id": "a", "matchScore": 70, "confidenceScore": 70},
        ]
    )

    assert [c.id for c in ranked] == ["a", "b"]


def test_tie_on_priority_prefers_higher_match_score():
    ranked = rank_candidates(
        [
            {"id": "a", "matchScore": 60, "confidenceScore": 100},
            {"id": "b", "matchScore": 80, "confidenceScore": 50},
        ],
        weights={"match": 1, "confidence": 0.4, "recency": 0, "role": 0},
    )

    # a: (60 + 40) / 1.4, b: (80 + 20) / 1.4
    assert ranked[0].priority_score == ranked[1].priority_score
    assert [c.id for c in ranked] == ["b", "a"]


def test_ranking_is_deterministic():
    candidates = [
        {"id": f"c{i}", "matchScore": (i * 37) % 100, "confidenceScore": (i * 53) % 100, "recencyDays": i % 7}
        for i in range(25)
    ]

    first = rank_candidates(candidates)
    second = rank_candidates(list(reversed(candidates)))

    assert [c.id for c in first] == [c.id for c in second]
    assert first == rank_candidates(candidates)


def test_empty_input_returns_empty_list():
    assert rank_candidates([]) == []


def test_out_of_range_scores_raise():
    with pytest.raises(InvalidInputError):
        rank_candidates([{"id": "a", "matchScore": 150, "confidenceScore": 50}])


def test_missing_candidates_raise():
    with pytest.raises(InvalidInputError):
        rank_candidates(None)
