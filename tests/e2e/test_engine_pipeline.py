"""End-to-end run of the engine over a small candidate pool."""

from datetime import datetime, timedelta, timezone

import pytest

from talentrank.core.config import resolve_scoring_config
from talentrank.core.engine import run_engine
from talentrank.core.errors import InvalidInputError
from talentrank.core.models.enums import ConfigSource

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)

JOB = {
    "id": "job-42",
    "title": "Senior Backend Engineer",
    "location": "Berlin, Germany",
    "seniorityLevel": "senior",
    "minExperienceYears": 3,
    "maxExperienceYears": 10,
    "skills": [
        {"name": "Python", "required": True},
        {"name": "PostgreSQL", "normalizedName": "postgres", "required": True},
        {"name": "Kubernetes"},
    ],
}


def _candidates():
    return [
        {
            "id": "alice",
            "location": "Berlin, Germany",
            "currentTitle": "Senior Backend Engineer",
            "seniorityLevel": "senior",
            "totalExperienceYears": 7,
            "skills": [{"name": "Python"}, {"name": "postgres"}, {"name": "Kubernetes"}],
            "updatedAt": NOW.isoformat(),
        },
        {
            "id": "bob",
            "location": "Berlin, Germany",
            "currentTitle": "Backend Engineer",
            "seniorityLevel": "mid",
            "totalExperienceYears": 4,
            "skills": [{"name": "Python"}, {"name": "Postgres"}],
            "updatedAt": (NOW - timedelta(days=30)).isoformat(),
        },
        {
            "id": "carol",
            "location": "Remote",
            "currentTitle": "Platform Engineer",
            "seniorityLevel": "staff",
            "totalExperienceYears": 12,
            "skills": [{"name": "Python"}, {"name": "Kubernetes"}],
            "createdAt": (NOW - timedelta(days=200)).isoformat(),
        },
        {
            "id": "dana",
            "location": "Tokyo, Japan",
            "currentTitle": "Intern",
            "seniorityLevel": "intern",
            "totalExperienceYears": 0,
            "skills": [{"name": "Excel"}],
        },
    ]


def test_engine_end_to_end():
    result = run_engine(JOB, _candidates(), now=NOW)

    assert result.job_id == "job-42"
    assert [m.candidate_id for m in result.matches] == ["alice", "bob", "carol", "dana"]
    assert len(result.confidences) == 4

    # dana falls below the default matcher_min_score
    assert result.filtered_candidate_ids == ["dana"]
    assert "dana" not in [c.id for c in result.ranked]

    assert result.ranked[0].id == "alice"
    assert result.ranked[0].priority_score == 100
    assert result.shortlist.shortlisted_candidate_ids[0] == "alice"
    assert len(result.shortlist.shortlisted_candidate_ids) <= result.shortlist.max_candidates
    assert result.shortlist.strategy == "quality"
    assert result.guardrail_source == ConfigSource.DEFAULT


def test_engine_is_deterministic():
    first = run_engine(JOB, _candidates(), now=NOW)
    second = run_engine(JOB, list(reversed(_candidates())), now=NOW)

    assert first.to_json_dict()["ranked"] == second.to_json_dict()["ranked"]
    assert first.shortlist == second.shortlist


def test_engine_output_is_camel_case_json():
    payload = run_engine(JOB, _candidates(), now=NOW).to_json_dict()

    assert payload["jobId"] == "job-42"
    assert payload["shortlist"]["shortlistedCandidateIds"][0] == "alice"
    assert "priorityScore" in payload["ranked"][0]
    assert payload["guardrailSource"] == "default"


def test_engine_strategy_override_and_tenant_guardrails():
    config = resolve_scoring_config(stored_guardrails={"shortlistMaxCandidates": 1})

    result = run_engine(JOB, _candidates(), config, strategy="fast", now=NOW)

    assert result.shortlist.strategy == "fast"
    assert result.shortlist.shortlisted_candidate_ids == ["alice"]
    assert result.guardrail_source == ConfigSource.DATABASE


def test_engine_accepts_raw_overrides():
    result = run_engine(JOB, _candidates(), {"guardrails": {"matcherMinScore": 0}}, now=NOW)

    assert result.filtered_candidate_ids == []
    assert len(result.ranked) == 4


def test_engine_with_no_candidates():
    result = run_engine(JOB, [], now=NOW)

    assert result.ranked == []
    assert result.shortlist.shortlisted_candidate_ids == []
    assert result.shortlist.cutoff_score is None


def test_engine_rejects_duplicate_candidates():
    candidates = _candidates()
    candidates.append(dict(candidates[0]))

    with pytest.raises(InvalidInputError):
        run_engine(JOB, candidates, now=NOW)


def test_engine_rejects_missing_job():
    with pytest.raises(InvalidInputError):
        run_engine(None, _candidates(), now=NOW)


def test_shortlist_follows_ranked_order_on_priority_ties():
    profile = {
        "location": "Berlin, Germany",
        "currentTitle": "Senior Backend Engineer",
        "seniorityLevel": "senior",
        "totalExperienceYears": 7,
        "skills": [{"name": "Python"}, {"name": "postgres"}, {"name": "Kubernetes"}],
    }
    candidates = [
        {**profile, "id": "a", "updatedAt": (NOW - timedelta(days=10)).isoformat()},
        {**profile, "id": "b", "updatedAt": (NOW - timedelta(days=2)).isoformat()},
    ]
    config = {"weights": {"ranker": {"recency": 0}}, "guardrails": {"shortlistMaxCandidates": 1}}

    result = run_engine(JOB, candidates, config, now=NOW)

    assert result.ranked[0].priority_score == result.ranked[1].priority_score
    assert [c.id for c in result.ranked] == ["b", "a"]
    assert result.shortlist.shortlisted_candidate_ids == ["b"]
