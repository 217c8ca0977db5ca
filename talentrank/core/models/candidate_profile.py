"""Candidate profile models consumed by the scorers (Pydantic only)."""

from datetime import datetime

from pydantic import Field

from .base import EngineBaseModel


class CandidateSkill(EngineBaseModel):
    """Single skill recorded on a candidate profile."""

    name: str = Field(..., min_length=1, description="Skill name")
    normalized_name: str | None = Field(None, description="Canonical lowercase skill name")
    proficiency: str | None = Field(None, description="Self-reported or parsed proficiency")
    years_of_experience: float | None = Field(None, ge=0, description="Years using the skill")

    @property
    def match_key(self) -> str:
        return (self.normalized_name or self.name).strip().lower()


class Candidate(EngineBaseModel):
    """Candidate profile as normalized by the resume pipeline."""

    id: str = Field(..., min_length=1, description="Candidate identifier")
    full_name: str | None = Field(None, description="Full name")
    location: str | None = Field(None, description="Location text")
    current_title: str | None = Field(None, description="Current job title")
    seniority_level: str | None = Field(None, description="Seniority label")
    total_experience_years: float | None = Field(None, ge=0, description="Total years")
    skills: list[CandidateSkill] = Field(default_factory=list, description="Recorded skills")

    # Parsing provenance
    raw_resume_text: str | None = Field(None, description="Raw resume text")
    parsing_confidence: float | None = Field(
        None, ge=0.0, le=1.0, description="Resume parser confidence"
    )

    # Recency
    created_at: datetime | None = Field(None, description="Profile creation time")
    updated_at: datetime | None = Field(None, description="Last profile update")

    @property
    def skill_keys(self) -> set[str]:
        return {s.match_key for s in self.skills if s.match_key}

    @property
    def last_activity_at(self) -> datetime | None:
        return self.updated_at or self.created_at
