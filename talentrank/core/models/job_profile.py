"""Job requisition models consumed by the scorers (Pydantic only)."""

from pydantic import Field, field_validator

from .base import EngineBaseModel


class JobSkill(EngineBaseModel):
    """A required or preferred skill on a job requisition."""

    name: str = Field(..., min_length=1, description="Skill name as written on the job")
    normalized_name: str | None = Field(None, description="Canonical lowercase skill name")
    required: bool = Field(False, description="Must-have when true, nice-to-have otherwise")
    weight: float | None = Field(
        None, ge=0.0, description="Importance weight (absent or 0 uses the required default)"
    )

    @property
    def match_key(self) -> str:
        """Key used for case-insensitive skill equality."""
        return (self.normalized_name or self.name).strip().lower()

    @property
    def effective_weight(self) -> float:
        """Explicit positive weight, else 2 for required and 1 for preferred skills."""
        if self.weight and self.weight > 0:
            return float(self.weight)
        return 2.0 if self.required else 1.0


class Job(EngineBaseModel):
    """Job requisition as supplied by the surrounding application."""

    id: str = Field(..., min_length=1, description="Job identifier")
    title: str | None = Field(None, description="Job title")
    location: str | None = Field(None, description="Job location or 'Remote'")
    seniority_level: str | None = Field(None, description="Expected seniority label")
    min_experience_years: float | None = Field(None, ge=0, description="Minimum years overall")
    max_experience_years: float | None = Field(None, ge=0, description="Maximum years overall")
    skills: list[JobSkill] = Field(default_factory=list, description="Job skills")

    @field_validator("skills")
    @classmethod
    def _dedupe_skills(cls, skills: list[JobSkill]) -> list[JobSkill]:
        # First occurrence of a normalized name wins
        seen: set[str] = set()
        unique: list[JobSkill] = []
        for skill in skills:
            key = skill.match_key
            if key and key not in seen:
                seen.add(key)
                unique.append(skill)
        return unique

    @property
    def required_skills(self) -> list[JobSkill]:
        return [s for s in self.skills if s.required]

    @property
    def preferred_skills(self) -> list[JobSkill]:
        return [s for s in self.skills if not s.required]
