"""Pydantic validation models for candidate pool files."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class UserEntry(BaseModel):
    """A user in the pool."""
    id: str = Field(min_length=1)
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    availability: Optional[str] = Field(default=None, description="Free-text tag, e.g. 'weekends'")

    @field_validator("availability", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Treat blank availability as missing."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class SkillEntry(BaseModel):
    """A skill offered or sought by a user."""
    id: str = Field(min_length=1)
    user_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    category: str = Field(default="general")
    is_offering: bool = Field(default=True)
    description: Optional[str] = None
    subcategory: Optional[str] = None
    proficiency_level: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        """Strip surrounding whitespace from skill names."""
        if isinstance(v, str):
            return v.strip()
        return v


class PoolConfig(BaseModel):
    """Complete pool file."""
    users: list[UserEntry] = Field(default_factory=list)
    skills: list[SkillEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_references(self):
        """Ensure ids are unique and every skill belongs to a known user."""
        user_ids = [u.id for u in self.users]
        if len(user_ids) != len(set(user_ids)):
            raise ValueError("User ids must be unique")

        skill_ids = [s.id for s in self.skills]
        if len(skill_ids) != len(set(skill_ids)):
            raise ValueError("Skill ids must be unique")

        known = set(user_ids)
        orphans = sorted({s.user_id for s in self.skills if s.user_id not in known})
        if orphans:
            raise ValueError(f"Skills reference unknown users: {', '.join(orphans)}")
        return self


def validate_pool(pool_dict: dict) -> PoolConfig:
    """Validate a pool dictionary and return PoolConfig.

    Args:
        pool_dict: Dictionary matching the pool YAML structure

    Returns:
        Validated PoolConfig instance

    Raises:
        ValidationError: If validation fails
    """
    return PoolConfig(**pool_dict)
