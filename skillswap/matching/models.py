"""Data structures passed through the matching engine."""
import math
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class UserProfile:
    """One participant in matching.

    Built per request from whatever the caller supplies; never persisted here.
    """

    id: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    availability: Optional[str] = None

    @property
    def has_location(self) -> bool:
        """True when both coordinates are present and finite."""
        if self.latitude is None or self.longitude is None:
            return False
        return math.isfinite(self.latitude) and math.isfinite(self.longitude)


@dataclass
class Skill:
    """A skill a user offers (is_offering=True) or seeks (is_offering=False)."""

    id: str
    user_id: str
    name: str
    category: str
    is_offering: bool = True
    description: Optional[str] = None
    subcategory: Optional[str] = None
    proficiency_level: Optional[str] = None

    @property
    def normalized_name(self) -> str:
        return self.name.lower()


@dataclass
class MatchCandidate:
    """A prospective partner and the result of scoring them."""

    user: UserProfile
    skills_offered: list[Skill] = field(default_factory=list)
    skills_sought: list[Skill] = field(default_factory=list)
    score: float = 0.0
    distance: Optional[float] = None  # km
    # Breakdown filled in by the ranker
    skill_score: float = 0.0
    location_score: float = 0.0
    reasons: list[str] = field(default_factory=list)

    @property
    def user_id(self) -> str:
        return self.user.id
