"""Load users and skills from a YAML pool file."""
import logging
from pathlib import Path
from typing import Optional, Union

import yaml

from skillswap.matching.models import MatchCandidate, Skill, UserProfile
from skillswap.pool.exceptions import PoolError, UnknownSkillError, UnknownUserError
from skillswap.pool.validators import PoolConfig, validate_pool

logger = logging.getLogger(__name__)


class SkillPool:
    """In-memory users and skills, joined into match candidates on request."""

    def __init__(self, users: list[UserProfile], skills: list[Skill]):
        self.users = {u.id: u for u in users}
        self.skills = skills

    @classmethod
    def from_config(cls, config: PoolConfig) -> "SkillPool":
        users = [
            UserProfile(
                id=u.id,
                latitude=u.latitude,
                longitude=u.longitude,
                availability=u.availability,
            )
            for u in config.users
        ]
        skills = [Skill(**s.model_dump()) for s in config.skills]
        return cls(users, skills)

    def get_user(self, user_id: str) -> UserProfile:
        user = self.users.get(user_id)
        if user is None:
            raise UnknownUserError(user_id)
        return user

    def get_skill(self, skill_id: str) -> Skill:
        for skill in self.skills:
            if skill.id == skill_id:
                return skill
        raise UnknownSkillError(skill_id)

    def offered_by(self, user_id: str) -> list[Skill]:
        return [s for s in self.skills if s.user_id == user_id and s.is_offering]

    def sought_by(self, user_id: str) -> list[Skill]:
        return [s for s in self.skills if s.user_id == user_id and not s.is_offering]

    def build_candidates(self, exclude: Optional[str] = None) -> list[MatchCandidate]:
        """
        Build a candidate for every user in the pool.

        Args:
            exclude: Optional user id to leave out

        Returns:
            Candidates with offered/sought skill lists populated
        """
        return [
            MatchCandidate(
                user=user,
                skills_offered=self.offered_by(user_id),
                skills_sought=self.sought_by(user_id),
            )
            for user_id, user in self.users.items()
            if user_id != exclude
        ]

    def __len__(self) -> int:
        return len(self.users)


def load_pool(path: Union[str, Path]) -> SkillPool:
    """
    Load and validate a pool file.

    Args:
        path: Path to the YAML pool file

    Returns:
        SkillPool

    Raises:
        PoolError: If the file does not hold a mapping
        ValidationError: If the content fails validation
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise PoolError(f"Pool file must contain a mapping, got {type(data).__name__}")

    pool = SkillPool.from_config(validate_pool(data))
    logger.info("Loaded pool from %s: %s users, %s skills", path, len(pool), len(pool.skills))
    return pool
