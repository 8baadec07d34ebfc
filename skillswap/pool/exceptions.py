"""Candidate pool exceptions."""


class PoolError(Exception):
    """Base exception for candidate pool errors."""

    pass


class UnknownUserError(PoolError):
    """Raised when a user id is not in the pool."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Unknown user: {user_id}")


class UnknownSkillError(PoolError):
    """Raised when a skill id is not in the pool."""

    def __init__(self, skill_id: str):
        self.skill_id = skill_id
        super().__init__(f"Unknown skill: {skill_id}")
