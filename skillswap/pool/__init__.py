"""File-backed candidate pool."""
from .exceptions import PoolError, UnknownSkillError, UnknownUserError
from .loader import SkillPool, load_pool

__all__ = ["PoolError", "SkillPool", "UnknownSkillError", "UnknownUserError", "load_pool"]
