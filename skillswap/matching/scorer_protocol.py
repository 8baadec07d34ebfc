"""Scorer protocol for pluggable scoring engines.

Defines the interface that all candidate scorers must satisfy.
WeightedScorer is the location/skill implementation; other scorers
(e.g. rating-aware ones) implement the same protocol.
"""
from typing import Protocol, Sequence, runtime_checkable

from skillswap.matching.models import MatchCandidate, Skill, UserProfile


@runtime_checkable
class Scorer(Protocol):
    """Protocol for candidate scoring engines."""

    def score(
        self,
        requester: UserProfile,
        sought_skills: Sequence[Skill],
        candidate: MatchCandidate,
    ) -> MatchCandidate:
        """Return a new candidate with score, distance and breakdown filled in."""
        ...
