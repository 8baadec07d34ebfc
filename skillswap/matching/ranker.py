"""Candidate scoring and ranking."""
import logging
from dataclasses import replace
from typing import Iterable, Optional, Sequence

from skillswap.matching.geo import distance_between
from skillswap.matching.models import MatchCandidate, Skill, UserProfile
from skillswap.matching.reasons import explain_match
from skillswap.matching.scorer_protocol import Scorer
from skillswap.matching.scoring import (
    DEFAULT_CONFIG,
    SELF_MATCH_SENTINEL,
    ScoringConfig,
    combined_score,
    location_score,
    skill_match_score,
)

logger = logging.getLogger(__name__)

SORT_KEYS = ("score", "skill", "location", "distance")


class WeightedScorer:
    """Score = skill overlap x skill weight + location score x location weight."""

    def __init__(self, config: ScoringConfig = DEFAULT_CONFIG):
        self.config = config

    def score(
        self,
        requester: UserProfile,
        sought_skills: Sequence[Skill],
        candidate: MatchCandidate,
    ) -> MatchCandidate:
        if candidate.user.id == requester.id:
            return replace(candidate, score=SELF_MATCH_SENTINEL)

        distance = distance_between(requester, candidate.user)
        loc = location_score(distance, self.config)
        skill = skill_match_score(sought_skills, candidate.skills_offered)

        return replace(
            candidate,
            score=combined_score(skill, loc, self.config),
            distance=distance,
            skill_score=skill,
            location_score=loc,
        )


def _rank_key(candidate: MatchCandidate) -> tuple[float, str]:
    # Descending score, then user id ascending for ties
    return (-candidate.score, candidate.user.id)


class MatchRanker:
    """Score and rank candidates for a requesting user."""

    def __init__(self, scorer: Optional[Scorer] = None, min_score: float = 0):
        """
        Initialize match ranker.

        Args:
            scorer: Scorer implementation (defaults to WeightedScorer)
            min_score: Minimum score to include (0-1)
        """
        self.scorer = scorer or WeightedScorer()
        self.min_score = min_score

    def rank(
        self,
        requester: UserProfile,
        sought_skills: Sequence[Skill],
        candidates: Iterable[MatchCandidate],
        requester_offered: Optional[Sequence[Skill]] = None,
    ) -> list[MatchCandidate]:
        """
        Rank candidates for a requester.

        Args:
            requester: The user looking for partners
            sought_skills: Skills the requester is seeking
            candidates: Candidates with their skill lists populated
            requester_offered: Skills the requester offers (for reasons only)

        Returns:
            New candidate records sorted by score descending. The requester's
            own entry is never included.
        """
        if not sought_skills:
            return []

        ranked: list[MatchCandidate] = []
        excluded = 0

        for candidate in candidates:
            scored = self.scorer.score(requester, sought_skills, candidate)

            if scored.score < 0 or scored.score < self.min_score:
                excluded += 1
                continue

            scored.reasons = explain_match(
                scored,
                sought_skills,
                requester=requester,
                requester_offered=requester_offered,
            )
            ranked.append(scored)

        ranked.sort(key=_rank_key)

        logger.debug(
            "Ranked %s candidates for %s (%s excluded)",
            len(ranked),
            requester.id,
            excluded,
        )
        return ranked

    def filter_by_score(
        self,
        matches: list[MatchCandidate],
        min_score: Optional[float] = None,
    ) -> list[MatchCandidate]:
        """Filter matches by minimum score."""
        threshold = min_score if min_score is not None else self.min_score
        return [m for m in matches if m.score >= threshold]

    def filter_by_distance(
        self,
        matches: list[MatchCandidate],
        max_distance_km: float,
        keep_unknown: bool = True,
    ) -> list[MatchCandidate]:
        """Drop matches farther away than max_distance_km."""
        return [
            m for m in matches
            if (m.distance is None and keep_unknown)
            or (m.distance is not None and m.distance <= max_distance_km)
        ]

    def sort_matches(
        self,
        matches: list[MatchCandidate],
        sort_by: str = "score",
    ) -> list[MatchCandidate]:
        """
        Sort matches by one of the score components.

        'distance' sorts nearest first with unknown distances last; the other
        keys sort highest first. Ties fall back to user id.
        """
        if sort_by == "score":
            return sorted(matches, key=_rank_key)
        if sort_by == "skill":
            return sorted(matches, key=lambda m: (-m.skill_score, m.user.id))
        if sort_by == "location":
            return sorted(matches, key=lambda m: (-m.location_score, m.user.id))
        if sort_by == "distance":
            return sorted(
                matches,
                key=lambda m: (m.distance is None, m.distance or 0.0, m.user.id),
            )
        raise ValueError(f"Invalid sort key: {sort_by}. Must be one of {SORT_KEYS}")

    def get_top_matches(
        self,
        matches: list[MatchCandidate],
        n: int = 3,
    ) -> list[MatchCandidate]:
        """Get top N matches by score."""
        return matches[:n]


def find_matches(
    requester: UserProfile,
    sought_skills: Sequence[Skill],
    candidates: Iterable[MatchCandidate],
    config: ScoringConfig = DEFAULT_CONFIG,
) -> list[MatchCandidate]:
    """Rank candidates for a requester using the weighted scorer."""
    ranker = MatchRanker(WeightedScorer(config))
    return ranker.rank(requester, sought_skills, candidates)


def get_ranker(
    scoring_engine: str = "weighted",
    config: ScoringConfig = DEFAULT_CONFIG,
    min_score: float = 0,
) -> MatchRanker:
    """Factory: create a MatchRanker for the configured scoring engine.

    Args:
        scoring_engine: Name of the engine; only 'weighted' exists today
        config: Scoring constants
        min_score: Minimum score threshold

    Returns:
        A MatchRanker (unknown engines fall back to 'weighted' with a warning)
    """
    if scoring_engine != "weighted":
        logger.warning(
            "Scoring engine '%s' is not available. Falling back to weighted.",
            scoring_engine,
        )

    return MatchRanker(WeightedScorer(config), min_score=min_score)
