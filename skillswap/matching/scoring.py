"""Location and skill component scores."""
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from skillswap.matching.models import Skill

# Weighting of the two components (must sum to 1)
SKILL_WEIGHT = 0.6
LOCATION_WEIGHT = 0.4

# Distance breakpoints in km
CLOSE_RADIUS_KM = 5
NEARBY_RADIUS_KM = 15
MAX_RADIUS_KM = 50

CLOSE_SCORE = 1.0
NEARBY_SCORE = 0.8
FAR_SCORE_FLOOR = 0.1
NEUTRAL_LOCATION_SCORE = 0.3  # one or both users have no location

# Score given to the requester's own entry so it can be filtered out
SELF_MATCH_SENTINEL = -1.0


@dataclass(frozen=True)
class ScoringConfig:
    """Tunable scoring constants. Defaults reproduce the production behaviour."""

    skill_weight: float = SKILL_WEIGHT
    location_weight: float = LOCATION_WEIGHT
    close_radius_km: float = CLOSE_RADIUS_KM
    nearby_radius_km: float = NEARBY_RADIUS_KM
    max_radius_km: float = MAX_RADIUS_KM
    neutral_location_score: float = NEUTRAL_LOCATION_SCORE

    def __post_init__(self):
        if not math.isclose(self.skill_weight + self.location_weight, 1.0):
            raise ValueError(
                f"Scoring weights must sum to 1, got "
                f"{self.skill_weight} + {self.location_weight}"
            )
        if not 0 <= self.close_radius_km <= self.nearby_radius_km < self.max_radius_km:
            raise ValueError(
                "Distance breakpoints must satisfy 0 <= close <= nearby < max"
            )


DEFAULT_CONFIG = ScoringConfig()


def location_score(
    distance_km: Optional[float],
    config: ScoringConfig = DEFAULT_CONFIG,
) -> float:
    """
    Map a distance to a desirability score in [0, 1], higher is closer.

    Args:
        distance_km: Distance in km, or None when either user has no location
        config: Breakpoints to use

    Returns:
        Location score
    """
    if distance_km is None or math.isnan(distance_km):
        return config.neutral_location_score
    if distance_km < 0:
        return 0.0
    if distance_km <= config.close_radius_km:
        return CLOSE_SCORE
    if distance_km <= config.nearby_radius_km:
        return NEARBY_SCORE

    # Linear decay from 1.0 at the close radius to the floor at the max radius
    span = config.max_radius_km - config.close_radius_km
    decayed = 1.0 - ((distance_km - config.close_radius_km) / span) * (1.0 - FAR_SCORE_FLOOR)
    return max(FAR_SCORE_FLOOR, decayed)


def skill_match_score(sought: Sequence[Skill], offered: Sequence[Skill]) -> float:
    """
    Fraction of the sought skills that the offered skills cover.

    Names are compared exactly after lowercasing. Duplicates in the sought
    list each count.
    """
    if not sought or not offered:
        return 0.0

    offered_names = {skill.normalized_name for skill in offered}
    found = sum(1 for skill in sought if skill.normalized_name in offered_names)
    return found / len(sought)


def combined_score(
    skill_score: float,
    loc_score: float,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> float:
    """Weighted overall score."""
    return skill_score * config.skill_weight + loc_score * config.location_weight
