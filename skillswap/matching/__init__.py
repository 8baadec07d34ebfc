"""Skill matching and ranking."""
from .geo import calculate_geo_distance
from .models import MatchCandidate, Skill, UserProfile
from .ranker import MatchRanker, find_matches, get_ranker
from .scoring import ScoringConfig, location_score, skill_match_score

__all__ = [
    "MatchCandidate",
    "MatchRanker",
    "ScoringConfig",
    "Skill",
    "UserProfile",
    "calculate_geo_distance",
    "find_matches",
    "get_ranker",
    "location_score",
    "skill_match_score",
]
