"""Human-readable explanations for a ranked match."""
from typing import Optional, Sequence

from skillswap.matching.models import MatchCandidate, Skill, UserProfile

# Location score at or above which proximity is called out
NEARBY_REASON_THRESHOLD = 0.8

# Skill names are listed only for small matches
MAX_NAMED_SKILLS = 3


def explain_match(
    candidate: MatchCandidate,
    sought_skills: Sequence[Skill],
    requester: Optional[UserProfile] = None,
    requester_offered: Optional[Sequence[Skill]] = None,
) -> list[str]:
    """
    Build the reasons shown next to a match.

    Args:
        candidate: Scored candidate (score, distance and breakdown filled in)
        sought_skills: Skills the requester is looking for
        requester: Requesting user, used for availability comparison
        requester_offered: Skills the requester offers, used to detect
            reciprocal interest

    Returns:
        List of reason strings, most important first
    """
    reasons: list[str] = []

    offered_names = {s.normalized_name for s in candidate.skills_offered}
    covered = [s for s in sought_skills if s.normalized_name in offered_names]
    if covered:
        reasons.append(
            f"They offer {len(covered)} of the {len(sought_skills)} skills you're looking for"
        )
        if len(covered) <= MAX_NAMED_SKILLS:
            names = ", ".join(s.name for s in covered)
            reasons.append(f"Matching skills include: {names}")

    if candidate.distance is not None and candidate.location_score >= NEARBY_REASON_THRESHOLD:
        reasons.append(f"Located only {int(candidate.distance + 0.5)}km away from you")

    if requester_offered:
        wanted_names = {s.normalized_name for s in candidate.skills_sought}
        reciprocal = [s for s in requester_offered if s.normalized_name in wanted_names]
        if reciprocal:
            reasons.append(f"They are also looking for {len(reciprocal)} skills you offer")

    if requester is not None and requester.availability and candidate.user.availability:
        if requester.availability.strip().lower() == candidate.user.availability.strip().lower():
            reasons.append(f"Also available {candidate.user.availability.strip()}")

    return reasons
