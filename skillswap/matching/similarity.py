"""Related-skill suggestions.

Used to suggest skills a user might also list or search for. Skill overlap
scoring does not use this; it matches exact names only.
"""
import re
from typing import Sequence

from skillswap.matching.models import Skill

CATEGORY_WEIGHT = 0.4
SUBCATEGORY_WEIGHT = 0.3
KEYWORD_WEIGHT = 0.3

MIN_SIMILARITY = 0.3
MIN_WORD_LENGTH = 4

_WORD_SPLIT = re.compile(r"\W+")


def _words(text: str) -> set[str]:
    return {w for w in _WORD_SPLIT.split(text.lower()) if len(w) >= MIN_WORD_LENGTH}


def _skill_text(skill: Skill) -> str:
    return f"{skill.name} {skill.description or ''}"


def keyword_similarity(text1: str, text2: str) -> float:
    """Shared words over all unique words (words shorter than 4 chars ignored)."""
    words1 = _words(text1)
    words2 = _words(text2)
    total = len(words1 | words2)
    if total == 0:
        return 0.0
    return len(words1 & words2) / total


def find_similar_skills(
    skill: Skill,
    all_skills: Sequence[Skill],
    limit: int = 5,
) -> list[tuple[Skill, float]]:
    """
    Find skills similar to the given one.

    Args:
        skill: Skill to find relatives for
        all_skills: Pool to search (the skill itself is skipped by id)
        limit: Maximum number of results

    Returns:
        (skill, similarity) pairs, most similar first
    """
    results: list[tuple[Skill, float]] = []

    for other in all_skills:
        if other.id == skill.id:
            continue

        similarity = 0.0
        if other.category == skill.category:
            similarity += CATEGORY_WEIGHT
        if skill.subcategory and other.subcategory and other.subcategory == skill.subcategory:
            similarity += SUBCATEGORY_WEIGHT
        similarity += keyword_similarity(_skill_text(skill), _skill_text(other)) * KEYWORD_WEIGHT

        if similarity >= MIN_SIMILARITY:
            results.append((other, similarity))

    results.sort(key=lambda pair: (-pair[1], pair[0].id))
    return results[:limit]
