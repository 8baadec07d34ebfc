"""Command-line entry point for SkillSwap matching.

Usage:
    skillswap match --user alice                 # Top matches from the sample pool
    skillswap match --user alice --limit 10 --sort distance
    skillswap similar --skill s-bruno-1 --pool pool.yaml
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

# Add project root to path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from pydantic import ValidationError

from config.settings import settings
from skillswap.logging_config import setup_logging
from skillswap.matching.ranker import SORT_KEYS, get_ranker
from skillswap.matching.similarity import find_similar_skills
from skillswap.pool import PoolError, SkillPool, load_pool

logger = logging.getLogger(__name__)


def run_match(
    pool: SkillPool,
    user_id: str,
    limit: int,
    max_distance: Optional[float] = None,
    sort_by: str = "score",
) -> list:
    """Rank the pool for one user and log the top matches."""
    requester = pool.get_user(user_id)
    sought = pool.sought_by(user_id)
    if not sought:
        logger.info("%s is not seeking any skills; nothing to match.", user_id)
        return []

    ranker = get_ranker(settings.scoring_engine, config=settings.scoring_config())
    matches = ranker.rank(
        requester,
        sought,
        pool.build_candidates(),
        requester_offered=pool.offered_by(user_id),
    )
    if max_distance is not None:
        matches = ranker.filter_by_distance(matches, max_distance)
    matches = ranker.sort_matches(matches, sort_by)
    top = ranker.get_top_matches(matches, n=limit)

    logger.info("Top %s of %s matches for %s:", len(top), len(matches), user_id)
    for i, match in enumerate(top, start=1):
        distance = f"{match.distance:.1f}km" if match.distance is not None else "unknown distance"
        logger.info("%02d. %s  (score=%.3f, %s)", i, match.user.id, match.score, distance)
        for reason in match.reasons:
            logger.info("      - %s", reason)
    return top


def run_similar(pool: SkillPool, skill_id: str, limit: int) -> list:
    """Log skills related to one skill in the pool."""
    skill = pool.get_skill(skill_id)
    similar = find_similar_skills(skill, pool.skills, limit=limit)

    logger.info("Skills similar to %s (%s):", skill.name, skill.category)
    for other, similarity in similar:
        logger.info("  %s [%s] by %s  (%.2f)", other.name, other.category, other.user_id, similarity)
    return similar


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="skillswap", description="SkillSwap matching tools.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    match_parser = subparsers.add_parser("match", help="Rank partners for a user.")
    match_parser.add_argument("--user", required=True, help="User id to find matches for.")
    match_parser.add_argument("--pool", type=Path, default=None, help="YAML pool file.")
    match_parser.add_argument(
        "--limit",
        type=int,
        default=settings.match_display_limit,
        help="Number of matches to show.",
    )
    match_parser.add_argument(
        "--max-distance",
        type=float,
        default=None,
        help="Drop matches farther than this many km (unknown distances are kept).",
    )
    match_parser.add_argument("--sort", choices=SORT_KEYS, default="score", help="Sort order.")

    similar_parser = subparsers.add_parser("similar", help="Suggest skills related to a skill.")
    similar_parser.add_argument("--skill", required=True, help="Skill id.")
    similar_parser.add_argument("--pool", type=Path, default=None, help="YAML pool file.")
    similar_parser.add_argument("--limit", type=int, default=5, help="Number of suggestions.")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    setup_logging(settings.log_level, settings.log_file)

    args = build_parser().parse_args(argv)
    pool_path = args.pool or settings.pool_path

    try:
        pool = load_pool(pool_path)
        if args.command == "match":
            run_match(pool, args.user, args.limit, args.max_distance, args.sort)
        else:
            run_similar(pool, args.skill, args.limit)
    except (PoolError, ValidationError, OSError) as e:
        logger.error("Error: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
