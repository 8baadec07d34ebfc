"""Pytest fixtures for SkillSwap tests."""
import sys
from pathlib import Path

import pytest
import yaml

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from skillswap.matching.models import MatchCandidate, Skill, UserProfile


# =============================================================================
# MATCHING FIXTURES
# =============================================================================


@pytest.fixture
def requester():
    """Requesting user at (0, 0)."""
    return UserProfile(id="user0", latitude=0, longitude=0, availability="weekends")


@pytest.fixture
def sought_skills():
    """Skills the requester is looking for."""
    return [
        Skill(id="s1", user_id="user0", name="Gardening", category="Outdoors", is_offering=False),
        Skill(id="s2", user_id="user0", name="JavaScript", category="Tech", is_offering=False),
    ]


@pytest.fixture
def candidates(requester):
    """Candidates at increasing distance, plus the requester's own entry."""
    gardening = Skill(id="s3", user_id="user1", name="Gardening", category="Outdoors")
    javascript = Skill(id="s4", user_id="user2", name="JavaScript", category="Tech")
    yoga = Skill(id="s5", user_id="user3", name="Yoga", category="Wellness")

    return [
        MatchCandidate(
            user=UserProfile(id="user1", latitude=1, longitude=1),
            skills_offered=[gardening, yoga],
        ),
        MatchCandidate(
            user=UserProfile(id="user2", latitude=10, longitude=10),
            skills_offered=[javascript],
        ),
        MatchCandidate(
            user=UserProfile(id="user3", latitude=0, longitude=0),
            skills_offered=[gardening, javascript],
        ),
        MatchCandidate(user=requester),
    ]


# =============================================================================
# POOL FIXTURES
# =============================================================================


@pytest.fixture
def pool_dict():
    """A small valid pool document."""
    return {
        "users": [
            {"id": "alice", "latitude": 40.7128, "longitude": -74.0060, "availability": "weekends"},
            {"id": "bruno", "latitude": 40.7306, "longitude": -73.9352, "availability": "Weekends"},
            {"id": "emeka"},
        ],
        "skills": [
            {"id": "a1", "user_id": "alice", "name": "Guitar", "category": "music", "is_offering": False},
            {"id": "a2", "user_id": "alice", "name": "Python", "category": "programming"},
            {"id": "b1", "user_id": "bruno", "name": "guitar", "category": "music"},
            {"id": "b2", "user_id": "bruno", "name": "Python", "category": "programming", "is_offering": False},
            {"id": "e1", "user_id": "emeka", "name": "Piano", "category": "music"},
        ],
    }


@pytest.fixture
def pool_file(tmp_path, pool_dict):
    """Pool document written to a YAML file."""
    path = tmp_path / "pool.yaml"
    path.write_text(yaml.safe_dump(pool_dict))
    return path
