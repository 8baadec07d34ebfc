"""Great-circle distance between users."""
import math
from typing import Optional

from skillswap.matching.models import UserProfile

EARTH_RADIUS_KM = 6371


def calculate_geo_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Distance between two coordinates using the haversine formula.

    Args:
        lat1: Latitude of the first point in degrees
        lon1: Longitude of the first point in degrees
        lat2: Latitude of the second point in degrees
        lon2: Longitude of the second point in degrees

    Returns:
        Distance in kilometers
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )

    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_between(a: UserProfile, b: UserProfile) -> Optional[float]:
    """Distance between two users, or None unless both have a usable location."""
    if not (a.has_location and b.has_location):
        return None
    return calculate_geo_distance(a.latitude, a.longitude, b.latitude, b.longitude)
