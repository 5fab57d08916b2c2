"""
todo_gateway/services/geo.py

Great-circle distance between two coordinates.
Pure functions; no I/O and no validation (callers validate ranges).
"""

import math

from todo_gateway.constants import EARTH_RADIUS_M
from todo_gateway.schemas import Coordinate


def haversine_distance(
    lat1: float,
    lng1: float,
    lat2: float,
    lng2: float,
) -> float:
    """
    Calculate the great-circle distance between two points in meters.

    Uses the Haversine formula with Earth radius = 6,371,000 meters.
    Returns a finite float for any real-valued input, in or out of range.
    """
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lng2 - lng1)
    a = (
        math.sin(dphi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    )
    # Rounding can push a just outside [0, 1]
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def distance(a: Coordinate, b: Coordinate) -> float:
    """Surface distance in meters between two coordinates."""
    return haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude)
