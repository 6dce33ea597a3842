"""Great-circle distance helpers."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .models import TrackPoint

EARTH_RADIUS_KM = 6371.0


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance in kilometres between two lat/lon pairs given in degrees."""
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def cumulative_distances(points: Sequence[TrackPoint]) -> list[float]:
    """Return the distance along the path at each point, starting at 0."""
    if not points:
        return []

    distances = [0.0]
    for i in range(1, len(points)):
        p1, p2 = points[i - 1], points[i]
        distances.append(distances[-1] + haversine(p1.lat, p1.lon, p2.lat, p2.lon))
    return distances
