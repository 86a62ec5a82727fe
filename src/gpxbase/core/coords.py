"""Great-circle distance and coordinate/timestamp formatting helpers."""

import math
from datetime import datetime, timezone
from typing import Iterable, Sequence

from ..models import TrackPoint

# Earth radius in meters
EARTH_RADIUS_M = 6_371_000.0


def haversine_m(a: TrackPoint, b: TrackPoint) -> float:
    """Great-circle distance between two points in meters."""
    lat1, lat2 = math.radians(a.lat), math.radians(b.lat)
    dlat = math.radians(b.lat - a.lat)
    dlon = math.radians(b.lon - a.lon)
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def path_distance_m(points: Sequence[TrackPoint]) -> float:
    """Sum of haversine distances over consecutive pairs, in meters."""
    total = 0.0
    for i in range(1, len(points)):
        total += haversine_m(points[i - 1], points[i])
    return total


def position(point: TrackPoint) -> list[float]:
    """GeoJSON position: [lon, lat] or [lon, lat, ele] when elevation is known."""
    coord = [point.lon, point.lat]
    if point.elevation is not None:
        coord.append(point.elevation)
    return coord


def format_time(dt: datetime) -> str:
    """ISO-8601 UTC with a trailing Z."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def wkt_linestring(coords: Iterable[tuple[float, float]]) -> str:
    """2D WKT LINESTRING from (lon, lat) pairs, six decimals each."""
    return "LINESTRING(" + ", ".join(f"{lon:f} {lat:f}" for lon, lat in coords) + ")"
