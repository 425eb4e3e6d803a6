# path: transit-api/transit_api/utils/geo.py

from __future__ import annotations

from typing import Iterable, List, Protocol, Sequence, Tuple
import math

from transit_api.models.errors import CoordinateOutOfRangeError


EARTH_RADIUS_M = 6371000.0


class LngLat(Protocol):
    lng: float
    lat: float


def lnglat_bbox(points_lonlat: Iterable[Tuple[float, float]]) -> List[float]:
    """GeoJSON bbox ``[min_lng, min_lat, max_lng, max_lat]``; needs at least one point."""
    min_lng = min_lat = math.inf
    max_lng = max_lat = -math.inf
    for lng, lat in points_lonlat:
        min_lng, max_lng = min(min_lng, lng), max(max_lng, lng)
        min_lat, max_lat = min(min_lat, lat), max(max_lat, lat)
    return [min_lng, min_lat, max_lng, max_lat]


def haversine_m(a_lon: float, a_lat: float, b_lon: float, b_lat: float) -> float:
    phi1 = math.radians(a_lat)
    phi2 = math.radians(b_lat)
    dphi = math.radians(b_lat - a_lat)
    dlmb = math.radians(b_lon - a_lon)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    # rounding near antipodal points can push a just outside [0, 1]
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def great_circle_distance_m(a: LngLat, b: LngLat) -> float:
    """Surface distance in metres between two coordinates."""
    return haversine_m(a.lng, a.lat, b.lng, b.lat)


def polyline_length_m(path: Sequence[LngLat]) -> float:
    return sum((great_circle_distance_m(p, q) for p, q in zip(path, path[1:])), 0.0)


def validate_coordinate(lng: float, lat: float) -> None:
    if not (-180.0 <= lng <= 180.0):
        raise CoordinateOutOfRangeError(f"lng out of range [-180,180]: {lng}")
    if not (-90.0 <= lat <= 90.0):
        raise CoordinateOutOfRangeError(f"lat out of range [-90,90]: {lat}")
