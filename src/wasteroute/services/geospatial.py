"""Geospatial helper functions."""

from __future__ import annotations

import math

from ..models.domain import Point

EARTH_RADIUS_KM = 6371.0


def haversine_km(a: Point, b: Point) -> float:
    """Compute great-circle distance between two points using the Haversine formula."""

    coordinates = (a.latitude, a.longitude, b.latitude, b.longitude)
    if not all(math.isfinite(value) for value in coordinates):
        return math.nan
    if a == b:
        return 0.0

    phi1, phi2 = math.radians(a.latitude), math.radians(b.latitude)
    d_phi = math.radians(b.latitude - a.latitude)
    d_lambda = math.radians(b.longitude - a.longitude)

    h = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Rounding can push h just outside [0, 1].
    h = min(max(h, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def is_valid_coordinate(latitude: float, longitude: float) -> bool:
    """Return True for finite coordinates inside the WGS84 degree ranges."""

    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        return False
    return -90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0
