"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Protocol

EARTH_RADIUS_KM = 6371.0


class Coordinates(Protocol):
    lat: float
    lng: float


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def round_km(value: float) -> int:
    """Round half up to a whole kilometre (distances are never negative)."""

    return int(math.floor(value + 0.5))


def distance_km(origin: Coordinates, destination: Coordinates) -> int:
    """Great-circle distance between two points, rounded to the nearest kilometre."""

    return round_km(haversine_km(origin.lat, origin.lng, destination.lat, destination.lng))
