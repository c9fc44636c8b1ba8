"""Nearest-neighbor ordering of multi-stop routes."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import Location
from ..geospatial import distance_km
from .models import OptimizedRoute


def optimize_route(start: Location, stops: Sequence[Location]) -> OptimizedRoute:
    """Order stops greedily, always visiting the closest unvisited stop next.

    Leg distances are rounded before they are summed. Ties keep the stop that
    comes first in ``stops``. A stop repeated by place id is visited once, at
    its first position. O(n^2) in the number of stops, with no optimality
    guarantee beyond each greedy step.
    """
    if not stops:
        return OptimizedRoute(route=[start], total_distance_km=0, leg_distances_km=[])

    route = [start]
    legs: list[int] = []
    remaining: list[Location] = []
    for stop in stops:
        if not any(stop.same_place(kept) for kept in remaining):
            remaining.append(stop)
    current = start
    total_distance = 0

    while remaining:
        nearest_index = 0
        nearest_distance = distance_km(current, remaining[0])
        for index in range(1, len(remaining)):
            candidate = distance_km(current, remaining[index])
            if candidate < nearest_distance:
                nearest_index = index
                nearest_distance = candidate

        current = remaining.pop(nearest_index)
        route.append(current)
        legs.append(nearest_distance)
        total_distance += nearest_distance

    return OptimizedRoute(route=route, total_distance_km=total_distance, leg_distances_km=legs)
