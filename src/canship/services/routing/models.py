"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ...models.domain import Location
from ..pricing.models import ShippingQuote
from ..pricing.rates import ShippingTier


@dataclass(slots=True)
class OptimizedRoute:
    route: List[Location]
    total_distance_km: int
    leg_distances_km: List[int] = field(default_factory=list)


@dataclass(slots=True)
class RouteLeg:
    sequence: int
    origin: Location
    destination: Location
    quote: ShippingQuote


@dataclass(slots=True)
class RoutePlan:
    route: List[Location]
    legs: List[RouteLeg]
    total_distance_km: int
    total_cost: float
    max_delivery_days: int
    tier: ShippingTier
    weight: float
