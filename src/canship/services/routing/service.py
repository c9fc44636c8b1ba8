"""Route planning: ordering plus leg-by-leg pricing."""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from ...config import settings
from ...models.domain import Location
from ..pricing.calculator import ShippingValidationError, calculate_shipping_cost, resolve_tier
from ..pricing.rates import ShippingTier
from .models import RouteLeg, RoutePlan
from .optimizer import optimize_route

MISSING_START_MESSAGE = "Please select a valid Canadian start location"
MISSING_STOPS_MESSAGE = "Please add at least one stop"

logger = logging.getLogger(__name__)


def plan_route(
    start: Optional[Location],
    stops: Sequence[Location],
    *,
    weight: float | None = None,
    tier: ShippingTier | str | None = None,
) -> RoutePlan:
    """Optimize the visiting order and price every consecutive leg.

    Leg costs are summed; the overall delivery estimate is the largest
    per-leg upper bound, not the sum.
    """
    if start is None:
        raise ShippingValidationError(MISSING_START_MESSAGE)
    if not stops:
        raise ShippingValidationError(MISSING_STOPS_MESSAGE)

    leg_weight = weight if weight is not None else settings.route_leg_weight
    if not math.isfinite(leg_weight) or leg_weight <= 0:
        raise ShippingValidationError("Route weight must be a positive number.")
    leg_tier = resolve_tier(tier if tier is not None else settings.route_leg_tier)

    optimized = optimize_route(start, stops)

    legs: list[RouteLeg] = []
    total_cost = 0.0
    max_days = 0
    for sequence, (origin, destination) in enumerate(zip(optimized.route, optimized.route[1:]), start=1):
        quote = calculate_shipping_cost(origin, destination, leg_weight, leg_tier)
        legs.append(RouteLeg(sequence=sequence, origin=origin, destination=destination, quote=quote))
        total_cost += quote.cost
        max_days = max(max_days, quote.delivery_days[1])

    logger.debug(
        f"Planned route from '{start.display_name}' through {len(optimized.route) - 1} stops: "
        f"{optimized.total_distance_km} km, {total_cost:.2f} CAD"
    )

    return RoutePlan(
        route=optimized.route,
        legs=legs,
        total_distance_km=optimized.total_distance_km,
        total_cost=total_cost,
        max_delivery_days=max_days,
        tier=leg_tier,
        weight=leg_weight,
    )
