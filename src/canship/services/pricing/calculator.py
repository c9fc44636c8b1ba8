"""Shipping cost calculation against the static rate table."""

from __future__ import annotations

import math
from typing import Optional

from ...models.domain import Location
from ..geospatial import distance_km
from .models import ShippingQuote
from .rates import ShippingTier, get_rate

MISSING_FIELDS_MESSAGE = "Please select valid Canadian locations and fill in all fields"
SAME_LOCATION_MESSAGE = "Origin and destination cannot be the same"


class ShippingValidationError(ValueError):
    """Raised when a quote or route request cannot be priced."""


def resolve_tier(tier: ShippingTier | str) -> ShippingTier:
    if isinstance(tier, ShippingTier):
        return tier
    try:
        return ShippingTier(str(tier).strip().lower())
    except ValueError as exc:
        raise ShippingValidationError(f"Unknown shipping tier '{tier}'.") from exc


def validate_quote_request(
    origin: Optional[Location],
    destination: Optional[Location],
    weight: Optional[float],
    tier: ShippingTier | str | None,
) -> ShippingTier:
    """Check the inputs of a single-leg quote and return the resolved tier.

    Missing selections, a missing tier and a non-positive weight all share the
    same message, mirroring the form the estimator was built around.
    """
    if origin is None or destination is None or tier is None or tier == "":
        raise ShippingValidationError(MISSING_FIELDS_MESSAGE)
    if weight is None or not math.isfinite(weight) or weight <= 0:
        raise ShippingValidationError(MISSING_FIELDS_MESSAGE)
    resolved = resolve_tier(tier)
    if origin.same_place(destination):
        raise ShippingValidationError(SAME_LOCATION_MESSAGE)
    return resolved


def calculate_shipping_cost(
    origin: Location,
    destination: Location,
    weight: float,
    tier: ShippingTier | str,
) -> ShippingQuote:
    """Price a shipment: base + distance * per_km + weight * per_weight.

    The distance is the rounded great-circle distance; delivery days come
    straight from the tier and do not depend on distance.
    """
    rate = get_rate(resolve_tier(tier))
    distance = distance_km(origin, destination)
    cost = rate.base_cost + distance * rate.per_km + weight * rate.per_weight
    return ShippingQuote(
        tier=rate.tier,
        cost=cost,
        distance_km=distance,
        delivery_days=rate.delivery_days,
    )
