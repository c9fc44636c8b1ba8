"""Static shipping rate table (CAD)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ShippingTier(str, Enum):
    STANDARD = "standard"
    EXPRESS = "express"
    OVERNIGHT = "overnight"


@dataclass(frozen=True, slots=True)
class TierRate:
    """Pricing record for a single shipping tier."""

    tier: ShippingTier
    base_cost: float
    per_km: float
    per_weight: float
    delivery_days: tuple[int, int]


RATE_TABLE: Mapping[ShippingTier, TierRate] = MappingProxyType(
    {
        ShippingTier.STANDARD: TierRate(ShippingTier.STANDARD, 18.0, 0.65, 0.15, (3, 5)),
        ShippingTier.EXPRESS: TierRate(ShippingTier.EXPRESS, 42.0, 0.95, 0.22, (1, 2)),
        ShippingTier.OVERNIGHT: TierRate(ShippingTier.OVERNIGHT, 85.0, 1.45, 0.40, (1, 1)),
    }
)


def get_rate(tier: ShippingTier) -> TierRate:
    return RATE_TABLE[tier]
