"""Pricing domain models."""

from __future__ import annotations

from dataclasses import dataclass

from .rates import ShippingTier


@dataclass(slots=True)
class ShippingQuote:
    tier: ShippingTier
    cost: float
    distance_km: int
    delivery_days: tuple[int, int]
