"""Shipping quote request/response schemas."""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, Field

from ..services.outputs.formatter import quote_display
from ..services.pricing.models import ShippingQuote
from ..services.pricing.rates import TierRate
from .geocoding import LocationModel


class TierRateModel(BaseModel):
    tier: str
    base_cost: float
    per_km: float
    per_weight: float
    delivery_days: Tuple[int, int]

    @classmethod
    def from_domain(cls, rate: TierRate) -> "TierRateModel":
        return cls(
            tier=rate.tier.value,
            base_cost=rate.base_cost,
            per_km=rate.per_km,
            per_weight=rate.per_weight,
            delivery_days=rate.delivery_days,
        )


class QuoteRequest(BaseModel):
    origin: LocationModel
    destination: LocationModel
    weight: Optional[float] = Field(default=None, description="Shipment weight; must be positive.")
    tier: Optional[str] = Field(default="standard", description="standard, express or overnight")


class QuoteDisplayModel(BaseModel):
    cost: str
    delivery_time: str
    distance: str


class QuoteResponse(BaseModel):
    tier: str
    cost: float
    distance_km: int
    delivery_days: Tuple[int, int]
    display: QuoteDisplayModel

    @classmethod
    def from_domain(cls, quote: ShippingQuote) -> "QuoteResponse":
        return cls(
            tier=quote.tier.value,
            cost=quote.cost,
            distance_km=quote.distance_km,
            delivery_days=quote.delivery_days,
            display=QuoteDisplayModel(**quote_display(quote)),
        )
