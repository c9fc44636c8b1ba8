"""Pricing services."""

from .calculator import (
    ShippingValidationError,
    calculate_shipping_cost,
    resolve_tier,
    validate_quote_request,
)
from .models import ShippingQuote
from .rates import RATE_TABLE, ShippingTier, TierRate, get_rate

__all__ = [
    "RATE_TABLE",
    "ShippingQuote",
    "ShippingTier",
    "ShippingValidationError",
    "TierRate",
    "calculate_shipping_cost",
    "get_rate",
    "resolve_tier",
    "validate_quote_request",
]
