"""Shipping quote endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, HTTPException, status

from ...schemas.shipping import QuoteRequest, QuoteResponse, TierRateModel
from ...services.pricing.calculator import calculate_shipping_cost, validate_quote_request
from ...services.pricing.rates import RATE_TABLE

router = APIRouter(tags=["quotes"])


@router.get("/rates", response_model=List[TierRateModel], status_code=status.HTTP_200_OK)
def list_rates() -> List[TierRateModel]:
    return [TierRateModel.from_domain(rate) for rate in RATE_TABLE.values()]


@router.post("/quotes", response_model=QuoteResponse, status_code=status.HTTP_200_OK)
def create_quote(payload: QuoteRequest) -> QuoteResponse:
    try:
        origin = payload.origin.to_domain()
        destination = payload.destination.to_domain()
        tier = validate_quote_request(origin, destination, payload.weight, payload.tier)
        quote = calculate_shipping_cost(origin, destination, payload.weight, tier)
        return QuoteResponse.from_domain(quote)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error calculating shipping quote: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to calculate shipping quote: {str(exc)}"
        ) from exc
