"""Geocoding endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from ...schemas.geocoding import GeocodeResponse, LocationModel
from ...services.geocoding.client import GeocodingClient
from ...services.geocoding.postal import is_postal_code
from ..dependencies import get_geocoding_client

router = APIRouter(prefix="/geocode", tags=["geocoding"])


@router.get("", response_model=GeocodeResponse, status_code=status.HTTP_200_OK)
async def geocode(
    q: str = Query(..., min_length=1, description="Place name or postal code"),
    geocoder: GeocodingClient = Depends(get_geocoding_client),
) -> GeocodeResponse:
    locations = await geocoder.search(q)
    return GeocodeResponse(
        query=q,
        is_postal_code=is_postal_code(q),
        results=[LocationModel.from_domain(location) for location in locations],
    )
