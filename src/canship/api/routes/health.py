"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...services.geocoding.client import GeocodingClient
from ..dependencies import get_geocoding_client

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/geocoder", status_code=status.HTTP_200_OK)
async def health_geocoder(geocoder: GeocodingClient = Depends(get_geocoding_client)) -> dict:
    """Check that the geocoding service answers its status probe."""
    healthy = await geocoder.check_health()
    return {"service": "geocoder", "base_url": geocoder.base_url, "healthy": healthy}
