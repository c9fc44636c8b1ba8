"""Shared service instances for request handlers."""

from functools import lru_cache

from ..services.geocoding.client import GeocodingClient
from ..services.planner.store import SessionStore


@lru_cache()
def get_geocoding_client() -> GeocodingClient:
    """Process-wide geocoder so the lookup cache is shared by every request."""
    return GeocodingClient()


@lru_cache()
def get_session_store() -> SessionStore:
    return SessionStore(get_geocoding_client())
