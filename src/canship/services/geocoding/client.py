"""HTTP client for the Nominatim geocoding service."""

from __future__ import annotations

import logging
import math
from typing import Any

import httpx

from ...config import settings
from ...models.domain import Location
from .postal import build_search_query

logger = logging.getLogger(__name__)


def _coerce_coordinate(value: Any) -> float | None:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def format_display_name(item: dict, address: dict) -> str:
    """Short label for a search result.

    Prefers "City, Province", falls back to "Postcode, Province" and finally
    to the provider's full display string.
    """
    city = address.get("city") or address.get("town") or address.get("village")
    if city:
        province = address.get("state") or address.get("province")
        return f"{city}, {province}" if province else city
    postcode = address.get("postcode")
    if postcode:
        return f"{postcode}, {address.get('state') or 'Canada'}"
    return item.get("display_name") or ""


def parse_search_results(payload: Any) -> list[Location]:
    """Convert a Nominatim ``/search`` JSON payload into locations.

    Entries without usable coordinates or without a place id are dropped.
    """
    if not isinstance(payload, list):
        raise ValueError("Geocoding response is not a list of results.")

    locations: list[Location] = []
    for item in payload:
        if not isinstance(item, dict):
            continue
        lat = _coerce_coordinate(item.get("lat"))
        lng = _coerce_coordinate(item.get("lon"))
        # zero coordinates are treated as missing
        if not lat or not lng:
            continue
        if not (-90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0):
            continue
        place_id = item.get("place_id")
        if place_id is None:
            logger.debug(f"Skipping geocoding result without place_id: {item.get('display_name')}")
            continue
        address = item.get("address") or {}
        locations.append(
            Location(
                id=str(place_id),
                display_name=format_display_name(item, address),
                full_address=item.get("display_name") or "",
                lat=lat,
                lng=lng,
                postal_code=address.get("postcode"),
                place_type=item.get("type"),
            )
        )
    return locations


class GeocodingClient:
    """Looks up Canadian places and memoizes results per raw query string."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        user_agent: str | None = None,
        timeout: float | None = None,
        limit: int | None = None,
        country_code: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.geocoder_base_url).rstrip("/")
        if not self.base_url:
            raise ValueError("Geocoder base URL is not configured.")
        self.user_agent = user_agent or settings.geocoder_user_agent
        self.timeout = timeout if timeout is not None else settings.geocoder_timeout_seconds
        self.limit = limit if limit is not None else settings.geocoder_result_limit
        self.country_code = country_code or settings.geocoder_country_code
        self._transport = transport
        self._cache: dict[str, list[Location]] = {}

    def _get_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout, connect=5.0),
            headers={"User-Agent": self.user_agent, "Accept": "application/json"},
            transport=self._transport,
        )

    def search_params(self, query: str) -> dict[str, str | int]:
        return {
            "format": "json",
            "q": build_search_query(query),
            "countrycodes": self.country_code,
            "limit": self.limit,
            "addressdetails": 1,
        }

    def cached(self, query: str) -> list[Location] | None:
        hit = self._cache.get(query)
        return list(hit) if hit is not None else None

    def clear_cache(self) -> None:
        self._cache.clear()

    async def search(self, query: str) -> list[Location]:
        """Geocode free text. Network or parse failures yield an empty list."""
        hit = self.cached(query)
        if hit is not None:
            logger.debug(f"Geocoding cache hit for '{query}' ({len(hit)} results)")
            return hit

        params = self.search_params(query)
        try:
            async with self._get_client() as client:
                response = await client.get("/search", params=params)
                response.raise_for_status()
                payload = response.json()
            locations = parse_search_results(payload)
        except httpx.HTTPError as exc:
            logger.error(f"Geocoding request failed for '{query}': {exc}")
            return []
        except ValueError as exc:
            logger.error(f"Geocoding response for '{query}' could not be parsed: {exc}")
            return []

        logger.debug(f"Geocoded '{query}' -> {len(locations)} results")
        self._cache[query] = locations
        return list(locations)

    async def check_health(self) -> bool:
        """Probe the service ``/status`` endpoint."""
        try:
            async with self._get_client() as client:
                response = await client.get("/status", params={"format": "json"})
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError:
            return False
        except ValueError:
            return False
        return isinstance(data, dict) and data.get("status") == 0
