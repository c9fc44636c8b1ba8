"""Geocoding services."""

from .client import GeocodingClient, format_display_name, parse_search_results
from .postal import build_search_query, is_postal_code, normalize_postal_code

__all__ = [
    "GeocodingClient",
    "build_search_query",
    "format_display_name",
    "is_postal_code",
    "normalize_postal_code",
    "parse_search_results",
]
