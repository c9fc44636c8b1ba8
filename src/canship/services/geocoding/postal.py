"""Canadian postal code detection and search query building."""

from __future__ import annotations

import re

from ...config import settings

POSTAL_CODE_PATTERN = re.compile(r"[A-Za-z]\d[A-Za-z][ -]?\d[A-Za-z]\d", re.ASCII)
_WHITESPACE = re.compile(r"\s+")


def is_postal_code(text: str) -> bool:
    """Return True for letter-digit-letter, optional separator, digit-letter-digit."""
    return POSTAL_CODE_PATTERN.fullmatch(_WHITESPACE.sub("", text)) is not None


def normalize_postal_code(text: str) -> str:
    """Canonical upper-case ``A1A 1A1`` form of a postal code."""
    compact = re.sub(r"[\s-]", "", text).upper()
    return f"{compact[:3]} {compact[3:]}"


def build_search_query(text: str, country_name: str | None = None) -> str:
    """Qualify free text with the country name before it is sent to the geocoder."""
    country = country_name or settings.geocoder_country_name
    query = text.strip()
    if is_postal_code(query):
        query = normalize_postal_code(query)
    return f"{query}, {country}"
