"""Route group exports."""

from . import geocoding, health, quotes, routes, sessions

__all__ = ["geocoding", "health", "quotes", "routes", "sessions"]
