"""Domain models for geocoded points and locations."""

from dataclasses import dataclass
from typing import Optional


def _check_coordinates(lat: float, lng: float) -> None:
    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"Latitude {lat} is outside [-90, 90].")
    if not -180.0 <= lng <= 180.0:
        raise ValueError(f"Longitude {lng} is outside [-180, 180].")


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lng: float

    def __post_init__(self) -> None:
        _check_coordinates(self.lat, self.lng)


@dataclass(frozen=True, slots=True)
class Location:
    """A geocoded place. Identity is the provider's place identifier."""

    id: str
    display_name: str
    full_address: str
    lat: float
    lng: float
    postal_code: Optional[str] = None
    place_type: Optional[str] = None

    def __post_init__(self) -> None:
        _check_coordinates(self.lat, self.lng)

    def same_place(self, other: "Location") -> bool:
        return str(self.id) == str(other.id)
