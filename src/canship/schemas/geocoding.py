"""Location and geocoding schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.domain import Location


class LocationModel(BaseModel):
    id: str = Field(..., description="Provider place identifier")
    display_name: str
    full_address: str = ""
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    postal_code: Optional[str] = None
    place_type: Optional[str] = None

    @classmethod
    def from_domain(cls, location: Location) -> "LocationModel":
        return cls(
            id=location.id,
            display_name=location.display_name,
            full_address=location.full_address,
            lat=location.lat,
            lng=location.lng,
            postal_code=location.postal_code,
            place_type=location.place_type,
        )

    def to_domain(self) -> Location:
        return Location(
            id=self.id,
            display_name=self.display_name,
            full_address=self.full_address,
            lat=self.lat,
            lng=self.lng,
            postal_code=self.postal_code,
            place_type=self.place_type,
        )


class GeocodeResponse(BaseModel):
    query: str
    is_postal_code: bool
    results: List[LocationModel]
