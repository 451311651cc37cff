from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MenuItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str | None = None
    avail_time: str | None = Field(
        default=None, description="Availability tag, e.g. breakfast / lunch / dinner"
    )
    rating: float | None = None
    vendor_id: str
    price: float | None = None


class Vendor(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    address: str | None = None
    phone: str | None = None
    category: str | None = None


class GeoPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

    @classmethod
    def from_pair(cls, latitude: float | None, longitude: float | None) -> GeoPoint | None:
        """Build a point only when both coordinates are present."""
        if latitude is None or longitude is None:
            return None
        return cls(latitude=latitude, longitude=longitude)


class RankedCandidate(BaseModel):
    id: str
    relevance: float

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        # Models often echo numeric ids back as numbers
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("relevance")
    @classmethod
    def _clamp_relevance(cls, value: float) -> float:
        return max(0.0, min(1.0, value))


class EnrichedItem(MenuItem):
    vendor_name: str
    distance: float | None = Field(default=None, description="Kilometres from the user")


class NearbyVendor(BaseModel):
    id: str
    name: str
    address: str
    phone: str
    category: str
    latitude: float
    longitude: float
    distance: float


# ── API schemas ──────────────────────────────────────────────────────────


class LocationIn(BaseModel):
    latitude: float | None = None
    longitude: float | None = None

    def to_geo_point(self) -> GeoPoint | None:
        return GeoPoint.from_pair(self.latitude, self.longitude)


class ChatRequest(BaseModel):
    message: str | None = Field(default=None, max_length=1000)
    meal_type: str | None = Field(default=None, max_length=50)
    user_location: LocationIn | None = None


class ChatResponse(BaseModel):
    recommendations: list[EnrichedItem]
