"""Core data models shared by the search engine, storage and HTTP layers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple

_WIRE_NAMES = {
    "zip_code": "zipCode",
    "long_description": "longDescription",
    "review_count": "reviewCount",
    "service_times": "serviceTimes",
    "is_open": "isOpen",
    "google_place_id": "googlePlaceId",
}

REQUIRED_FIELDS = (
    "name",
    "religion",
    "description",
    "address",
    "city",
    "state",
    "zip_code",
    "latitude",
    "longitude",
)


def safe_float(value: Any) -> Optional[float]:
    try:
        if value is None:
            return None
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


@dataclass(slots=True)
class FaithGroup:
    """A faith community listing as stored by the repository."""

    id: str
    name: str
    religion: str
    description: str
    latitude: str
    longitude: str
    denomination: Optional[str] = None
    long_description: Optional[str] = None
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    rating: str = "0.0"
    review_count: int = 0
    service_times: Optional[str] = None
    is_open: str = "unknown"
    google_place_id: Optional[str] = None

    def coordinates(self) -> Optional[Tuple[float, float]]:
        """Parse the stored decimal strings, or None if either is unusable."""
        lat = safe_float(self.latitude)
        lon = safe_float(self.longitude)
        if lat is None or lon is None:
            return None
        return lat, lon

    def to_dict(self) -> Dict[str, Any]:
        return {_WIRE_NAMES.get(f.name, f.name): getattr(self, f.name) for f in fields(self)}

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_wire(cls, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Map camelCase JSON keys onto attribute names, dropping unknown keys."""
        reverse = {wire: attr for attr, wire in _WIRE_NAMES.items()}
        known = set(cls.field_names())
        data: Dict[str, Any] = {}
        for key, value in payload.items():
            attr = reverse.get(key, key)
            if attr in known and attr != "id":
                data[attr] = value
        return data


@dataclass(slots=True, frozen=True)
class SearchQuery:
    religion_text: Optional[str] = None
    coordinates: Optional[Tuple[float, float]] = None
    radius: float = 10.0
    location: Optional[str] = None


@dataclass(slots=True)
class SearchResult:
    record: FaithGroup
    distance: Optional[float] = field(default=None)

    def to_dict(self) -> Dict[str, Any]:
        entry = self.record.to_dict()
        if self.distance is not None:
            entry["distance"] = self.distance
        return entry
