"""Utilities for transforming Google Places responses into faith group records."""

import json
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

# Checked in order; the first type present on the place wins.
_RELIGION_BY_TYPE = (
    ("church", "Christianity", "Christian"),
    ("mosque", "Islam", "Islamic"),
    ("synagogue", "Judaism", "Jewish"),
    ("hindu_temple", "Hinduism", "Hindu"),
    ("place_of_worship", "Christianity", "Non-denominational"),
)

_DEFAULT_SERVICE_TIMES = {
    "Christianity": [
        {"day": "Sunday Morning", "time": "10:00 AM"},
        {"day": "Sunday Evening", "time": "6:00 PM"},
    ],
    "Islam": [
        {"day": "Friday Prayer", "time": "12:30 PM"},
        {"day": "Daily Prayers", "time": "5 times daily"},
    ],
    "Judaism": [
        {"day": "Friday Evening", "time": "6:00 PM"},
        {"day": "Saturday Morning", "time": "10:00 AM"},
    ],
}


def _coordinate(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def classify_religion(types: Iterable[str]) -> Tuple[str, str]:
    type_set = set(types or [])
    for place_type, religion, denomination in _RELIGION_BY_TYPE:
        if place_type in type_set:
            return religion, denomination
    return "Other", ""


def parse_address(address: str) -> Dict[str, str]:
    """Split a "street, city, ST 12345, country" style address."""
    parts = [part.strip() for part in (address or "").split(",") if part.strip()]
    parsed = {"address": "", "city": "", "state": "", "zip_code": ""}
    if len(parts) >= 4 and not any(ch.isdigit() for ch in parts[-1]):
        parts = parts[:-1]  # trailing country
    if len(parts) < 3:
        parsed["address"] = ", ".join(parts)
        return parsed

    parsed["address"] = parts[0]
    parsed["city"] = parts[-2]
    state_zip = parts[-1].split()
    parsed["state"] = state_zip[0] if state_zip else ""
    parsed["zip_code"] = state_zip[1] if len(state_zip) > 1 else ""
    return parsed


def build_service_times(religion: str, details: Optional[Dict[str, Any]]) -> List[Dict[str, str]]:
    weekday_text = ((details or {}).get("opening_hours") or {}).get("weekday_text")
    if weekday_text:
        entries = []
        for line in weekday_text:
            day, _, time = line.partition(": ")
            entries.append({"day": day, "time": time or "Closed"})
        return entries
    return list(_DEFAULT_SERVICE_TIMES.get(religion, []))


def to_faith_group(place: Dict[str, Any], details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Build repository fields for a place, preferring details over the search hit."""
    data = details or place
    religion, denomination = classify_religion(data.get("types", []))

    location = (data.get("geometry") or {}).get("location") or {}
    address = parse_address(data.get("formatted_address") or place.get("vicinity") or "")
    city, state = address["city"], address["state"]
    rating = data.get("rating")
    review_count = data.get("user_ratings_total") or 0

    description = f"{denomination} place of worship located in {city}, {state}."
    if rating:
        description = f"{description} Highly rated with {rating} stars."

    long_description = f"{data.get('name')} is a {denomination.lower()} place of worship serving the {city}, {state} community."
    if details and details.get("user_ratings_total"):
        long_description = (
            f"{long_description} With {details['user_ratings_total']} reviews and a {details.get('rating')} star rating, "
            "this location welcomes visitors and provides spiritual services to the local community."
        )

    is_open = data.get("business_status") == "OPERATIONAL" and not data.get("permanently_closed")

    return {
        "google_place_id": data.get("place_id"),
        "name": data.get("name"),
        "religion": religion,
        "denomination": denomination or None,
        "description": description.strip(),
        "long_description": long_description,
        **address,
        "latitude": _coordinate(location.get("lat")),
        "longitude": _coordinate(location.get("lng")),
        "phone": (details or {}).get("formatted_phone_number"),
        "email": None,
        "website": (details or {}).get("website"),
        "service_times": json.dumps(build_service_times(religion, details)),
        "rating": f"{float(rating):.1f}" if rating else "0.0",
        "review_count": int(review_count),
        "is_open": "open" if is_open else "closed",
    }
