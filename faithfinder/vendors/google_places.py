"""Client utilities for the Google Places API."""

import logging
from typing import Any, Dict, Optional, Tuple

import requests

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
_BASE_URL = "https://maps.googleapis.com/maps/api/place"

TEXT_SEARCH_SUFFIX = "church mosque synagogue temple place of worship"
TEXT_SEARCH_RADIUS_METERS = 50000
DETAIL_FIELDS = (
    "place_id,name,formatted_address,geometry,formatted_phone_number,website,rating,"
    "user_ratings_total,business_status,opening_hours,types"
)


class GooglePlacesError(RuntimeError):
    """Raised when the Places API returns a non-successful response."""


def _get(endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
    response = _SESSION.get(f"{_BASE_URL}/{endpoint}/json", params=params, timeout=10)
    response.raise_for_status()
    payload = response.json()
    status = payload.get("status")
    if status not in {"OK", "ZERO_RESULTS"}:
        logger.error("%s failed: status=%s, error_message=%s", endpoint, status, payload.get("error_message"))
        raise GooglePlacesError(payload.get("error_message") or status)
    return payload


def _format_location(location: Tuple[float, float]) -> str:
    return f"{location[0]},{location[1]}"


def nearby_search(
    location: Tuple[float, float],
    radius: int,
    api_key: str,
    pagetoken: Optional[str] = None,
) -> Dict[str, Any]:
    """Places of worship within ``radius`` meters of ``location`` (lat, lng)."""
    params = {
        "location": _format_location(location),
        "radius": radius,
        "type": "place_of_worship",
        "key": api_key,
    }
    if pagetoken and pagetoken.strip():
        params["pagetoken"] = pagetoken
    return _get("nearbysearch", params)


def text_search(
    query: str,
    api_key: str,
    location: Optional[Tuple[float, float]] = None,
    pagetoken: Optional[str] = None,
) -> Dict[str, Any]:
    params = {"query": f"{query} {TEXT_SEARCH_SUFFIX}", "key": api_key}
    if pagetoken and pagetoken.strip():
        params["pagetoken"] = pagetoken
    if location:
        params["location"] = _format_location(location)
        params["radius"] = TEXT_SEARCH_RADIUS_METERS
    return _get("textsearch", params)


def place_details(place_id: str, api_key: str) -> Dict[str, Any]:
    params = {"place_id": place_id, "key": api_key, "fields": DETAIL_FIELDS}
    payload = _get("details", params)
    return payload.get("result", {})
