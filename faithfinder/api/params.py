"""Validation of HTTP inputs into typed values for the search engine and repository."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from faithfinder.models import REQUIRED_FIELDS, FaithGroup, SearchQuery, safe_float

# Fields a client may set; rating and review count belong to the review subsystem.
WRITABLE_FIELDS = tuple(
    name for name in FaithGroup.field_names() if name not in {"id", "rating", "review_count"}
)
_OPTIONAL_TEXT_FIELDS = tuple(name for name in WRITABLE_FIELDS if name not in REQUIRED_FIELDS)
_IS_OPEN_VALUES = {"open", "closed", "unknown"}
_COORDINATE_FIELDS = ("latitude", "longitude")


class ValidationError(ValueError):
    """Raised when request input fails validation; carries per-field errors."""

    def __init__(self, errors: List[Dict[str, str]]) -> None:
        super().__init__("; ".join(f"{e['field']}: {e['message']}" for e in errors))
        self.errors = errors


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_search_params(args: Mapping[str, Any], default_radius: float = 10.0) -> SearchQuery:
    """Build a SearchQuery from query-string arguments."""
    errors: List[Dict[str, str]] = []

    religion = args.get("religion")
    religion = religion.strip() if isinstance(religion, str) and religion.strip() else None
    location = args.get("location") or None

    numbers: Dict[str, Optional[float]] = {}
    for name in ("latitude", "longitude", "radius"):
        raw = args.get(name)
        if _blank(raw):
            numbers[name] = None
            continue
        value = safe_float(raw)
        if value is None:
            errors.append({"field": name, "message": "must be numeric"})
        numbers[name] = value

    latitude, longitude = numbers["latitude"], numbers["longitude"]
    if latitude is not None and not -90 <= latitude <= 90:
        errors.append({"field": "latitude", "message": "must be between -90 and 90"})
    if longitude is not None and not -180 <= longitude <= 180:
        errors.append({"field": "longitude", "message": "must be between -180 and 180"})

    lat_given = not _blank(args.get("latitude"))
    lon_given = not _blank(args.get("longitude"))
    if lat_given != lon_given:
        missing = "longitude" if lat_given else "latitude"
        errors.append({"field": missing, "message": "latitude and longitude must be supplied together"})

    radius = numbers["radius"]
    if radius is not None and radius < 0:
        errors.append({"field": "radius", "message": "must not be negative"})

    if errors:
        raise ValidationError(errors)

    coordinates = (latitude, longitude) if latitude is not None and longitude is not None else None
    return SearchQuery(
        religion_text=religion,
        coordinates=coordinates,
        radius=radius if radius is not None else default_radius,
        location=location,
    )


def parse_faith_group_payload(payload: Mapping[str, Any], *, partial: bool = False) -> Dict[str, Any]:
    """Validate a create/update body (camelCase or snake_case keys) into repository fields."""
    if not isinstance(payload, Mapping):
        raise ValidationError([{"field": "body", "message": "must be a JSON object"}])

    data = {key: value for key, value in FaithGroup.from_wire(dict(payload)).items() if key in WRITABLE_FIELDS}
    errors: List[Dict[str, str]] = []

    for name in REQUIRED_FIELDS:
        if name in data:
            if _blank(data[name]):
                errors.append({"field": name, "message": "must not be empty"})
            elif name not in _COORDINATE_FIELDS and not isinstance(data[name], str):
                errors.append({"field": name, "message": "must be a string"})
        elif not partial:
            errors.append({"field": name, "message": "is required"})

    for name in _COORDINATE_FIELDS:
        if name in data and not _blank(data[name]):
            value = data[name]
            # bool is an int subclass; JSON true/false is never a coordinate
            if isinstance(value, bool) or not isinstance(value, (str, int, float)) or safe_float(value) is None:
                errors.append({"field": name, "message": "must be a decimal number"})
            else:
                data[name] = str(data[name]).strip()

    for name in _OPTIONAL_TEXT_FIELDS:
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            errors.append({"field": name, "message": "must be a string"})
        elif isinstance(value, str) and not value.strip():
            data[name] = None

    if data.get("is_open") is not None and data["is_open"] not in _IS_OPEN_VALUES:
        errors.append({"field": "is_open", "message": "must be one of open, closed, unknown"})

    if errors:
        raise ValidationError(errors)

    if data.get("is_open") is None:
        if partial:
            data.pop("is_open", None)
        else:
            data["is_open"] = "unknown"
    return data
