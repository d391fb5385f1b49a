"""Free-text matching of faith group records."""

from typing import Iterable, Optional

from faithfinder.models import FaithGroup


def _searchable_fields(record: FaithGroup) -> Iterable[Optional[str]]:
    return (record.religion, record.denomination, record.name, record.description)


def matches(record: FaithGroup, query_text: Optional[str]) -> bool:
    """Case-insensitive substring match against religion, denomination, name and description."""
    if not query_text:
        return True

    needle = query_text.lower()
    return any(isinstance(value, str) and needle in value.lower() for value in _searchable_fields(record))
