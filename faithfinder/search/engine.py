"""Search ranking and geospatial filtering over faith group records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from faithfinder.models import FaithGroup, SearchQuery, SearchResult
from faithfinder.search.distance import haversine_miles
from faithfinder.search.matcher import matches

if TYPE_CHECKING:
    from faithfinder.storage.repository import Repository

logger = logging.getLogger(__name__)


def _within_radius(
    records: Sequence[FaithGroup],
    origin: Tuple[float, float],
    radius: float,
) -> List[Tuple[FaithGroup, float]]:
    origin_lat, origin_lon = origin
    kept: List[Tuple[FaithGroup, float]] = []
    for record in records:
        coords = record.coordinates()
        if coords is None:
            logger.debug("Excluding %s from radius search: unparseable coordinates", record.id)
            continue
        distance = haversine_miles(origin_lat, origin_lon, coords[0], coords[1])
        if distance <= radius:
            kept.append((record, distance))
    return kept


def search(query: SearchQuery, candidates: Sequence[FaithGroup]) -> List[SearchResult]:
    """Filter candidates by text and radius, annotating and ordering by distance.

    With coordinates, every result carries its distance in miles and results are
    sorted ascending (stable, so ties keep candidate order). Without coordinates,
    distance stays unset and candidate order is preserved. The full set is
    returned; slicing is left to the caller.
    """
    records = list(candidates)

    if query.religion_text:
        records = [record for record in records if matches(record, query.religion_text)]

    if query.coordinates is None:
        return [SearchResult(record=record) for record in records]

    annotated = _within_radius(records, query.coordinates, query.radius)
    annotated.sort(key=lambda pair: pair[1])
    return [SearchResult(record=record, distance=distance) for record, distance in annotated]


class SearchEngine:
    """Runs searches against a snapshot taken from an injected repository."""

    def __init__(self, repository: "Repository") -> None:
        self._repository = repository

    def search(self, query: SearchQuery, candidates: Optional[Sequence[FaithGroup]] = None) -> List[SearchResult]:
        if candidates is None:
            candidates = self._repository.get_all()
        results = search(query, candidates)
        logger.info(
            "Search religion=%r coordinates=%s radius=%s matched %d of %d candidates",
            query.religion_text,
            query.coordinates,
            query.radius,
            len(results),
            len(candidates),
        )
        return results
