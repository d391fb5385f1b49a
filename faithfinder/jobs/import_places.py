"""CLI job to fetch places of worship from Google Places and store them as faith groups."""

import argparse
import logging
import time
from typing import Optional, Tuple

from faithfinder.core.config import get_settings
from faithfinder.core.db import close_pool
from faithfinder.etl.transform import to_faith_group
from faithfinder.storage.repository import Repository, build_repository
from faithfinder.vendors import google_places

logger = logging.getLogger(__name__)


def _fetch_page(
    *,
    location: Tuple[float, float],
    radius: int,
    query: Optional[str],
    api_key: str,
    page_token: Optional[str],
) -> dict:
    if query:
        return google_places.text_search(query=query, api_key=api_key, location=location, pagetoken=page_token)
    return google_places.nearby_search(location=location, radius=radius, api_key=api_key, pagetoken=page_token)


def run_import_job(
    *,
    repository: Repository,
    latitude: float,
    longitude: float,
    radius: Optional[int] = None,
    query: Optional[str] = None,
    max_pages: Optional[int] = None,
) -> int:
    """Import places around a point; returns how many records were stored."""
    settings = get_settings()
    api_key = settings.google_api_key
    if not api_key:
        raise RuntimeError("GOOGLE_API_KEY is required")

    radius = radius or settings.import_radius_meters
    max_pages = max_pages or settings.import_max_pages
    location = (latitude, longitude)
    query = (query or "").strip() or None

    logger.info("Running Places import location=%s radius=%s query=%s", location, radius, query)

    page_token = None
    processed_pages = 0
    stored = 0

    while processed_pages < max_pages:
        response = _fetch_page(location=location, radius=radius, query=query, api_key=api_key, page_token=page_token)
        results = response.get("results", [])
        logger.info("Fetched %d results on page %d", len(results), processed_pages + 1)

        for place in results:
            place_id = place.get("place_id")
            if not place_id:
                logger.debug("Skipping result without place_id: %s", place)
                continue

            try:
                details = google_places.place_details(place_id=place_id, api_key=api_key)
            except Exception as exc:  # noqa: BLE001
                logger.warning("Failed to fetch details for %s: %s", place_id, exc)
                details = None

            data = to_faith_group(place, details or None)
            if not data.get("name") or data["latitude"] is None or data["longitude"] is None:
                logger.debug("Skipping %s: missing name or geometry", place_id)
                continue

            try:
                repository.upsert_by_place_id(data)
            except Exception as exc:  # noqa: BLE001
                logger.error("Failed to store %s: %s", place_id, exc)
                continue
            stored += 1

            time.sleep(0.15)

        processed_pages += 1
        page_token = response.get("next_page_token")
        if not page_token:
            break
        # Google needs a moment before a next_page_token becomes valid.
        time.sleep(2.5)

    logger.info("Completed import: pages_processed=%d stored=%d", processed_pages, stored)
    return stored


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Import places of worship from Google Places")
    parser.add_argument("--lat", dest="latitude", type=float, required=True, help="Search centre latitude")
    parser.add_argument("--lng", dest="longitude", type=float, required=True, help="Search centre longitude")
    parser.add_argument(
        "--radius",
        dest="radius",
        type=int,
        default=settings.import_radius_meters,
        help="Nearby search radius in meters",
    )
    parser.add_argument("--query", dest="query", help="Optional text query, e.g. 'baptist'")
    parser.add_argument(
        "--max-pages",
        dest="max_pages",
        type=int,
        default=settings.import_max_pages,
        help="Maximum number of result pages to process",
    )
    return parser


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    parser = build_parser()
    args = parser.parse_args()

    settings = get_settings()
    if not settings.database_url:
        logger.error("Configuration error: DATABASE_URL must be set for imports to be persisted")
        raise SystemExit(2)

    try:
        run_import_job(
            repository=build_repository(settings),
            latitude=args.latitude,
            longitude=args.longitude,
            radius=args.radius,
            query=args.query,
            max_pages=args.max_pages,
        )
    finally:
        close_pool()


if __name__ == "__main__":
    main()
