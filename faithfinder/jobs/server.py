"""HTTP entrypoint for the faith community directory."""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Optional

from flask import Blueprint, Flask, current_app, jsonify, request

from faithfinder.api.params import ValidationError, parse_faith_group_payload, parse_search_params
from faithfinder.core.config import get_settings
from faithfinder.core.db import close_pool
from faithfinder.core.site_scraper import ScrapeError, scrape_website
from faithfinder.jobs.import_places import run_import_job
from faithfinder.search.engine import SearchEngine
from faithfinder.storage.repository import Repository, build_repository

# ---------- Logging ----------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ---------- Executor ----------
_executor = ThreadPoolExecutor(max_workers=2)

MOCK_COORDINATES = {
    "san francisco": (37.7749, -122.4194),
    "new york": (40.7128, -74.0060),
    "los angeles": (34.0522, -118.2437),
    "chicago": (41.8781, -87.6298),
    "houston": (29.7604, -95.3698),
}

bp = Blueprint("faith_groups", __name__)


def _repository() -> Repository:
    return current_app.extensions["faithfinder.repository"]


def _engine() -> SearchEngine:
    return current_app.extensions["faithfinder.engine"]


def _invalid(message: str, exc: ValidationError) -> Any:
    return jsonify({"message": message, "errors": exc.errors}), 400


# ---------- Routes ----------


@bp.get("/")
def root() -> Any:
    return "ok", 200


@bp.get("/healthz")
def healthcheck() -> Any:
    settings = get_settings()
    return (
        jsonify(
            {
                "status": "ok",
                "storage": type(_repository()).__name__,
                "default_search_radius": settings.default_search_radius,
                "revision": os.getenv("K_REVISION", "unknown"),
            }
        ),
        200,
    )


@bp.get("/api/faith-groups")
def list_faith_groups() -> Any:
    try:
        records = _repository().get_all()
    except Exception as exc:  # noqa: BLE001
        logger.exception("Listing faith groups failed: %s", exc)
        return jsonify({"message": "Failed to fetch faith groups"}), 500
    return jsonify([record.to_dict() for record in records]), 200


@bp.get("/api/faith-groups/search")
def search_faith_groups() -> Any:
    """
    Search by religion text and optional coordinates.
    Query params: religion, location (echo only), latitude, longitude, radius (miles).
    """
    try:
        query = parse_search_params(request.args, default_radius=get_settings().default_search_radius)
    except ValidationError as exc:
        return _invalid("Invalid search parameters", exc)

    try:
        results = _engine().search(query)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Search failed: %s", exc)
        return jsonify({"message": "Failed to search faith groups"}), 500

    return jsonify([result.to_dict() for result in results]), 200


@bp.get("/api/faith-groups/<record_id>")
def get_faith_group(record_id: str) -> Any:
    try:
        record = _repository().get_by_id(record_id)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Fetching faith group %s failed: %s", record_id, exc)
        return jsonify({"message": "Failed to fetch faith group"}), 500
    if record is None:
        return jsonify({"message": "Faith group not found"}), 404
    return jsonify(record.to_dict()), 200


@bp.post("/api/faith-groups")
def create_faith_group() -> Any:
    payload: Dict[str, Any] = request.get_json(silent=True) or {}
    try:
        data = parse_faith_group_payload(payload)
    except ValidationError as exc:
        return _invalid("Invalid faith group data", exc)

    try:
        record = _repository().create(data)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Creating faith group failed: %s", exc)
        return jsonify({"message": "Failed to create faith group"}), 500
    logger.info("Created faith group %s", record.id)
    return jsonify(record.to_dict()), 201


@bp.patch("/api/faith-groups/<record_id>")
def update_faith_group(record_id: str) -> Any:
    payload: Dict[str, Any] = request.get_json(silent=True) or {}
    try:
        data = parse_faith_group_payload(payload, partial=True)
    except ValidationError as exc:
        return _invalid("Invalid faith group data", exc)

    try:
        record = _repository().update(record_id, data)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Updating faith group %s failed: %s", record_id, exc)
        return jsonify({"message": "Failed to update faith group"}), 500
    if record is None:
        return jsonify({"message": "Faith group not found"}), 404
    return jsonify(record.to_dict()), 200


@bp.delete("/api/faith-groups/<record_id>")
def delete_faith_group(record_id: str) -> Any:
    try:
        deleted = _repository().delete(record_id)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Deleting faith group %s failed: %s", record_id, exc)
        return jsonify({"message": "Failed to delete faith group"}), 500
    if not deleted:
        return jsonify({"message": "Faith group not found"}), 404
    return "", 204


@bp.get("/api/geocode")
def geocode() -> Any:
    """Mock geocoder for a handful of cities; unknown names resolve to San Francisco."""
    location = request.args.get("location")
    if not location:
        return jsonify({"message": "Location parameter is required"}), 400

    lat, lng = MOCK_COORDINATES.get(location.strip().lower(), MOCK_COORDINATES["san francisco"])
    return (
        jsonify(
            {
                "location": location,
                "latitude": lat,
                "longitude": lng,
                "formatted_address": f"{location}, United States",
            }
        ),
        200,
    )


@bp.post("/api/admin/import-places")
def enqueue_import() -> Any:
    """
    Queue a Google Places import.
    Required JSON fields: latitude, longitude
    Optional: radius (meters, int), query (str), max_pages (int)
    """
    payload: Dict[str, Any] = request.get_json(silent=True) or {}

    missing = [f for f in ("latitude", "longitude") if payload.get(f) in (None, "")]
    if missing:
        return jsonify({"error": f"missing fields: {', '.join(missing)}"}), 400

    try:
        latitude = float(payload["latitude"])
        longitude = float(payload["longitude"])
    except (TypeError, ValueError):
        return jsonify({"error": "latitude and longitude must be numeric"}), 400

    job_args: Dict[str, Any] = dict(latitude=latitude, longitude=longitude, query=payload.get("query") or None)
    for name in ("radius", "max_pages"):
        raw = payload.get(name)
        if raw is None:
            continue
        try:
            value = int(raw)
        except (TypeError, ValueError):
            return jsonify({"error": f"{name} must be numeric"}), 400
        if value <= 0:
            return jsonify({"error": f"{name} must be positive"}), 400
        job_args[name] = value

    logger.info("Queueing Places import job: %s", job_args)
    _executor.submit(_run_import_safe, _repository(), job_args)

    return jsonify({"data": {"status": "queued"}}), 202


@bp.post("/api/admin/scrape-website")
def scrape_community_website() -> Any:
    payload: Dict[str, Any] = request.get_json(silent=True) or {}
    website = payload.get("website")
    if not website:
        return jsonify({"error": "website is required"}), 400

    try:
        scraped = scrape_website(str(website))
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    except ScrapeError as exc:
        logger.warning("Scrape failed for %s: %s", website, exc)
        return jsonify({"error": "scrape failed"}), 500

    return jsonify({"data": scraped}), 200


# ---------- Internals ----------


def _run_import_safe(repository: Repository, job_args: Dict[str, Any]) -> None:
    try:
        run_import_job(repository=repository, **job_args)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Import job failed: %s", exc)


def create_app(repository: Optional[Repository] = None) -> Flask:
    """Build the Flask app around an explicit repository (built from settings when omitted)."""
    app = Flask(__name__)
    if repository is None:
        repository = build_repository(get_settings())
    app.extensions["faithfinder.repository"] = repository
    app.extensions["faithfinder.engine"] = SearchEngine(repository)
    app.register_blueprint(bp)
    return app


def main() -> None:
    settings = get_settings()
    port = int(os.getenv("PORT") or settings.port)
    logger.info("[BOOT] Binding on 0.0.0.0:%d", port)
    try:
        create_app().run(host="0.0.0.0", port=port)
    finally:
        _executor.shutdown(wait=False)
        close_pool()


if __name__ == "__main__":
    main()
