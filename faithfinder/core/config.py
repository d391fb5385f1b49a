"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    google_api_key: str
    database_url: str
    port: int = 5000
    default_search_radius: float = 10.0
    import_max_pages: int = 3
    import_radius_meters: int = 5000
    seed_sample_data: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    google_api_key = os.getenv("GOOGLE_API_KEY", "")
    database_url = os.getenv("DATABASE_URL", "")
    port = int(os.getenv("PORT", "5000"))
    default_search_radius = float(os.getenv("DEFAULT_SEARCH_RADIUS", "10"))
    import_max_pages = int(os.getenv("IMPORT_MAX_PAGES", "3"))
    import_radius_meters = int(os.getenv("IMPORT_RADIUS_METERS", "5000"))
    seed_sample_data = os.getenv("SEED_SAMPLE_DATA", "true").lower() in {"1", "true", "yes"}

    if not database_url:
        logger.warning("DATABASE_URL is not set; falling back to in-memory storage.")
    if not google_api_key:
        logger.warning("GOOGLE_API_KEY is not configured; Google Places imports will fail.")

    return Settings(
        google_api_key=google_api_key,
        database_url=database_url,
        port=port,
        default_search_radius=default_search_radius,
        import_max_pages=import_max_pages,
        import_radius_meters=import_radius_meters,
        seed_sample_data=seed_sample_data,
    )
