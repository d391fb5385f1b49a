"""Record storage for faith group listings.

Two interchangeable backends sit behind ``Repository``: an in-memory map for
local development and tests, and a PostgreSQL table for deployments. Callers
receive a repository explicitly (see ``build_repository``) rather than
reaching for a module-level instance.
"""

from __future__ import annotations

import abc
import logging
import threading
import uuid
from dataclasses import replace
from decimal import Decimal
from typing import Any, Callable, ContextManager, Dict, Iterable, List, Optional

from psycopg2 import extras

from faithfinder.core.config import Settings
from faithfinder.models import FaithGroup

logger = logging.getLogger(__name__)

_MUTABLE_FIELDS = tuple(name for name in FaithGroup.field_names() if name != "id")


def _clean(data: Dict[str, Any]) -> Dict[str, Any]:
    """Keep known attributes and store coordinates/rating as decimal strings."""
    cleaned = {key: value for key, value in data.items() if key in _MUTABLE_FIELDS}
    for key in ("latitude", "longitude", "rating"):
        if key in cleaned and cleaned[key] is not None and not isinstance(cleaned[key], str):
            cleaned[key] = str(cleaned[key])
    return cleaned


class Repository(abc.ABC):
    """Read/write access to faith group records."""

    @abc.abstractmethod
    def get_all(self) -> List[FaithGroup]:
        """Return a snapshot of every record; order carries no meaning."""

    @abc.abstractmethod
    def get_by_id(self, record_id: str) -> Optional[FaithGroup]:
        ...

    @abc.abstractmethod
    def create(self, data: Dict[str, Any]) -> FaithGroup:
        """Insert a new record with a fresh id and return it."""

    @abc.abstractmethod
    def update(self, record_id: str, data: Dict[str, Any]) -> Optional[FaithGroup]:
        """Apply a partial update; None when the id is unknown."""

    @abc.abstractmethod
    def delete(self, record_id: str) -> bool:
        ...

    @abc.abstractmethod
    def upsert_by_place_id(self, data: Dict[str, Any]) -> FaithGroup:
        """Insert or refresh the record keyed by ``google_place_id``."""


class InMemoryRepository(Repository):
    def __init__(self, seed: Iterable[Dict[str, Any]] = ()) -> None:
        self._records: Dict[str, FaithGroup] = {}
        self._lock = threading.Lock()
        for data in seed:
            self.create(data)

    def get_all(self) -> List[FaithGroup]:
        with self._lock:
            return [replace(record) for record in self._records.values()]

    def get_by_id(self, record_id: str) -> Optional[FaithGroup]:
        with self._lock:
            record = self._records.get(record_id)
        return replace(record) if record is not None else None

    def _insert_locked(self, data: Dict[str, Any]) -> FaithGroup:
        record = FaithGroup(id=str(uuid.uuid4()), **_clean(data))
        self._records[record.id] = record
        return record

    def _replace_locked(self, existing: FaithGroup, data: Dict[str, Any]) -> FaithGroup:
        updated = replace(existing, **_clean(data))
        self._records[existing.id] = updated
        return updated

    def create(self, data: Dict[str, Any]) -> FaithGroup:
        with self._lock:
            record = self._insert_locked(data)
        logger.debug("Created faith group %s (%s)", record.id, record.name)
        return replace(record)

    def update(self, record_id: str, data: Dict[str, Any]) -> Optional[FaithGroup]:
        with self._lock:
            existing = self._records.get(record_id)
            if existing is None:
                return None
            updated = self._replace_locked(existing, data)
        return replace(updated)

    def delete(self, record_id: str) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None

    def upsert_by_place_id(self, data: Dict[str, Any]) -> FaithGroup:
        place_id = data.get("google_place_id")
        if not place_id:
            raise ValueError("google_place_id is required for upsert")

        # lookup and write share one lock so concurrent imports cannot both insert
        with self._lock:
            existing = next((r for r in self._records.values() if r.google_place_id == place_id), None)
            if existing is not None:
                return replace(self._replace_locked(existing, data))
            record = self._insert_locked(data)
        logger.debug("Created faith group %s for place %s", record.id, place_id)
        return replace(record)


CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS faith_groups (
    id VARCHAR PRIMARY KEY DEFAULT gen_random_uuid(),
    name TEXT NOT NULL,
    religion TEXT NOT NULL,
    denomination TEXT,
    description TEXT NOT NULL,
    long_description TEXT,
    address TEXT NOT NULL,
    city TEXT NOT NULL,
    state TEXT NOT NULL,
    zip_code TEXT NOT NULL,
    latitude DECIMAL(10, 8) NOT NULL,
    longitude DECIMAL(11, 8) NOT NULL,
    phone TEXT,
    email TEXT,
    website TEXT,
    rating DECIMAL(2, 1) DEFAULT 0.0,
    review_count INTEGER DEFAULT 0,
    service_times TEXT,
    is_open TEXT DEFAULT 'unknown',
    google_place_id TEXT UNIQUE
);
"""

_SELECT_COLUMNS = ", ".join(FaithGroup.field_names())


def _row_to_record(row: Dict[str, Any]) -> FaithGroup:
    values = dict(row)
    for key in ("latitude", "longitude", "rating"):
        if isinstance(values.get(key), Decimal):
            values[key] = str(values[key])
    if values.get("rating") is None:
        values["rating"] = "0.0"
    if values.get("review_count") is None:
        values["review_count"] = 0
    if values.get("is_open") is None:
        values["is_open"] = "unknown"
    return FaithGroup(**values)


class PostgresRepository(Repository):
    """Repository backed by the ``faith_groups`` table."""

    def __init__(self, connection_factory: Optional[Callable[[], ContextManager[Any]]] = None) -> None:
        if connection_factory is None:
            from faithfinder.core.db import get_connection

            connection_factory = get_connection
        self._connection_factory = connection_factory

    def _fetch(self, sql: str, params: Any = None) -> List[Dict[str, Any]]:
        with self._connection_factory() as conn:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, params)
                return list(cur.fetchall())

    def _write(self, sql: str, params: Any) -> Optional[Dict[str, Any]]:
        with self._connection_factory() as conn:
            try:
                with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                    cur.execute(sql, params)
                    row = cur.fetchone()
                conn.commit()
            except Exception:
                conn.rollback()
                raise
        return row

    def ensure_schema(self) -> None:
        with self._connection_factory() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(CREATE_TABLE_SQL)
                conn.commit()
            except Exception:
                conn.rollback()
                raise
        logger.info("faith_groups table is ready")

    def get_all(self) -> List[FaithGroup]:
        rows = self._fetch(f"SELECT {_SELECT_COLUMNS} FROM faith_groups")
        return [_row_to_record(row) for row in rows]

    def get_by_id(self, record_id: str) -> Optional[FaithGroup]:
        rows = self._fetch(f"SELECT {_SELECT_COLUMNS} FROM faith_groups WHERE id = %(id)s", {"id": record_id})
        return _row_to_record(rows[0]) if rows else None

    def create(self, data: Dict[str, Any]) -> FaithGroup:
        params = _clean(data)
        params.setdefault("rating", "0.0")
        params.setdefault("review_count", 0)
        params["id"] = str(uuid.uuid4())
        columns = list(params)
        sql = (
            f"INSERT INTO faith_groups ({', '.join(columns)}) "
            f"VALUES ({', '.join(f'%({c})s' for c in columns)}) "
            f"RETURNING {_SELECT_COLUMNS}"
        )
        row = self._write(sql, params)
        logger.debug("Inserted faith group %s", params["id"])
        return _row_to_record(row)

    def update(self, record_id: str, data: Dict[str, Any]) -> Optional[FaithGroup]:
        params = _clean(data)
        if not params:
            return self.get_by_id(record_id)
        assignments = ", ".join(f"{column} = %({column})s" for column in params)
        params["id"] = record_id
        sql = f"UPDATE faith_groups SET {assignments} WHERE id = %(id)s RETURNING {_SELECT_COLUMNS}"
        row = self._write(sql, params)
        return _row_to_record(row) if row else None

    def delete(self, record_id: str) -> bool:
        row = self._write("DELETE FROM faith_groups WHERE id = %(id)s RETURNING id", {"id": record_id})
        return row is not None

    def upsert_by_place_id(self, data: Dict[str, Any]) -> FaithGroup:
        params = _clean(data)
        if not params.get("google_place_id"):
            raise ValueError("google_place_id is required for upsert")
        params.setdefault("rating", "0.0")
        params.setdefault("review_count", 0)
        params["id"] = str(uuid.uuid4())
        columns = list(params)
        updates = ", ".join(f"{c} = EXCLUDED.{c}" for c in columns if c not in ("id", "google_place_id"))
        sql = (
            f"INSERT INTO faith_groups ({', '.join(columns)}) "
            f"VALUES ({', '.join(f'%({c})s' for c in columns)}) "
            f"ON CONFLICT (google_place_id) DO UPDATE SET {updates} "
            f"RETURNING {_SELECT_COLUMNS}"
        )
        row = self._write(sql, params)
        logger.debug("Upserted faith group for place %s", params["google_place_id"])
        return _row_to_record(row)


def build_repository(settings: Settings) -> Repository:
    """Pick the PostgreSQL backend when a database is configured, else in-memory."""
    if settings.database_url:
        logger.info("Using PostgreSQL repository")
        repository = PostgresRepository()
        repository.ensure_schema()
        return repository

    from faithfinder.storage.sample_data import SAMPLE_FAITH_GROUPS

    logger.info("Using in-memory repository (seeded=%s)", settings.seed_sample_data)
    return InMemoryRepository(seed=SAMPLE_FAITH_GROUPS if settings.seed_sample_data else ())
