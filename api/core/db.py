"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

The archive is read-only from this service: there is no `execute()` helper
on purpose, every query goes through `fetch_one` / `fetch_all`.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

import asyncpg

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None


# Store failures are explicit and separable from "no rows".
class StoreError(RuntimeError):
    pass


_STORE_EXCEPTIONS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def _url_from_parts() -> str:
    user = os.environ.get("DB_USER", "").strip() or "postgres"
    password = os.environ.get("DB_PASSWORD", "")
    host = os.environ.get("DB_HOST", "").strip() or "localhost"
    port = _env_int("DB_PORT", 5433)
    name = os.environ.get("DB_NAME", "").strip() or "postgres"

    credentials = quote(user, safe="")
    if password:
        credentials += ":" + quote(password, safe="")
    return f"postgresql://{credentials}@{host}:{port}/{name}"


def database_url() -> str:
    """
    DSN from DATABASE_URL, or assembled from DB_USER/DB_PASSWORD/DB_HOST/DB_PORT/DB_NAME.
    """
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        url = _url_from_parts()
    return _sanitize_database_url(url)


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    try:
        _pool = await asyncpg.create_pool(
            dsn=database_url(),
            min_size=_env_int("DB_POOL_MIN_SIZE", 1),
            max_size=_env_int("DB_POOL_MAX_SIZE", 5),
            command_timeout=_env_int("DB_COMMAND_TIMEOUT", 30),
        )
    except _STORE_EXCEPTIONS as exc:
        raise StoreError(f"Could not open database pool: {exc}") from exc
    logger.info("db_pool_opened min_size=%s max_size=%s", _pool.get_min_size(), _pool.get_max_size())


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise StoreError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    try:
        row = await pool().fetchrow(sql, *args)
    except _STORE_EXCEPTIONS as exc:
        raise StoreError(str(exc)) from exc
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await pool().fetch(sql, *args)
    except _STORE_EXCEPTIONS as exc:
        raise StoreError(str(exc)) from exc
    return [_record_to_dict(r) for r in rows]
