"""
Async database access helpers (raw SQL) using asyncpg.

The pool is created once by the app lifespan (see `api/main.py`) and kept on
`app.state`. Routes receive it through the `get_pool` dependency and pass it
down explicitly; nothing here holds it as module state.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import Request

from .config import Settings


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url(settings: Settings) -> str:
    """
    DATABASE_URL wins; otherwise the DSN is built from the DB_* parts.
    """
    if settings.database_url:
        return _sanitize_database_url(settings.database_url)

    if not settings.db_user or not settings.db_name:
        raise RuntimeError("Set DATABASE_URL or DB_USER and DB_NAME.")

    credentials = quote(settings.db_user, safe="")
    if settings.db_password:
        credentials += ":" + quote(settings.db_password, safe="")
    return f"postgresql://{credentials}@{settings.db_host}:{settings.db_port}/{settings.db_name}"


async def create_pool(settings: Settings) -> asyncpg.Pool:
    # No command timeout: a stalled statement stalls only its own request.
    return await asyncpg.create_pool(
        dsn=database_url(settings),
        min_size=settings.db_pool_min,
        max_size=settings.db_pool_max,
        command_timeout=None,
    )


def get_pool(request: Request) -> asyncpg.Pool:
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise RuntimeError("DB pool is not initialized. It is created on startup.")
    return pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(pool: asyncpg.Pool, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await pool.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(pool: asyncpg.Pool, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await pool.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(pool: asyncpg.Pool, sql: str, *args: Any) -> None:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
    """
    await pool.execute(sql, *args)
