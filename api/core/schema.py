"""
Startup schema provisioning.

Tables are managed outside the app (see `sql/schema.sql`). The two secondary
indexes the list endpoints rely on are checked on every start and created
when missing. The catalog lookup is what makes this safe to repeat.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import asyncpg

from . import db
from .errors import SchemaError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequiredIndex:
    table: str
    name: str
    definition: str


REQUIRED_INDEXES: tuple[RequiredIndex, ...] = (
    RequiredIndex(
        table="contracts",
        name="idx_owner",
        definition="CREATE INDEX idx_owner ON contracts (owner)",
    ),
    RequiredIndex(
        table="transactions",
        name="idx_contract_address",
        definition="CREATE INDEX idx_contract_address ON transactions (contract_address)",
    ),
)


async def _probe(pool: asyncpg.Pool) -> None:
    row = await db.fetch_one(pool, "SELECT 1 + 1 AS test, current_database() AS database")
    if row is None:
        raise SchemaError("Connectivity probe returned no row.")
    logger.info("Connected to database %s. Test: %s", row.get("database"), row.get("test"))


async def index_exists(pool: asyncpg.Pool, index: RequiredIndex) -> bool:
    row = await db.fetch_one(
        pool,
        """
        SELECT indexname
        FROM pg_indexes
        WHERE tablename = $1
          AND indexname = $2
        """,
        index.table,
        index.name,
    )
    return row is not None


async def ensure_index(pool: asyncpg.Pool, index: RequiredIndex) -> bool:
    """
    Create `index` if the catalog doesn't list it. Returns True if created.
    """
    if await index_exists(pool, index):
        logger.info("Index %s already exists on %s", index.name, index.table)
        return False

    await db.execute(pool, index.definition)
    logger.info("Index %s created on %s", index.name, index.table)
    return True


async def ensure_schema(pool: asyncpg.Pool) -> None:
    try:
        await _probe(pool)
        for index in REQUIRED_INDEXES:
            await ensure_index(pool, index)
    except SchemaError as exc:
        logger.error("Database setup failed: %s", exc)
        raise
    except Exception as exc:
        logger.error("Database setup failed: %s", exc)
        raise SchemaError(f"Database setup failed: {exc}") from exc
