"""
Transaction persistence (raw SQL).
"""

from __future__ import annotations

import asyncpg

from core import db


async def insert_transaction(
    pool: asyncpg.Pool,
    *,
    contract_address: str,
    type: str,
    details: str | None,
    timestamp: str,
) -> None:
    await db.execute(
        pool,
        """
        INSERT INTO transactions (contract_address, type, details, timestamp)
        VALUES ($1, $2, $3, $4)
        """,
        contract_address,
        type,
        details,
        timestamp,
    )


async def list_transactions_by_contract(pool: asyncpg.Pool, contract_address: str) -> list[dict]:
    return await db.fetch_all(
        pool,
        """
        SELECT *
        FROM transactions
        WHERE contract_address = $1
        """,
        contract_address,
    )
