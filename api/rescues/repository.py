"""
Rescue persistence (raw SQL).
"""

from __future__ import annotations

from decimal import Decimal

import asyncpg

from core import db


async def insert_rescue(
    pool: asyncpg.Pool,
    *,
    owner: str,
    type: str,
    contract_address: str,
    amount: Decimal,
    token_ids: str | None,
    timestamp: str,
) -> None:
    await db.execute(
        pool,
        """
        INSERT INTO rescues (owner, type, contract_address, amount, token_ids, timestamp)
        VALUES ($1, $2, $3, $4, $5, $6)
        """,
        owner,
        type,
        contract_address,
        amount,
        token_ids,
        timestamp,
    )


async def list_rescues_by_owner(pool: asyncpg.Pool, owner: str) -> list[dict]:
    return await db.fetch_all(
        pool,
        """
        SELECT *
        FROM rescues
        WHERE owner = $1
        """,
        owner,
    )
