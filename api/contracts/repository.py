"""
Contract persistence (raw SQL).
"""

from __future__ import annotations

import asyncpg

from core import db


async def insert_contract(
    pool: asyncpg.Pool,
    *,
    address: str,
    token: str,
    wallets: str,
    owner: str,
) -> None:
    await db.execute(
        pool,
        """
        INSERT INTO contracts (address, token, wallets, owner)
        VALUES ($1, $2, $3, $4)
        """,
        address,
        token,
        wallets,
        owner,
    )


async def list_contracts_by_owner(pool: asyncpg.Pool, owner: str) -> list[dict]:
    return await db.fetch_all(
        pool,
        """
        SELECT address, token, wallets
        FROM contracts
        WHERE owner = $1
        """,
        owner,
    )
