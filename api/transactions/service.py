"""
Transaction business logic.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any

import asyncpg

from core.errors import RequestFailed

from . import repository, schemas

logger = logging.getLogger(__name__)

CREATED_MESSAGE = "Transacción añadida"
CREATE_ERROR = "Error al añadir transacción"
LIST_ERROR = "Error al obtener transacciones"


def _details_text(details: Any) -> str | None:
    if details is None or isinstance(details, str):
        return details
    return json.dumps(details)


async def add_transaction(pool: asyncpg.Pool, body: bytes) -> schemas.TransactionCreated:
    try:
        payload = schemas.TransactionCreate.model_validate_json(body)
        logger.info("Adding transaction for contract %s", payload.contract_address)
        await repository.insert_transaction(
            pool,
            contract_address=payload.contract_address,
            type=payload.type,
            details=_details_text(payload.details),
            timestamp=payload.timestamp,
        )
    except Exception as exc:
        logger.error("%s: %s", CREATE_ERROR, exc)
        raise RequestFailed(CREATE_ERROR) from exc

    logger.info("Transaction added for %s", payload.contract_address)
    return schemas.TransactionCreated(message=CREATED_MESSAGE)


async def transactions_for_contract(pool: asyncpg.Pool, contract_address: str) -> list[dict]:
    logger.info("Fetching transactions for contract %s", contract_address)
    started = time.perf_counter()
    try:
        rows = await repository.list_transactions_by_contract(pool, contract_address)
    except Exception as exc:
        logger.error("%s: %s", LIST_ERROR, exc)
        raise RequestFailed(LIST_ERROR) from exc

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("Found %d transactions for %s in %.1f ms", len(rows), contract_address, elapsed_ms)
    return rows
