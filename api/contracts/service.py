"""
Contract business logic.

Each call issues exactly one statement. Any failure (body validation, driver,
wallet encoding/decoding) is logged here and surfaced as `RequestFailed` with a
fixed message.
"""

from __future__ import annotations

import logging
import time

import asyncpg

from core import codec
from core.errors import RequestFailed

from . import repository, schemas

logger = logging.getLogger(__name__)

CREATED_MESSAGE = "Contrato añadido"
CREATE_ERROR = "Error al añadir contrato"
LIST_ERROR = "Error al obtener contratos"


async def add_contract(pool: asyncpg.Pool, body: bytes) -> schemas.ContractCreated:
    try:
        payload = schemas.ContractCreate.model_validate_json(body)
        logger.info("Adding contract %s for %s", payload.address, payload.owner)
        await repository.insert_contract(
            pool,
            address=payload.address,
            token=payload.token,
            wallets=codec.encode_sequence(payload.wallets),
            owner=payload.owner,
        )
    except Exception as exc:
        logger.error("%s: %s", CREATE_ERROR, exc)
        raise RequestFailed(CREATE_ERROR) from exc

    logger.info("Contract %s added", payload.address)
    return schemas.ContractCreated(message=CREATED_MESSAGE, address=payload.address)


async def contracts_for_owner(pool: asyncpg.Pool, owner: str) -> list[schemas.ContractResponse]:
    logger.info("Fetching contracts for owner %s", owner)
    started = time.perf_counter()
    try:
        rows = await repository.list_contracts_by_owner(pool, owner)
        contracts = [
            schemas.ContractResponse(
                address=row["address"],
                token=row["token"],
                wallets=codec.decode_sequence(row["wallets"]),
            )
            for row in rows
        ]
    except Exception as exc:
        logger.error("%s: %s", LIST_ERROR, exc)
        raise RequestFailed(LIST_ERROR) from exc

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("Found %d contracts for %s in %.1f ms", len(contracts), owner, elapsed_ms)
    return contracts
