"""
Rescue business logic.

`token_ids` is optional: absent on create means NULL in the table, and NULL
comes back as `null` on list.
"""

from __future__ import annotations

import logging
import time

import asyncpg

from core import codec
from core.errors import RequestFailed

from . import repository, schemas

logger = logging.getLogger(__name__)

CREATED_MESSAGE = "Rescate añadido"
CREATE_ERROR = "Error al añadir rescate"
LIST_ERROR = "Error al obtener rescates"


async def add_rescue(pool: asyncpg.Pool, body: bytes) -> schemas.RescueCreated:
    try:
        payload = schemas.RescueCreate.model_validate_json(body)
        logger.info("Adding rescue for %s on contract %s", payload.owner, payload.contract_address)
        await repository.insert_rescue(
            pool,
            owner=payload.owner,
            type=payload.type,
            contract_address=payload.contract_address,
            amount=payload.amount,
            token_ids=codec.encode_optional_sequence(payload.token_ids),
            timestamp=payload.timestamp,
        )
    except Exception as exc:
        logger.error("%s: %s", CREATE_ERROR, exc)
        raise RequestFailed(CREATE_ERROR) from exc

    logger.info("Rescue added for %s", payload.contract_address)
    return schemas.RescueCreated(message=CREATED_MESSAGE)


async def rescues_for_owner(pool: asyncpg.Pool, owner: str) -> list[dict]:
    logger.info("Fetching rescues for owner %s", owner)
    started = time.perf_counter()
    try:
        rows = await repository.list_rescues_by_owner(pool, owner)
        rescues = [{**row, "token_ids": codec.decode_optional_sequence(row.get("token_ids"))} for row in rows]
    except Exception as exc:
        logger.error("%s: %s", LIST_ERROR, exc)
        raise RequestFailed(LIST_ERROR) from exc

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("Found %d rescues for %s in %.1f ms", len(rescues), owner, elapsed_ms)
    return rescues
