"""
Transaction API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Request, status

from core import db

from . import schemas, service

router = APIRouter()


@router.post(
    "/transactions",
    status_code=status.HTTP_201_CREATED,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schemas.TransactionCreate.model_json_schema()}},
        }
    },
)
async def create_transaction(
    request: Request,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.TransactionCreated:
    # The service validates the body so shape errors get the route's fixed error.
    return await service.add_transaction(pool, await request.body())


@router.get("/transactions/{contract_address}")
async def list_transactions(
    contract_address: str,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[dict]:
    return await service.transactions_for_contract(pool, contract_address)
