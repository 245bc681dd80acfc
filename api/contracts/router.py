"""
Contract API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Request, status

from core import db

from . import schemas, service

router = APIRouter()


@router.post(
    "/contracts",
    status_code=status.HTTP_201_CREATED,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schemas.ContractCreate.model_json_schema()}},
        }
    },
)
async def create_contract(
    request: Request,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.ContractCreated:
    # The service validates the body so shape errors get the route's fixed error.
    return await service.add_contract(pool, await request.body())


@router.get("/contracts/{owner}")
async def list_contracts(
    owner: str,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[schemas.ContractResponse]:
    return await service.contracts_for_owner(pool, owner)
