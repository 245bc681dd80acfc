"""
Rescue API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Request, status

from core import db

from . import schemas, service

router = APIRouter()


@router.post(
    "/rescues",
    status_code=status.HTTP_201_CREATED,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schemas.RescueCreate.model_json_schema()}},
        }
    },
)
async def create_rescue(
    request: Request,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.RescueCreated:
    # The service validates the body so shape errors get the route's fixed error.
    return await service.add_rescue(pool, await request.body())


@router.get("/rescues/{owner}")
async def list_rescues(
    owner: str,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[dict]:
    return await service.rescues_for_owner(pool, owner)
