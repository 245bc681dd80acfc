"""
Rescue API schemas.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RescueCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    owner: str
    type: str
    contract_address: str = Field(..., alias="contractAddress")
    amount: Decimal
    token_ids: list[Any] | None = Field(default=None, alias="tokenIds")
    timestamp: str


class RescueCreated(BaseModel):
    message: str
