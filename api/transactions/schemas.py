"""
Transaction API schemas.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TransactionCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    contract_address: str = Field(..., alias="contractAddress")
    type: str
    # Opaque to this service; stored as given (JSON text if not a string).
    details: Any = None
    # Not validated as a time value.
    timestamp: str


class TransactionCreated(BaseModel):
    message: str
