"""
Contract API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ContractCreate(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    address: str
    token: str
    wallets: list[str]
    owner: str


class ContractCreated(BaseModel):
    message: str
    address: str


class ContractResponse(BaseModel):
    address: str
    token: str
    wallets: list[str]
