"""
Sequence columns (`contracts.wallets`, `rescues.token_ids`) are stored as
JSON text. Encoding and decoding happen here and nowhere else.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any


def encode_sequence(values: Sequence[Any]) -> str:
    return json.dumps(list(values))


def decode_sequence(text: str) -> list[Any]:
    value = json.loads(text)
    if not isinstance(value, list):
        raise ValueError(f"Stored value is not a JSON array: {text[:100]!r}")
    return value


def encode_optional_sequence(values: Sequence[Any] | None) -> str | None:
    if values is None:
        return None
    return encode_sequence(values)


def decode_optional_sequence(text: str | None) -> list[Any] | None:
    if not text:
        return None
    return decode_sequence(text)
