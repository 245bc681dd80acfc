"""
Error types shared by the feature packages.
"""

from __future__ import annotations

from fastapi import Request, status
from fastapi.responses import JSONResponse


# Raised at the handler boundary; the message is what the caller sees.
class RequestFailed(RuntimeError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# Startup failures are explicit so the lifespan can abort cleanly.
class SchemaError(RuntimeError):
    pass


async def request_failed_handler(_: Request, exc: RequestFailed) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": exc.message},
    )
