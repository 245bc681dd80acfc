from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager

import asyncpg
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from contracts import router as contracts_router
from core import db
from core.config import Settings, load_settings
from core.errors import RequestFailed, request_failed_handler
from core.logging import configure_logging
from core.schema import ensure_schema
from rescues import router as rescues_router
from transactions import router as transactions_router

logger = logging.getLogger(__name__)

PoolFactory = Callable[[Settings], Awaitable[asyncpg.Pool]]


def _client_address(request: Request) -> str:
    client = request.client
    return client.host if client is not None else "unknown"


def create_app(
    *,
    settings: Settings | None = None,
    pool_factory: PoolFactory | None = None,
) -> FastAPI:
    settings = settings or load_settings()
    pool_factory = pool_factory or db.create_pool

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level, settings.log_file)
        # Schema must be verified before the listener binds; any failure here aborts startup.
        try:
            pool = await pool_factory(settings)
        except Exception as exc:
            logger.error("Database setup failed: %s", exc)
            raise

        try:
            await ensure_schema(pool)
        except Exception:
            logger.error("Startup aborted; closing DB pool.")
            await pool.close()
            raise

        app.state.pool = pool
        try:
            yield
        finally:
            app.state.pool = None
            await pool.close()

    app = FastAPI(title="rescue-ledger", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        try:
            logger.info(
                "Request received: %s %s from %s",
                request.method,
                request.url.path,
                _client_address(request),
            )
        except Exception:
            # A broken log sink must not fail the request.
            pass
        return await call_next(request)

    app.add_exception_handler(RequestFailed, request_failed_handler)

    app.include_router(contracts_router.router, tags=["contracts"])
    app.include_router(transactions_router.router, tags=["transactions"])
    app.include_router(rescues_router.router, tags=["rescues"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


# For `uvicorn main:app`; TLS options then come from uvicorn's own flags.
app = create_app()


def serve(settings: Settings | None = None) -> None:
    settings = settings or load_settings()
    configure_logging(settings.log_level, settings.log_file)

    options: dict = {}
    if settings.tls_enabled:
        options["ssl_keyfile"] = settings.ssl_keyfile
        options["ssl_certfile"] = settings.ssl_certfile
    elif settings.allow_plain_http:
        logger.warning("SSL_KEYFILE/SSL_CERTFILE not set; serving plain HTTP (ALLOW_PLAIN_HTTP).")
    else:
        logger.error("SSL_KEYFILE and SSL_CERTFILE are required to start the HTTPS server.")
        raise RuntimeError("TLS is not configured. Set SSL_KEYFILE and SSL_CERTFILE, or ALLOW_PLAIN_HTTP=1.")

    logger.info(
        "Starting %s server on port %s",
        "HTTPS" if settings.tls_enabled else "HTTP",
        settings.port,
    )
    uvicorn.run(
        create_app(settings=settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
        **options,
    )


if __name__ == "__main__":
    serve()
