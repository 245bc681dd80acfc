"""
Environment-supplied settings.

Values are read once at startup. A `.env` file in the working directory is
loaded first so local runs don't need exported variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_PORT = 3111


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip()


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    database_url: str
    db_host: str
    db_port: int
    db_user: str
    db_password: str
    db_name: str
    db_pool_min: int
    db_pool_max: int
    host: str
    port: int
    ssl_keyfile: str
    ssl_certfile: str
    allow_plain_http: bool
    cors_allow_origins: list[str]
    log_level: str
    log_file: str

    @property
    def tls_enabled(self) -> bool:
        return bool(self.ssl_keyfile and self.ssl_certfile)


def load_settings(*, dotenv: bool = True) -> Settings:
    if dotenv:
        load_dotenv()

    return Settings(
        database_url=_env_str("DATABASE_URL"),
        db_host=_env_str("DB_HOST", "localhost") or "localhost",
        db_port=_env_int("DB_PORT", 5432),
        db_user=_env_str("DB_USER"),
        db_password=os.environ.get("DB_PASSWORD", ""),
        db_name=_env_str("DB_NAME"),
        db_pool_min=_env_int("DB_POOL_MIN", 1),
        db_pool_max=_env_int("DB_POOL_MAX", 10),
        host=_env_str("HOST", "0.0.0.0") or "0.0.0.0",
        port=_env_int("PORT", DEFAULT_PORT),
        ssl_keyfile=_env_str("SSL_KEYFILE"),
        ssl_certfile=_env_str("SSL_CERTFILE"),
        allow_plain_http=_env_bool("ALLOW_PLAIN_HTTP"),
        cors_allow_origins=_env_list("CORS_ALLOW_ORIGINS", ["*"]),
        log_level=(_env_str("LOG_LEVEL", "INFO") or "INFO").upper(),
        log_file=_env_str("LOG_FILE", "server.log"),
    )
