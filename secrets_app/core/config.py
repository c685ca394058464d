"""Application settings and environment helpers."""

from __future__ import annotations

import os

from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv(override=False)


def _require_env(name: str) -> str:
    """Return a required environment variable or raise an error."""

    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


# Sessions -------------------------------------------------------------------
SESSION_SECRET = _require_env("SESSION_SECRET")
SESSION_MAX_AGE = _env_int("SESSION_MAX_AGE", 14 * 24 * 60 * 60)
COOKIE_SECURE = _env_bool("COOKIE_SECURE", False)
COOKIE_SAMESITE = os.getenv("COOKIE_SAMESITE", "lax")


# Datastore ------------------------------------------------------------------
def _database_url() -> str:
    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit
    return URL.create(
        "postgresql+psycopg",
        username=os.getenv("PG_USER") or None,
        password=os.getenv("PG_PASSWORD") or None,
        host=os.getenv("PG_HOST", "localhost"),
        port=_env_int("PG_PORT", 5432),
        database=os.getenv("PG_DATABASE", "secrets"),
    ).render_as_string(hide_password=False)


DATABASE_URL = _database_url()
DB_POOL_SIZE = _env_int("DB_POOL_SIZE", 5)
DB_RESET = _env_bool("DB_RESET", False)


# Google OAuth ---------------------------------------------------------------
GOOGLE_CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID")
GOOGLE_CLIENT_SECRET = os.getenv("GOOGLE_CLIENT_SECRET")
GOOGLE_CALLBACK_URL = os.getenv(
    "GOOGLE_CALLBACK_URL", "http://localhost:3000/auth/google/secrets"
)


# Runtime behaviour ----------------------------------------------------------
BCRYPT_ROUNDS = _env_int("BCRYPT_ROUNDS", 10)
LOG_LEVEL = os.getenv("LOG_LEVEL", "info").upper()
HOST = os.getenv("HOST", "127.0.0.1")
PORT = _env_int("PORT", 3000)
RELOAD = _env_bool("RELOAD", False)


__all__ = [
    "BCRYPT_ROUNDS",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "DATABASE_URL",
    "DB_POOL_SIZE",
    "DB_RESET",
    "GOOGLE_CALLBACK_URL",
    "GOOGLE_CLIENT_ID",
    "GOOGLE_CLIENT_SECRET",
    "HOST",
    "LOG_LEVEL",
    "PORT",
    "RELOAD",
    "SESSION_MAX_AGE",
    "SESSION_SECRET",
]
