"""Core configuration and infrastructure helpers."""

from .config import (
    BCRYPT_ROUNDS,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    DB_RESET,
    GOOGLE_CALLBACK_URL,
    GOOGLE_CLIENT_ID,
    GOOGLE_CLIENT_SECRET,
    HOST,
    PORT,
    RELOAD,
    SESSION_MAX_AGE,
    SESSION_SECRET,
)
from .database import engine, get_session
from .errors import AppError, AuthenticationError, SessionError, StoreError
from .logging import configure_logging

__all__ = [
    "BCRYPT_ROUNDS",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "DB_RESET",
    "GOOGLE_CALLBACK_URL",
    "GOOGLE_CLIENT_ID",
    "GOOGLE_CLIENT_SECRET",
    "HOST",
    "PORT",
    "RELOAD",
    "SESSION_MAX_AGE",
    "SESSION_SECRET",
    "AppError",
    "AuthenticationError",
    "SessionError",
    "StoreError",
    "configure_logging",
    "engine",
    "get_session",
]
