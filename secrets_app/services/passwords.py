"""Password hashing helpers."""

from __future__ import annotations

import bcrypt
from starlette.concurrency import run_in_threadpool

from ..core.config import BCRYPT_ROUNDS

# Stored in place of a hash for accounts created through Google. It is not
# a valid bcrypt string, so no password can ever verify against it.
OAUTH_PASSWORD_SENTINEL = "google"

# bcrypt only reads the first 72 bytes; longer input is rejected, not truncated.
MAX_PASSWORD_BYTES = 72


def _encode(plain: str) -> bytes:
    raw = plain.encode("utf-8")
    if len(raw) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password longer than {MAX_PASSWORD_BYTES} bytes")
    return raw


def _hash(plain: str, rounds: int) -> str:
    return bcrypt.hashpw(_encode(plain), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def _check(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(_encode(plain), hashed.encode("utf-8"))


async def hash_password(plain: str, *, rounds: int = BCRYPT_ROUNDS) -> str:
    """
    Hash ``plain`` with bcrypt off the event loop.

    Raises:
        ValueError: ``plain`` is longer than ``MAX_PASSWORD_BYTES``.
    """
    return await run_in_threadpool(_hash, plain, rounds)


async def verify_password(plain: str, hashed: str) -> bool:
    """
    Compare ``plain`` against a bcrypt hash.

    Raises:
        ValueError: ``hashed`` is not a bcrypt hash, or ``plain`` is too long.
    """
    return await run_in_threadpool(_check, plain, hashed)


__all__ = ["MAX_PASSWORD_BYTES", "OAUTH_PASSWORD_SENTINEL", "hash_password", "verify_password"]
