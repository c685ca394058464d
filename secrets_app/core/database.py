"""Database configuration and session helpers."""

from __future__ import annotations

from typing import Iterator

from sqlalchemy.engine import make_url
from sqlmodel import Session, create_engine

from .config import DATABASE_URL, DB_POOL_SIZE


def _engine_kwargs(url: str) -> dict:
    if make_url(url).get_backend_name() == "sqlite":
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_size": DB_POOL_SIZE, "pool_pre_ping": True}


engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))


def get_session() -> Iterator[Session]:
    """FastAPI dependency that yields a pooled database session."""

    with Session(engine) as session:
        yield session


__all__ = ["engine", "get_session"]
