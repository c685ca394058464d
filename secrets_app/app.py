"""FastAPI application factory and configuration."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlmodel import SQLModel
from starlette.middleware.sessions import SessionMiddleware

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_routes
from .core import (
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    DB_RESET,
    SESSION_MAX_AGE,
    SESSION_SECRET,
    engine,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if DB_RESET:
        SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield
    engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(title="Secrets", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        SessionMiddleware,
        secret_key=SESSION_SECRET,
        session_cookie="sid",
        max_age=SESSION_MAX_AGE,
        https_only=COOKIE_SECURE,
        same_site=COOKIE_SAMESITE,
    )

    register_routes(app)
    return app


app = create_app()
