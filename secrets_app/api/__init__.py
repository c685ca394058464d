"""API assembly helpers."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from ..core import SessionError, StoreError
from .routers import ALL_ROUTERS

logger = logging.getLogger(__name__)


async def _store_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.error("Datastore failure on %s %s", request.method, request.url.path, exc_info=exc)
    return PlainTextResponse("Service temporarily unavailable", status_code=503)


async def _session_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.error("Session failure on %s %s", request.method, request.url.path, exc_info=exc)
    return PlainTextResponse("Internal server error", status_code=500)


def register_routes(app: FastAPI) -> None:
    """Attach all page and auth routers, plus the error handlers they rely on."""

    app.add_exception_handler(StoreError, _store_error_handler)
    app.add_exception_handler(SessionError, _session_error_handler)
    for router in ALL_ROUTERS:
        app.include_router(router)


__all__ = ["register_routes"]
