"""Aggregate API routers."""

from fastapi import APIRouter

from .auth import router as auth_router
from .pages import router as pages_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    pages_router,
    auth_router,
)

__all__ = ["ALL_ROUTERS"]
