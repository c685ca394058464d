"""Logging setup shared by the server entrypoint."""

from __future__ import annotations

import logging

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> str:
    """Configure the root logger and return the uvicorn log level name."""

    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger("secrets_app").setLevel(numeric)

    name = level.lower()
    if name not in {"critical", "error", "warning", "info", "debug", "trace"}:
        name = "info"
    return name


__all__ = ["LOG_FORMAT", "configure_logging"]
