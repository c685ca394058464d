"""Application error taxonomy."""

from __future__ import annotations


class AppError(Exception):
    """Base class for errors raised by the application."""


class StoreError(AppError):
    """The datastore was unreachable or a query failed."""


class AuthenticationError(AppError):
    """A login attempt could not be resolved to a user."""


class SessionError(AppError):
    """The session store could not be read or written."""


__all__ = ["AppError", "AuthenticationError", "SessionError", "StoreError"]
