"""Local and Google authentication strategies."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from starlette.concurrency import run_in_threadpool

from ..core.errors import AuthenticationError, StoreError
from ..models import User
from .passwords import OAUTH_PASSWORD_SENTINEL, verify_password
from .users import UserStore

logger = logging.getLogger(__name__)


async def authenticate_local(store: UserStore, username: str, password: str) -> Optional[User]:
    """
    Verify a username/password pair against the stored bcrypt hash.

    Returns:
        The matching User, or None when the password is wrong.

    Raises:
        AuthenticationError: unknown user, or the stored hash cannot be compared.
        StoreError: the lookup itself failed.
    """
    user = await run_in_threadpool(store.find_by_email, username)
    if user is None:
        raise AuthenticationError("user not found")

    try:
        valid = await verify_password(password, user.password)
    except ValueError as exc:
        logger.error("Error comparing passwords for %s: %s", username, exc)
        raise AuthenticationError("comparison error") from exc

    return user if valid else None


def resolve_oauth_profile(store: UserStore, profile: Mapping[str, Any]) -> User:
    """Return the account for a provider profile, creating it on first login."""

    email = (profile.get("email") or "").strip()
    if not email:
        raise AuthenticationError("provider profile has no email")

    try:
        user = store.find_by_email(email)
        if user is not None:
            return user
        user = store.insert(email, OAUTH_PASSWORD_SENTINEL)
    except StoreError as exc:
        raise AuthenticationError("could not resolve provider profile") from exc

    logger.info("Created account for %s from Google profile", email)
    return user


__all__ = ["authenticate_local", "resolve_oauth_profile"]
