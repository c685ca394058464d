"""Cookie-backed session management.

Only the account email and a random session id live in the signed cookie;
the full record is looked up again on every request.
"""

from __future__ import annotations

import secrets
from typing import Optional

from fastapi import Depends, Request
from sqlmodel import Session

from ..core import SessionError, get_session
from ..models import User
from .users import UserStore

SESSION_EMAIL_KEY = "email"
SESSION_ID_KEY = "sid"


def _session_of(request: Request) -> dict:
    # SessionMiddleware places the decoded cookie in the scope.
    if "session" not in request.scope:
        raise SessionError("session store unavailable")
    return request.session


def establish(request: Request, user: User) -> str:
    session = _session_of(request)
    session.clear()
    token = secrets.token_urlsafe(32)
    session[SESSION_ID_KEY] = token
    session[SESSION_EMAIL_KEY] = user.email
    return token


def resolve(request: Request, store: UserStore) -> Optional[User]:
    session = _session_of(request)
    email = session.get(SESSION_EMAIL_KEY)
    if not email:
        return None
    user = store.find_by_email(email)
    if user is None:
        session.clear()
    return user


def destroy(request: Request) -> None:
    _session_of(request).clear()


def get_user_store(session: Session = Depends(get_session)) -> UserStore:
    """FastAPI dependency returning a gateway bound to the request session."""

    return UserStore(session)


def current_user(
    request: Request, store: UserStore = Depends(get_user_store)
) -> Optional[User]:
    """FastAPI dependency returning the signed-in user, if any."""

    return resolve(request, store)


__all__ = [
    "SESSION_EMAIL_KEY",
    "SESSION_ID_KEY",
    "current_user",
    "destroy",
    "establish",
    "get_user_store",
    "resolve",
]
