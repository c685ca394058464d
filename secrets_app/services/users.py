"""Gateway for reading and writing user rows."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..core.errors import StoreError
from ..models import User

logger = logging.getLogger(__name__)


class UserStore:
    """The only component that talks to the ``users`` table.

    Bound to a single request-scoped session; connections come from the
    engine pool and are returned when that session closes.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_email(self, email: str) -> Optional[User]:
        try:
            return self.session.exec(select(User).where(User.email == email)).first()
        except SQLAlchemyError as exc:
            raise StoreError(f"lookup failed for {email!r}") from exc

    def insert(self, email: str, password_hash: str) -> User:
        """Insert a new account; a concurrent duplicate surfaces as ``StoreError``."""

        user = User(email=email, password=password_hash)
        try:
            self.session.add(user)
            self.session.commit()
            self.session.refresh(user)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError(f"insert failed for {email!r}") from exc
        return user

    def update_secret(self, email: str, secret: Optional[str]) -> None:
        try:
            user = self.session.exec(select(User).where(User.email == email)).first()
            if user is None:
                logger.warning("Secret update skipped, no account for %s", email)
                return
            user.secret = secret
            self.session.add(user)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreError(f"secret update failed for {email!r}") from exc


__all__ = ["UserStore"]
