"""Database model for application accounts."""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field as ORMField, SQLModel


class User(SQLModel, table=True):
    """Account identified by email, holding at most one secret."""

    __tablename__ = "users"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    email: str = ORMField(index=True, unique=True)
    # bcrypt hash, or the OAuth sentinel for Google-created accounts
    password: str
    secret: Optional[str] = ORMField(default=None)


__all__ = ["User"]
