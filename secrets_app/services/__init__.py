"""Service layer helpers."""

from .auth import authenticate_local, resolve_oauth_profile
from .passwords import OAUTH_PASSWORD_SENTINEL, hash_password, verify_password
from .users import UserStore

__all__ = [
    "OAUTH_PASSWORD_SENTINEL",
    "UserStore",
    "authenticate_local",
    "hash_password",
    "resolve_oauth_profile",
    "verify_password",
]
