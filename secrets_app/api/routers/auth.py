"""Login, registration and OAuth routes."""

from __future__ import annotations

import logging

import httpx
from authlib.integrations.starlette_client import OAuth, OAuthError
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from starlette.concurrency import run_in_threadpool

from ...core import (
    AuthenticationError,
    GOOGLE_CALLBACK_URL,
    GOOGLE_CLIENT_ID,
    GOOGLE_CLIENT_SECRET,
)
from ...services import (
    UserStore,
    authenticate_local,
    hash_password,
    resolve_oauth_profile,
    sessions,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

GOOGLE_CONFIGURED = bool(GOOGLE_CLIENT_ID and GOOGLE_CLIENT_SECRET)

oauth = OAuth()
oauth.register(
    name="google",
    client_id=GOOGLE_CLIENT_ID or "dummy",
    client_secret=GOOGLE_CLIENT_SECRET or "dummy",
    server_metadata_url="https://accounts.google.com/.well-known/openid-configuration",
    client_kwargs={"scope": "openid email profile"},
)

if not GOOGLE_CONFIGURED:  # pragma: no cover - allows app to boot without credentials
    logger.warning(
        "Google OAuth not configured; set GOOGLE_CLIENT_ID and GOOGLE_CLIENT_SECRET"
    )


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=302)


@router.post("/login")
async def login(
    request: Request,
    username: str = Form(...),
    password: str = Form(...),
    store: UserStore = Depends(sessions.get_user_store),
):
    try:
        user = await authenticate_local(store, username, password)
    except AuthenticationError as exc:
        logger.info("Login rejected for %s: %s", username, exc)
        return _redirect("/login")

    if user is None:
        logger.info("Login rejected for %s: wrong password", username)
        return _redirect("/login")

    sessions.establish(request, user)
    return _redirect("/secrets")


@router.post("/register")
async def register(
    request: Request,
    username: str = Form(...),
    password: str = Form(...),
    store: UserStore = Depends(sessions.get_user_store),
):
    # Check-then-insert is not atomic; a concurrent duplicate hits the
    # unique index and surfaces as StoreError.
    if await run_in_threadpool(store.find_by_email, username) is not None:
        return _redirect("/login")

    try:
        password_hash = await hash_password(password)
    except ValueError as exc:
        logger.error("Error hashing password for %s: %s", username, exc)
        return _redirect("/login")

    user = await run_in_threadpool(store.insert, username, password_hash)
    sessions.establish(request, user)
    logger.info("Registered %s", user.email)
    return _redirect("/secrets")


@router.get("/logout")
def logout(request: Request):
    sessions.destroy(request)
    return _redirect("/")


@router.get("/auth/google")
async def auth_google(request: Request):
    if not GOOGLE_CONFIGURED:
        logger.warning("Google sign-in requested but OAuth is not configured")
        return _redirect("/login")
    return await oauth.google.authorize_redirect(request, GOOGLE_CALLBACK_URL)


@router.get("/auth/google/secrets")
async def auth_google_callback(
    request: Request, store: UserStore = Depends(sessions.get_user_store)
):
    try:
        token = await oauth.google.authorize_access_token(request)
        profile = token.get("userinfo") or await oauth.google.userinfo(token=token)
        user = await run_in_threadpool(resolve_oauth_profile, store, profile)
    except (OAuthError, httpx.HTTPError, AuthenticationError) as exc:
        logger.warning("Google sign-in failed: %s", exc)
        return _redirect("/login")

    sessions.establish(request, user)
    return _redirect("/secrets")


__all__ = ["oauth", "router"]
