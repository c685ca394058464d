"""Page routes: public forms and the protected secret views."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from ...models import User
from ...services import UserStore
from ...services.sessions import current_user, get_user_store

router = APIRouter(tags=["pages"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))

DEFAULT_SECRET = "Jack Bauer is my hero."


@router.get("/")
def home(request: Request):
    return templates.TemplateResponse(request, "home.html")


@router.get("/login")
def login_form(request: Request):
    return templates.TemplateResponse(request, "login.html")


@router.get("/register")
def register_form(request: Request):
    return templates.TemplateResponse(request, "register.html")


@router.get("/secrets")
def secrets_page(request: Request, user: Optional[User] = Depends(current_user)):
    """Show the signed-in user's secret, or the default one."""

    if user is None:
        return RedirectResponse("/login", status_code=302)
    return templates.TemplateResponse(
        request, "secrets.html", {"secret": user.secret or DEFAULT_SECRET}
    )


@router.get("/submit")
def submit_form(request: Request, user: Optional[User] = Depends(current_user)):
    if user is None:
        return RedirectResponse("/login", status_code=302)
    return templates.TemplateResponse(request, "submit.html")


@router.post("/submit")
def submit_secret(
    secret: str = Form(""),
    user: Optional[User] = Depends(current_user),
    store: UserStore = Depends(get_user_store),
):
    """Store the submitted text verbatim as the user's secret."""

    if user is None:
        return RedirectResponse("/login", status_code=302)
    store.update_secret(user.email, secret)
    return RedirectResponse("/secrets", status_code=302)


__all__ = ["DEFAULT_SECRET", "router", "templates"]
