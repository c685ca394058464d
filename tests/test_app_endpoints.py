from __future__ import annotations

import pytest
from sqlmodel import select

from secrets_app.api.routers.pages import DEFAULT_SECRET
from secrets_app.core import StoreError
from secrets_app.models import User
from secrets_app.services import OAUTH_PASSWORD_SENTINEL, UserStore

LONG_PASSWORD = "x" * 73


def _register(client, email="ana@example.com", password="s3cret"):
    return client.post(
        "/register",
        data={"username": email, "password": password},
        follow_redirects=False,
    )


def _login(client, email="ana@example.com", password="s3cret"):
    return client.post(
        "/login",
        data={"username": email, "password": password},
        follow_redirects=False,
    )


@pytest.mark.parametrize("path", ["/", "/login", "/register"])
def test_public_pages_render(client, path) -> None:
    r = client.get(path)
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")


@pytest.mark.parametrize("path", ["/secrets", "/submit"])
def test_protected_pages_redirect_without_session(client, path) -> None:
    r = client.get(path, follow_redirects=False)
    assert r.status_code == 302
    assert r.headers["location"] == "/login"


def test_submit_post_redirects_without_session(client, db_session) -> None:
    r = client.post("/submit", data={"secret": "nope"}, follow_redirects=False)
    assert r.status_code == 302
    assert r.headers["location"] == "/login"
    assert db_session.exec(select(User)).all() == []


def test_register_establishes_session(client, session_of) -> None:
    r = _register(client)
    assert r.status_code == 302
    assert r.headers["location"] == "/secrets"
    assert session_of(client)["email"] == "ana@example.com"

    page = client.get("/secrets")
    assert page.status_code == 200
    assert DEFAULT_SECRET in page.text


def test_register_then_login(client, session_of) -> None:
    _register(client)
    client.get("/logout")
    client.cookies.clear()

    r = _login(client)
    assert r.status_code == 302
    assert r.headers["location"] == "/secrets"
    assert session_of(client)["email"] == "ana@example.com"
    assert client.get("/secrets", follow_redirects=False).status_code == 200


def test_stored_password_is_hashed(client, db_session) -> None:
    _register(client, password="plaintext-password")
    user = db_session.exec(select(User).where(User.email == "ana@example.com")).one()
    assert user.password != "plaintext-password"
    assert "plaintext-password" not in user.password


def test_session_cookie_carries_no_password_hash(client, session_of) -> None:
    _register(client)
    payload = session_of(client)
    assert set(payload) == {"email", "sid"}


def test_duplicate_registration_redirects_to_login(client, db_session) -> None:
    _register(client)
    client.cookies.clear()

    r = _register(client, password="another")
    assert r.status_code == 302
    assert r.headers["location"] == "/login"
    assert len(db_session.exec(select(User)).all()) == 1


def test_wrong_password_never_creates_session(client, session_of) -> None:
    _register(client)
    client.cookies.clear()

    r = _login(client, password="wrong")
    assert r.status_code == 302
    assert r.headers["location"] == "/login"
    assert "email" not in session_of(client)
    assert client.get("/secrets", follow_redirects=False).headers["location"] == "/login"


def test_unknown_user_login_redirects_to_login(client) -> None:
    r = _login(client, email="nobody@example.com")
    assert r.status_code == 302
    assert r.headers["location"] == "/login"


def test_oauth_account_cannot_use_local_login(client, db_session, session_of) -> None:
    UserStore(db_session).insert("g@example.com", OAUTH_PASSWORD_SENTINEL)

    r = _login(client, email="g@example.com", password=OAUTH_PASSWORD_SENTINEL)
    assert r.status_code == 302
    assert r.headers["location"] == "/login"
    assert "email" not in session_of(client)


def test_submit_then_view_secret(client) -> None:
    _register(client)
    assert client.get("/submit").status_code == 200

    r = client.post("/submit", data={"secret": "I sing in the shower."}, follow_redirects=False)
    assert r.status_code == 302
    assert r.headers["location"] == "/secrets"

    page = client.get("/secrets")
    assert "I sing in the shower." in page.text
    assert DEFAULT_SECRET not in page.text


def test_secrets_are_per_user(client) -> None:
    _register(client, email="ana@example.com")
    client.post("/submit", data={"secret": "ana's secret"})
    client.get("/logout")

    _register(client, email="bob@example.com")
    page = client.get("/secrets")
    assert DEFAULT_SECRET in page.text
    assert "ana&#39;s secret" not in page.text


def test_logout_clears_session(client) -> None:
    _register(client)
    r = client.get("/logout", follow_redirects=False)
    assert r.status_code == 302
    assert r.headers["location"] == "/"

    r = client.get("/secrets", follow_redirects=False)
    assert r.status_code == 302
    assert r.headers["location"] == "/login"


def test_logout_without_session_succeeds(client) -> None:
    r = client.get("/logout", follow_redirects=False)
    assert r.status_code == 302
    assert r.headers["location"] == "/"


def test_store_failure_returns_service_unavailable(client, monkeypatch) -> None:
    def _down(self, email):
        raise StoreError("database unavailable")

    monkeypatch.setattr(UserStore, "find_by_email", _down)
    r = _register(client)
    assert r.status_code == 503


def test_health_reports_database(client) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "database": True}


def test_register_with_overlong_password_creates_nothing(client, db_session, session_of) -> None:
    r = _register(client, password=LONG_PASSWORD)
    assert r.status_code == 302
    assert r.headers["location"] == "/login"
    assert "email" not in session_of(client)
    assert db_session.exec(select(User)).all() == []


def test_login_with_overlong_password_is_rejected(client, session_of) -> None:
    _register(client)
    client.get("/logout")
    client.cookies.clear()

    r = _login(client, password=LONG_PASSWORD)
    assert r.status_code == 302
    assert r.headers["location"] == "/login"
    assert "email" not in session_of(client)
    assert client.get("/secrets", follow_redirects=False).headers["location"] == "/login"
