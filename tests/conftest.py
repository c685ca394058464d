"""
Pytest config.

Settings are read from the environment when ``secrets_app`` is first
imported, so the test database and secrets are pinned here before any test
module imports the app.
"""

from __future__ import annotations

import base64
import json
import os
import sys
import tempfile
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

_DB_DIR = Path(tempfile.mkdtemp(prefix="secrets-app-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR / 'test.db'}"
os.environ["SESSION_SECRET"] = "test-session-secret-for-testing-purposes-only"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["GOOGLE_CLIENT_ID"] = "test-client-id"
os.environ["GOOGLE_CLIENT_SECRET"] = "test-client-secret"
os.environ.pop("DB_RESET", None)

from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel  # noqa: E402

from secrets_app.app import app  # noqa: E402
from secrets_app.core import engine  # noqa: E402
from secrets_app.services import UserStore  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_tables():
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def db_session():
    with Session(engine) as session:
        yield session


@pytest.fixture()
def store(db_session) -> UserStore:
    return UserStore(db_session)


def _session_payload(client: TestClient) -> dict:
    raw = client.cookies.get("sid")
    if not raw:
        return {}
    data = raw.split(".", 1)[0]
    return json.loads(base64.b64decode(data + "=" * (-len(data) % 4)))


@pytest.fixture()
def session_of():
    """Decode the signed ``sid`` cookie of a client without verifying it."""

    return _session_payload
