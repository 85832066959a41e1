import asyncio
import io
import os
import shutil
import tempfile
from pathlib import Path

import pytest

TEST_DIR = Path(tempfile.mkdtemp(prefix="green_campus_tests_"))

# Settings are read at import time, so point them at scratch storage first
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{TEST_DIR / 'test.db'}"
os.environ["UPLOAD_DIR"] = str(TEST_DIR / "photos")
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "admin-pass"
os.environ["SMTP_HOST"] = ""

from fastapi.testclient import TestClient  # noqa: E402
from PIL import Image  # noqa: E402
from sqlalchemy import select, func  # noqa: E402

from green_campus.config import settings  # noqa: E402
from green_campus.database import AsyncSessionLocal, init_db  # noqa: E402
from green_campus.main import app  # noqa: E402
from green_campus.services import get_email_service  # noqa: E402

PASSWORD = "password123"


def _reset_storage():
    db_file = TEST_DIR / "test.db"
    if db_file.exists():
        db_file.unlink()
    upload_dir = Path(settings.upload_dir)
    shutil.rmtree(upload_dir, ignore_errors=True)
    upload_dir.mkdir(parents=True, exist_ok=True)


class RecordingEmailService:
    """Collects outgoing mail instead of talking to SMTP."""

    def __init__(self):
        self.sent = []

    async def send(self, to, subject, body):
        self.sent.append({"to": to, "subject": subject, "body": body})


@pytest.fixture
def outbox():
    return RecordingEmailService()


@pytest.fixture
def client(outbox):
    _reset_storage()
    app.dependency_overrides[get_email_service] = lambda: outbox
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session():
    _reset_storage()
    await init_db()
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
def register_user(client):
    def _register(email, password=PASSWORD, full_name="Test User", location=None):
        resp = client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "full_name": full_name, "location": location},
        )
        assert resp.status_code == 201, resp.text
        return resp.json()["user"]
    return _register


@pytest.fixture
def login(client):
    def _login(email, password=PASSWORD):
        resp = client.post("/api/auth/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['token']}"}
    return _login


@pytest.fixture
def alice(register_user, login):
    register_user("alice@example.com", full_name="Alice Green", location="North Quad")
    return login("alice@example.com")


@pytest.fixture
def bob(register_user, login):
    register_user("bob@example.com", full_name="Bob Birch")
    return login("bob@example.com")


@pytest.fixture
def admin_headers(client):
    resp = client.post("/api/auth/admin-login", json={"username": "admin", "password": "admin-pass"})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def plant_tree(client):
    def _plant(headers, **overrides):
        body = {
            "species_id": 1,
            "latitude": 40.0,
            "longitude": -75.0,
            "planted_date": "2023-04-22",
        }
        body.update(overrides)
        resp = client.post("/api/trees", json=body, headers=headers)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _plant


@pytest.fixture
def png_bytes():
    buf = io.BytesIO()
    Image.new("RGB", (8, 8), (34, 139, 34)).save(buf, format="PNG")
    return buf.getvalue()


def count_rows(model, **filters):
    """Count rows of ``model`` matching column equality filters, outside any request."""
    async def _run():
        async with AsyncSessionLocal() as session:
            stmt = select(func.count()).select_from(model)
            for column, value in filters.items():
                stmt = stmt.where(getattr(model, column) == value)
            return (await session.execute(stmt)).scalar()
    return asyncio.run(_run())
