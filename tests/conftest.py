"""Shared test fixtures.

The settings object is built at import time, so the database and media
locations are pointed at a throwaway directory before any app module loads.
"""

import os
import shutil
import tempfile
from pathlib import Path

_TMP_ROOT = tempfile.mkdtemp(prefix="geekpie-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_ROOT, 'test.db')}"
os.environ["MEDIA_DIR"] = os.path.join(_TMP_ROOT, "uploads")
os.environ["SITE_ROOT"] = os.path.join(_TMP_ROOT, "site")
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from core.config import settings  # noqa: E402
from core.database import Base, SessionLocal, engine  # noqa: E402
from crud.content_crud import create_record  # noqa: E402
from crud.user_crud import create_user  # noqa: E402
from generator.pipeline import SiteLayout  # noqa: E402
from schemas.content_schema import ContentCreate  # noqa: E402
from schemas.user_schema import UserCreate  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def db():
    """Fresh schema per test."""
    import models.user, models.session, models.project, models.ai_sector  # noqa: F401,E401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def media_dir(monkeypatch, tmp_path):
    path = tmp_path / "server-uploads"
    path.mkdir()
    monkeypatch.setattr(settings, "MEDIA_DIR", str(path))
    return path


@pytest.fixture
def client(db, media_dir):
    from main import app

    with TestClient(app) as c:
        yield c


def _login(client, db, email: str, role: str) -> dict:
    create_user(db, UserCreate(username=email.split("@")[0], email=email, password="secret123", role=role))
    resp = client.post("/auth/login", json={"email": email, "password": "secret123"})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest.fixture
def admin_headers(client, db):
    return _login(client, db, "admin@geekpie.com", "admin")


@pytest.fixture
def editor_headers(client, db):
    return _login(client, db, "editor@geekpie.com", "editor")


@pytest.fixture
def viewer_headers(client, db):
    return _login(client, db, "viewer@geekpie.com", "viewer")


@pytest.fixture
def make_record(db):
    """Insert a record of the given model; remaining fields get sensible defaults."""

    def _make(model, title: str, **fields):
        data = {
            "title": title,
            "description": f"<p>{title} body</p>",
            "thumbnail": f"/uploads/{title.lower().replace(' ', '-')}.webp",
            "status": "published",
        }
        data.update(fields)
        return create_record(db, model, ContentCreate(**data))

    return _make


@pytest.fixture
def homepage_html() -> str:
    return (FIXTURES_DIR / "homepage.html").read_text(encoding="utf-8")


@pytest.fixture
def page_template() -> str:
    return (FIXTURES_DIR / "page_template.html").read_text(encoding="utf-8")


@pytest.fixture
def site_layout(tmp_path, media_dir) -> SiteLayout:
    """A site tree with the stock homepage and page template in place."""
    site_root = tmp_path / "site"
    (site_root / "portfolio" / "mockup-3d").mkdir(parents=True)
    shutil.copyfile(FIXTURES_DIR / "homepage.html", site_root / "index.html")
    shutil.copyfile(FIXTURES_DIR / "page_template.html", site_root / "portfolio" / "mockup-3d" / "index.html")
    return SiteLayout(site_root=site_root, upload_dir=media_dir)
