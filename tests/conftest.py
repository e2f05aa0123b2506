import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from warranty_checker.app.core.config import settings
from warranty_checker.app.core.db import init_db
from warranty_checker.app.main import create_app
from warranty_checker.app.services.record_store import RecordStore
from warranty_checker.app.services.warranty_service import FIELD_KEYS, WARRANTY_TYPE, WarrantyService

ADMIN_TOKEN = "test-admin-token"


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no HTTP layer)")
    config.addinivalue_line("markers", "integration: Integration tests (database, API)")


@pytest.fixture()
def configured(tmp_path, monkeypatch):
    """Point settings at a fresh database and assets directory."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "test.db"))
    monkeypatch.setattr(settings, "assets_dir", str(tmp_path / "assets"))
    monkeypatch.setattr(settings, "admin_token", ADMIN_TOKEN)
    monkeypatch.setattr(settings, "secret_key", "test-secret")
    monkeypatch.setattr(settings, "locale", "en")
    init_db()
    return tmp_path


@pytest.fixture()
def store(configured):
    return RecordStore()


@pytest.fixture()
def service(store):
    return WarrantyService(store)


@pytest.fixture()
def client(configured):
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


def add_warranty(store: RecordStore, title: str = "", **fields: str) -> int:
    """Insert a warranty item directly into the store."""
    meta = {FIELD_KEYS[name]: value for name, value in fields.items()}
    return store.insert(WARRANTY_TYPE, title or fields.get("serial", ""), meta)
