from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add backend folder to sys.path so `import receipt_api...` works in tests when running from backend root
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from receipt_api.api.dependencies import get_store  # noqa: E402
from receipt_api.api.main import create_app  # noqa: E402
from receipt_api.services.store import InMemoryStore  # noqa: E402


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def app(store):
    app = create_app()
    app.dependency_overrides[get_store] = lambda: store
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def receipt_payload():
    return {
        "userId": None,
        "storeName": "Corner Market",
        "date": "2024-03-15T10:30:00Z",
        "total": 42.5,
    }
