"""Common dependencies for FastAPI routes.

Routes never import the store singleton directly; they ask for it through
``get_store`` so tests can swap in a fresh instance with
``app.dependency_overrides[get_store]``.
"""

from __future__ import annotations

from receipt_api.services.store import InMemoryStore, store


def get_store() -> InMemoryStore:
    """Return the process-wide in-memory store."""
    return store
