from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from src.app.application.writer import DetachedTaskWriter
from src.app.presentation.main import create_app
from src.setup.api_config import ApiSettings

from .fakes import FailingTaskStore, InMemoryTaskStore, patch_inject_instance


def build_app(monkeypatch: pytest.MonkeyPatch, store: InMemoryTaskStore):
    """Create the app wired to ``store`` and a fresh detached writer."""
    writer = DetachedTaskWriter(store, write_timeout=1.0, concurrency=2)
    patch_inject_instance(monkeypatch, store, writer)
    app = create_app(ApiSettings(APP_NAME="Test API"), create_schema=False)
    return app, writer


def _client_for(
    monkeypatch: pytest.MonkeyPatch, store: InMemoryTaskStore
) -> Iterator[tuple[TestClient, InMemoryTaskStore, DetachedTaskWriter]]:
    app, writer = build_app(monkeypatch, store)
    with TestClient(app) as client:
        yield client, store, writer


@pytest.fixture
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture
def api_client(monkeypatch: pytest.MonkeyPatch, store: InMemoryTaskStore):
    """Test client whose app runs against the in-memory store."""
    yield from _client_for(monkeypatch, store)


@pytest.fixture
def failing_client(monkeypatch: pytest.MonkeyPatch):
    """Test client whose store fails every call."""
    yield from _client_for(monkeypatch, FailingTaskStore())
