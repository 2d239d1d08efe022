# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from taskboard.core.state import AppState
from taskboard.tasks.task_store import TaskStore
from taskboard.web.app import create_app



@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the web layer.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the process environment.
    """
    return SimpleNamespace(
        app_name="taskboard-test",
        log_level="DEBUG",
        host="127.0.0.1",
        port=3000,
        partial_render_header="HX-Request",
        data_dir=tmp_path,
        db_path=tmp_path / "tasks.db",
        static_dir=tmp_path / "public",
    )


@pytest.fixture()
def store(settings: SimpleNamespace):
    s = TaskStore(settings.db_path)
    s.initialize()
    yield s
    s.close()


@pytest.fixture()
def make_client(settings: SimpleNamespace):
    """Build a TestClient around any TaskRepo (real store or a fake)."""

    def _make(repo) -> TestClient:
        return TestClient(create_app(AppState(settings=settings, task_store=repo)))

    return _make


@pytest.fixture()
def client(make_client, store: TaskStore) -> TestClient:
    return make_client(store)
