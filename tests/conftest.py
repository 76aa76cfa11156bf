"""Shared fixtures for envfactory tests.

Every test runs against a clean process: the shared factory, the hook
registry, installed callbacks and the collaborator registries are reset
around it, and store/cache paths point into ``tmp_path``.
"""

from collections.abc import Generator
from pathlib import Path

import httpx
import pytest

from envfactory.config.settings import FactorySettings
from envfactory.core.logging import setup_logging
from envfactory.factory import reset_shared_factory, set_callbacks
from envfactory.hooks import reset_hook_registry
from envfactory.http.client import reset_shared_client
from envfactory.objects.manager import reset_shared_manager
from envfactory.storage.store import reset_default_store


def pytest_configure(config: pytest.Config) -> None:
    """Render factory events through the envfactory logging pipeline."""
    logging_settings = FactorySettings().logging
    setup_logging(
        json_logs=logging_settings.json_logs,
        log_level_name=logging_settings.level,
    )


def _reset_global_state() -> None:
    set_callbacks(None)
    reset_hook_registry()
    reset_shared_factory()
    reset_shared_manager()
    reset_shared_client()
    reset_default_store()


@pytest.fixture(autouse=True)
def clean_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Isolate settings and process-wide state for each test."""
    monkeypatch.delenv("ENVFACTORY_BASE_URL", raising=False)
    monkeypatch.setenv("ENVFACTORY_STORE_DIR", str(tmp_path / "stores"))
    monkeypatch.setenv("ENVFACTORY_CACHE_DIR", str(tmp_path / "cache"))

    _reset_global_state()
    try:
        yield tmp_path
    finally:
        _reset_global_state()


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def mock_transport(recorded_requests: list[httpx.Request]) -> httpx.MockTransport:
    """Transport answering a small fake user API."""

    def handler(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(request)
        if request.url.path == "/users/1":
            return httpx.Response(200, json={"id": 1, "name": "Ada"})
        if request.url.path == "/users":
            if request.method == "POST":
                return httpx.Response(201, json={"created": True})
            return httpx.Response(
                200, json=[{"id": 1, "name": "Ada"}, {"id": 2, "name": "Grace"}]
            )
        return httpx.Response(404, json={"error": "not found"})

    return httpx.MockTransport(handler)
