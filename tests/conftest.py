"""Shared pytest fixtures for the upgrade types test suite."""

import pytest
from fastapi.testclient import TestClient

from backend.config import Settings
from backend.main import create_app


@pytest.fixture
def settings():
    """Test settings with a restricted CORS origin."""
    return Settings(host="127.0.0.1", port=8123, log_level="DEBUG", cors_origins=["http://localhost:3000"])


@pytest.fixture
def client(settings):
    """HTTP client bound to a freshly built app."""
    return TestClient(create_app(settings))


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every UPGRADES_* variable so from_env sees only what a test sets."""
    for name in ("UPGRADES_HOST", "UPGRADES_PORT", "UPGRADES_LOG_LEVEL", "UPGRADES_CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def empty_env_file(tmp_path):
    """An empty .env file, so tests never pick up one from the working directory."""
    env_file = tmp_path / ".env"
    env_file.write_text("")
    return str(env_file)
