"""Tests for the server launcher."""

import pytest

import main as launcher
from gpx_profile.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestLauncher:
    def test_defaults(self, monkeypatch):
        calls = []
        monkeypatch.setattr(launcher.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
        launcher.main()
        assert calls == [
            ("gpx_profile.server:app", {"host": "0.0.0.0", "port": 8000, "reload": False, "log_level": "warning"})
        ]

    def test_env_overrides(self, monkeypatch):
        calls = []
        monkeypatch.setattr(launcher.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
        monkeypatch.setenv("GPX_PROFILE_HOST", "127.0.0.1")
        monkeypatch.setenv("GPX_PROFILE_PORT", "9000")
        monkeypatch.setenv("GPX_PROFILE_RELOAD", "true")
        launcher.main()
        _, kwargs = calls[0]
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 9000
        assert kwargs["reload"] is True
