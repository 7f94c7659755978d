"""Shared fixtures: isolate config/cache roots, settings and logging."""

import pytest

from unum.logger import close_handlers
from unum.settings import get_settings


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path, monkeypatch):
    """Point XDG roots at tmp_path and reset cached settings for every test."""
    config_home = tmp_path / "config"
    cache_home = tmp_path / "cache"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("XDG_CACHE_HOME", str(cache_home))
    monkeypatch.delenv("UNUM_EXECUTABLE", raising=False)
    monkeypatch.delenv("UNUM_DEBUG", raising=False)

    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()
    close_handlers()


@pytest.fixture
def config_home(tmp_path):
    return tmp_path / "config" / "unum"


@pytest.fixture
def cache_home(tmp_path):
    return tmp_path / "cache" / "unum"


@pytest.fixture
def write_persona(config_home):
    """Write a persona config file and return its path."""

    def _write(persona: str, content: str):
        config_home.mkdir(parents=True, exist_ok=True)
        path = config_home / f"{persona}.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
