"""Pytest configuration for mediaembed tests."""

import pytest

from mediaembed.config.loader import clear_config_cache
from mediaembed.models.profile import ProviderProfile
from mediaembed.registry import build_registry, clear_registry_cache


def pytest_addoption(parser):
    parser.addoption(
        "--run-network",
        action="store_true",
        default=False,
        help="Run tests that call real oEmbed endpoints (requires network)",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "network: test needs network access")


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--run-network"):
        skip = pytest.mark.skip(reason="needs --run-network flag")
        for item in items:
            if "network" in item.keywords:
                item.add_marker(skip)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files out of every test."""
    monkeypatch.setenv("MEDIAEMBED_ROOT", str(tmp_path / "root"))
    monkeypatch.delenv("MEDIAEMBED_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    clear_config_cache()
    clear_registry_cache()
    yield
    clear_config_cache()
    clear_registry_cache()


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def youtube(registry):
    return registry.get("youtube")


@pytest.fixture
def vimeo(registry):
    return registry.get("vimeo")


@pytest.fixture
def dailymotion(registry):
    return registry.get("dailymotion")


@pytest.fixture
def bandcamp(registry):
    return registry.get("bandcamp")


@pytest.fixture
def soundcloud(registry):
    return registry.get("soundcloud")


@pytest.fixture
def make_profile():
    """Build a throwaway profile; keyword arguments override the defaults."""

    def _make(**kwargs):
        data = {
            "name": "sample",
            "src": "https://player.example.com/embed",
            "rules": [
                {"category": "video", "pattern": r"example\.com/v/(\w+)", "capture": 1},
            ],
        }
        data.update(kwargs)
        return ProviderProfile.model_validate(data)

    return _make
