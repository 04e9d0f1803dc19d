"""Root conftest — shared test configuration."""

import pytest

from crowdin_sdk.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep real CROWDIN_* variables and cached settings out of every test."""
    for key in (
        "CROWDIN_API_TOKEN", "CROWDIN_ORGANIZATION", "CROWDIN_BASE_URL",
        "CROWDIN_LOG_LEVEL", "CROWDIN_LOG_FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
