import pytest

from core.config import get_settings


@pytest.fixture(autouse=True)
def plain_settings(monkeypatch):
    monkeypatch.setenv("USE_COLOR", "false")
    monkeypatch.setenv("CLEAR_DELAY_SECONDS", "0")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
