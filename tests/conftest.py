"""Root conftest — shared test configuration."""

import os

import pytest

from orderchain.config import get_comparator_settings, get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Each test sees default settings unless it sets ORDERCHAIN_* itself."""
    for name in list(os.environ):
        if name.upper().startswith("ORDERCHAIN_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    get_comparator_settings.cache_clear()
    yield
    get_settings.cache_clear()
    get_comparator_settings.cache_clear()
