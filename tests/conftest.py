"""
Shared test fixtures and configuration.

Unit tests need no fixtures from here. Integration fixtures that
require PostgreSQL live in tests/integration/conftest.py.
"""

from collections.abc import Generator

import pytest

from src.config.settings import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Reload settings per test so monkeypatched environment is honoured."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
