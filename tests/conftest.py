"""Root conftest — shared test configuration."""

import os

import pytest

# Ensure a developer's environment cannot switch the library into strict mode
os.environ.setdefault("POLYHYDRATE_STRICT_KEYS", "false")

from polyhydrate.config import get_settings  # noqa: E402
from polyhydrate.core.hydrator import Hydrator  # noqa: E402


@pytest.fixture
def hydrator() -> Hydrator:
    return Hydrator(strict_keys=False)


@pytest.fixture
def fresh_settings():
    """Clear the settings cache before and after a test that patches env vars."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
