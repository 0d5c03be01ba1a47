"""
Shared test fixtures.
"""

import pytest

from barcode_generator.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings fresh from the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
