"""
Root pytest configuration for pirates-client.

Logging bootstrap and --api-base come from the pirates_client pytest plugin,
registered through the package's pytest11 entry point.
"""

import pytest

from pirates_client.config import clear_settings_cache


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Resolve settings from scratch for every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
