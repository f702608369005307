"""
Pytest plugin for pointing test runs at a pirates API.

Adds --api-base so the remote suite can target a live backend, and resets
cached settings at session start so each run resolves configuration fresh.
"""

import os

from pirates_client.config.settings import clear_settings_cache

API_BASE_ENV = 'PIRATES_API_BASE'
REMOTE_ENABLED_ENV = 'PIRATES_REMOTE_TESTS'


def pytest_addoption(parser):
    """Add custom command line options for pytest."""
    parser.addoption(
        "--api-base",
        action="store",
        default=None,
        help="Run remote tests against this API base URL (e.g. https://allyspirates.herokuapp.com)"
    )


def pytest_configure(config):
    """Export --api-base for settings resolution and enable the remote suite."""
    api_base = config.getoption("--api-base")
    if api_base:
        os.environ[API_BASE_ENV] = api_base
        os.environ[REMOTE_ENABLED_ENV] = '1'

    from pirates_client.config.logging import bootstrap_logging
    bootstrap_logging()


def pytest_sessionstart(session):
    """Clear the settings cache before collection."""
    clear_settings_cache()
