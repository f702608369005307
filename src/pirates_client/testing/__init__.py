"""
Test helpers: an in-memory fake of the pirates API.
"""

from .fake_api import FakePiratesAPI, build_fake_api, DEFAULT_PIRATES

__all__ = [
    'FakePiratesAPI',
    'build_fake_api',
    'DEFAULT_PIRATES',
]
