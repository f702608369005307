"""
HTTP client package.

Provides the same four-verb client whether requests go over the network or to
an in-process app.
"""

from .http_client import HttpClient, JSON_HEADERS, encode_payload
from .in_memory_client import in_memory_client, DEFAULT_TEST_BASE

__all__ = [
    'HttpClient',
    'JSON_HEADERS',
    'encode_payload',
    'in_memory_client',
    'DEFAULT_TEST_BASE',
]
