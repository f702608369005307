"""
Pirates API client.

Async four-verb HTTP helper bound to a single API base URL.
"""

__version__ = '0.1.0'

from .client import HttpClient, in_memory_client

__all__ = [
    'HttpClient',
    'in_memory_client',
    '__version__',
]
