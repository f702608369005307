"""
In-memory HTTP client wired to an ASGI app.

Used by the API test suite and local demos for fast, isolated runs without a
live backend. Requests never leave the process.
"""
import httpx

from .http_client import HttpClient

DEFAULT_TEST_BASE = "http://testserver"


def in_memory_client(app, base: str = DEFAULT_TEST_BASE) -> HttpClient:
    """Build an HttpClient whose requests are served by ``app``.

    Args:
        app: ASGI application instance (e.g. a FastAPI app)
        base: Base URL used to build request URLs; the host part is only
            visible to the app through the Host header

    Returns:
        HttpClient routed through ``httpx.ASGITransport``
    """
    return HttpClient(base, transport=httpx.ASGITransport(app=app))
