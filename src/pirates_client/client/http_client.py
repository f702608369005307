"""
Async HTTP client for the pirates API.

Every call is a single one-shot request against ``base + path``. Nothing is
retried, timed out, or translated: network errors, JSON errors and odd
status codes all reach the caller as-is.
"""
import json
import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)

JSON_HEADERS = {'Content-Type': 'application/json'}
JSON_SEPARATORS = (",", ":")


def encode_payload(payload: Any) -> str:
    """Serialize a request payload to compact JSON.

    Raises TypeError for objects json cannot encode and ValueError for NaN or
    infinite floats, before any request is made.
    """
    return json.dumps(payload, separators=JSON_SEPARATORS, ensure_ascii=False, allow_nan=False)


class HttpClient:
    """Four-verb wrapper around ``httpx.AsyncClient`` scoped to one base URL.

    Usage:
        client = HttpClient("https://allyspirates.herokuapp.com")

        pirates = await client.get("/pirates")
        response = await client.post("/pirates", {"name": "Anne"})
        if response.status_code == 201:
            created = response.json()

    ``get`` resolves with the parsed JSON body. ``delete``, ``post`` and
    ``patch`` resolve with the raw ``httpx.Response``; parse it yourself.
    """

    def __init__(self, base: Optional[str] = None, *,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize with the base URL requests are issued against.

        Args:
            base: URL prefix, e.g. https://allyspirates.herokuapp.com. Paths are
                appended verbatim, so callers supply the leading slash.
                Defaults to the ``api-base`` setting.
            transport: Optional httpx transport, e.g. a MockTransport or an
                ASGITransport pointing at an in-process app.
        """
        if base is None:
            from pirates_client.config.settings import get_api_base
            base = get_api_base()
        self._base = base
        self._transport = transport

    @property
    def base(self) -> str:
        return self._base

    def __repr__(self):
        return f"{self.__class__.__name__}(base={self._base!r})"

    async def _fetch(self, method: str, path: str, headers=None, content=None) -> httpx.Response:
        url = self._base + path
        logger.debug("%s %s", method, url)
        # A fresh client per call keeps requests independent of each other
        async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
            return await client.request(method, url, headers=headers, content=content)

    async def get(self, path: str) -> Any:
        """GET ``base + path`` and return the decoded JSON body.

        The status code is not inspected; an error page with a JSON body is
        returned like any other body. Raises ``json.JSONDecodeError`` when
        the body is not JSON. Network failures propagate as ``httpx.HTTPError``
        subclasses.
        """
        response = await self._fetch('GET', path)
        return response.json()

    async def delete(self, path: str) -> httpx.Response:
        """DELETE ``base + path`` and return the raw response.

        Network failures propagate as ``httpx.HTTPError`` subclasses.
        """
        return await self._fetch('DELETE', path, headers=JSON_HEADERS)

    async def post(self, path: str, payload: Any) -> httpx.Response:
        """POST ``payload`` as JSON to ``base + path`` and return the raw response.

        Encoding errors are raised before the request; network failures
        propagate as ``httpx.HTTPError`` subclasses.
        """
        body = encode_payload(payload)
        return await self._fetch('POST', path, headers=JSON_HEADERS, content=body)

    async def patch(self, path: str, payload: Any) -> httpx.Response:
        """PATCH ``payload`` as JSON to ``base + path`` and return the raw response.

        Same error behavior as ``post``.
        """
        body = encode_payload(payload)
        return await self._fetch('PATCH', path, headers=JSON_HEADERS, content=body)
