"""Transport — the HTTP primitives the client is built on."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from replitdb.exceptions import TransportError

logger = logging.getLogger(__name__)

_FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


class Transport(Protocol):
    """What :class:`~replitdb.client.StoreClient` needs from the network.

    Implementations raise :class:`TransportError` on failure; the client
    passes those through untouched.
    """

    async def fetch_text(self, url: str) -> tuple[int, str]: ...

    async def post_form(self, url: str, body: str) -> int: ...

    async def delete_resource(self, url: str) -> int: ...


class HttpxTransport:
    """Transport backed by :mod:`httpx`.

    A fresh ``httpx.AsyncClient`` is opened for every request, so the
    transport holds no connection and needs no teardown.

    Status handling:
        * ``2xx`` succeeds.
        * ``404`` on a GET reads as an empty body (missing key).
        * ``404`` on a DELETE succeeds (nothing to delete).
        * anything else raises :class:`TransportError`.

    Parameters:
        timeout:   Per-request timeout in seconds.  ``None`` disables it.
        transport: Optional ``httpx`` transport, e.g. ``httpx.MockTransport``
                   in tests.
    """

    def __init__(
        self,
        *,
        timeout: float | None = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    async def _send(
        self,
        method: str,
        url: str,
        *,
        content: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        try:
            async with self._client() as client:
                response = await client.request(method, url, content=content, headers=headers)
        except httpx.TimeoutException as e:
            raise TransportError(method, url, detail=f"timed out after {self._timeout} seconds") from e
        except httpx.HTTPError as e:
            raise TransportError(method, url, detail=str(e) or type(e).__name__) from e

        logger.debug("%s %s -> %d", method, url, response.status_code)
        return response

    async def fetch_text(self, url: str) -> tuple[int, str]:
        response = await self._send("GET", url)
        if response.status_code == 404:
            return response.status_code, ""
        if not response.is_success:
            raise TransportError("GET", url, response.status_code)
        return response.status_code, response.text

    async def post_form(self, url: str, body: str) -> int:
        response = await self._send("POST", url, content=body, headers=_FORM_HEADERS)
        if not response.is_success:
            raise TransportError("POST", url, response.status_code)
        return response.status_code

    async def delete_resource(self, url: str) -> int:
        response = await self._send("DELETE", url)
        if response.status_code != 404 and not response.is_success:
            raise TransportError("DELETE", url, response.status_code)
        return response.status_code
