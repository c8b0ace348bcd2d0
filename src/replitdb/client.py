"""StoreClient — async client for the Replit Database HTTP API."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Iterable, Mapping
from typing import Any
from urllib.parse import quote, unquote, urlencode

from replitdb.codec import DecodeResult, decode, encode
from replitdb.config import DEFAULT_TIMEOUT, ClientConfig
from replitdb.transport import HttpxTransport, Transport

logger = logging.getLogger(__name__)


class StoreClient:
    """Stateless façade over a remote key-value store.

    Every call is an independent unit of work: nothing is cached and there is
    nothing to close.  Multi-key operations are conveniences over per-key
    requests and are **not** atomic.  A failure part-way through leaves
    earlier writes or deletes in place.

    Parameters:
        url:       Database URL.  Falls back to the ``REPLIT_DB_URL`` env var.
        timeout:   Per-request timeout in seconds for the default transport.
        transport: Custom :class:`~replitdb.transport.Transport`.  Defaults to
                   :class:`~replitdb.transport.HttpxTransport`.

    Raises:
        ConfigurationError: No valid URL was given or found in the environment.

    Example:
        >>> db = StoreClient("https://kv.replit.com/v0/abc")
        >>> await db.set("greeting", {"text": "hi"})
        >>> await db.get("greeting")
        {'text': 'hi'}
    """

    def __init__(
        self,
        url: str | None = None,
        *,
        timeout: float | None = DEFAULT_TIMEOUT,
        transport: Transport | None = None,
    ) -> None:
        self._config = ClientConfig.resolve(url, timeout)
        self._transport: Transport = transport or HttpxTransport(timeout=self._config.timeout)

    @property
    def url(self) -> str:
        return self._config.url

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={self.url!r})"

    def _key_url(self, key: str) -> str:
        return f"{self.url}/{quote(key, safe='/')}"

    # ── single-key operations ────────────────────────────────

    async def lookup(self, key: str, *, raw: bool = False) -> DecodeResult:
        """Read *key* and return the explicit absent/present outcome.

        Raises:
            DecodeError: The stored text is not JSON and *raw* is ``False``.
        """
        _, text = await self._transport.fetch_text(self._key_url(key))
        return decode(text, key=key, raw=raw)

    async def get(self, key: str, *, raw: bool = False) -> Any:
        """Return the value of *key*, or ``None`` if it has none.

        With ``raw=True`` the stored text is returned verbatim, ``""``
        included.  A missing key, a stored ``""`` and a stored ``null`` all
        read as ``None`` otherwise; use :meth:`lookup` or ``raw=True`` when
        that matters.
        """
        result = await self.lookup(key, raw=raw)
        return result.unwrap()

    async def set(self, key: str, value: Any) -> StoreClient:
        """Store *value* under *key* as JSON."""
        body = urlencode({key: encode(value, key=key)})
        await self._transport.post_form(self.url, body)
        return self

    async def delete(self, key: str) -> StoreClient:
        """Delete *key*.  Deleting a missing key is not an error."""
        await self._transport.delete_resource(self._key_url(key))
        return self

    async def list(self, prefix: str = "") -> list[str]:
        """Return keys starting with *prefix*, in the order the store sends them."""
        url = f"{self.url}?encode=true&prefix={quote(prefix, safe='')}"
        _, text = await self._transport.fetch_text(url)
        if not text:
            return []
        return [unquote(k) for k in text.split("\n")]

    # ── multi-key operations ─────────────────────────────────

    async def empty(self) -> StoreClient:
        """Delete every key concurrently.

        All deletes settle before the first failure (if any) is raised; keys
        already deleted stay deleted.
        """
        keys = await self.list()
        await self._settle(self.delete(k) for k in keys)
        logger.debug("Emptied %d keys", len(keys))
        return self

    async def get_all(self) -> dict[str, Any]:
        """Return every key/value pair.

        Keys are read one at a time, in list order, so the store never sees
        a burst proportional to the number of keys.
        """
        output: dict[str, Any] = {}
        for key in await self.list():
            output[key] = await self.get(key)
        return output

    async def set_all(self, values: Mapping[str, Any]) -> StoreClient:
        """Set each entry of *values* in iteration order, one at a time.

        The first failure stops the loop: later keys are never sent and
        earlier ones remain written.
        """
        for key, value in values.items():
            await self.set(key, value)
        return self

    async def delete_multiple(self, *keys: str) -> StoreClient:
        """Delete *keys* concurrently, with the same failure rules as :meth:`empty`."""
        await self._settle(self.delete(k) for k in keys)
        return self

    # ── internals ────────────────────────────────────────────

    @staticmethod
    async def _settle(requests: Iterable[Awaitable[Any]]) -> None:
        """Run *requests* concurrently, wait for all, then raise the first failure."""
        results = await asyncio.gather(*requests, return_exceptions=True)
        failures = [r for r in results if isinstance(r, BaseException)]
        if failures:
            logger.warning("%d of %d requests failed", len(failures), len(results))
            raise failures[0]
