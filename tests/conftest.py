"""Shared test fixtures.

The remote database is simulated by :class:`FakeDatabase`, an in-memory
dict served over ``httpx.MockTransport`` so every test exercises the real
wire protocol.
"""

from __future__ import annotations

from urllib.parse import parse_qsl, quote, unquote

import httpx
import pytest

from replitdb import HttpxTransport, StoreClient

DB_URL = "https://kv.example.com/v0/token"


class FakeDatabase:
    """Dict-backed stand-in for the Replit Database HTTP API.

    Attributes:
        data:     Stored text keyed by decoded key, in insertion order.
        requests: Every request seen, as ``(method, key_or_none)``.
        fail:     Keys whose POST/DELETE should answer HTTP 500.
    """

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.requests: list[tuple[str, str | None]] = []
        self.fail: set[str] = set()

    def _key(self, request: httpx.Request) -> str:
        path = unquote(request.url.raw_path.decode("ascii").split("?", 1)[0])
        return path.removeprefix("/v0/token/")

    def handler(self, request: httpx.Request) -> httpx.Response:
        if request.method == "POST":
            pairs = parse_qsl(request.content.decode("utf-8"), keep_blank_values=True)
            for key, value in pairs:
                self.requests.append(("POST", key))
                if key in self.fail:
                    return httpx.Response(500)
                self.data[key] = value
            return httpx.Response(200)

        if request.url.params.get("encode") == "true":
            self.requests.append(("LIST", None))
            prefix = request.url.params.get("prefix", "")
            keys = [quote(k, safe="") for k in self.data if k.startswith(prefix)]
            return httpx.Response(200, text="\n".join(keys))

        key = self._key(request)
        self.requests.append((request.method, key))
        if request.method == "GET":
            if key not in self.data:
                return httpx.Response(404, text="")
            return httpx.Response(200, text=self.data[key])
        if request.method == "DELETE":
            if key in self.fail:
                return httpx.Response(500)
            self.data.pop(key, None)
            return httpx.Response(204)
        return httpx.Response(405)


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def transport(fake_db):
    return HttpxTransport(transport=httpx.MockTransport(fake_db.handler))


@pytest.fixture
def db(transport):
    return StoreClient(DB_URL, transport=transport)


@pytest.fixture
def db_url():
    return DB_URL
