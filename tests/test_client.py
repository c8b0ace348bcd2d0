"""Tests for StoreClient single-key operations."""

import pytest

from replitdb import ConfigurationError, DecodeError, EncodeError, StoreClient


async def test_set_and_get(db):
    await db.set("k", {"val": 1})
    assert await db.get("k") == {"val": 1}


async def test_set_stores_json_text(db, fake_db):
    await db.set("k", [1, "a"])
    assert fake_db.data["k"] == '[1,"a"]'


async def test_get_missing_is_none(db):
    assert await db.get("nope") is None


async def test_get_missing_raw_is_empty_string(db):
    assert await db.get("nope", raw=True) == ""


async def test_empty_stored_text(db, fake_db):
    fake_db.data["e"] = ""
    assert await db.get("e") is None
    assert await db.get("e", raw=True) == ""


async def test_stored_null_reads_as_none(db):
    await db.set("n", None)
    assert await db.get("n") is None
    assert not (await db.lookup("n")).found


async def test_lookup_present(db):
    await db.set("k", 0)
    result = await db.lookup("k")
    assert result.found
    assert result.value == 0


async def test_invalid_json_raises_decode_error(db, fake_db):
    fake_db.data["bad"] = "{not valid}"
    with pytest.raises(DecodeError) as exc_info:
        await db.get("bad")
    assert exc_info.value.key == "bad"
    assert await db.get("bad", raw=True) == "{not valid}"


async def test_set_unserializable_sends_nothing(db, fake_db):
    with pytest.raises(EncodeError):
        await db.set("k", object())
    assert fake_db.requests == []


async def test_overwrite(db):
    await db.set("k", "a")
    await db.set("k", "b")
    assert await db.get("k") == "b"


async def test_set_returns_client_for_chaining(db):
    assert await db.set("k", 1) is db
    assert await db.delete("k") is db


async def test_delete(db):
    await db.set("k", 1)
    await db.delete("k")
    assert await db.get("k") is None


async def test_delete_nonexistent(db):
    await db.delete("nope")  # should not raise


async def test_list_empty(db):
    assert await db.list() == []


async def test_list_all_in_store_order(db):
    await db.set("b", 1)
    await db.set("a", 2)
    assert await db.list() == ["b", "a"]


async def test_list_decodes_keys(db):
    await db.set("a/b", 1)
    await db.set("a c", 2)
    await db.set("other", 3)
    assert await db.list("a") == ["a/b", "a c"]


async def test_special_character_keys_round_trip(db):
    await db.set("a c", "space")
    await db.set("a/b", "slash")
    await db.set("ключ", "unicode")
    assert await db.get("a c") == "space"
    assert await db.get("a/b") == "slash"
    assert await db.get("ключ") == "unicode"


async def test_value_with_form_characters(db):
    await db.set("k", "a=b&c=d+e")
    assert await db.get("k") == "a=b&c=d+e"


# ── Configuration ────────────────────────────────────────────


def test_url_from_env(monkeypatch):
    monkeypatch.setenv("REPLIT_DB_URL", "https://env.example.com/db/")
    assert StoreClient().url == "https://env.example.com/db"


def test_explicit_url_wins(monkeypatch, db_url):
    monkeypatch.setenv("REPLIT_DB_URL", "https://env.example.com/db")
    assert StoreClient(db_url).url == db_url


def test_missing_url_fails_fast(monkeypatch):
    monkeypatch.delenv("REPLIT_DB_URL", raising=False)
    with pytest.raises(ConfigurationError, match="REPLIT_DB_URL"):
        StoreClient()


def test_repr(db_url):
    assert repr(StoreClient(db_url)) == f"StoreClient(url='{db_url}')"
