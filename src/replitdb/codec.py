"""Codec — JSON text on the wire, with a raw escape hatch."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from replitdb.exceptions import DecodeError, EncodeError


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of reading a key.

    The store answers with an empty body both for a missing key and for a
    value stored as ``""``; a JSON ``null`` reads the same way.  All three
    collapse into :meth:`absent`, so callers who need to tell "no value"
    apart from a real value check ``found`` instead of comparing to ``None``.

    Attributes:
        found: ``True`` when the key holds a value.
        value: The decoded value (or raw text).  Always ``None`` when absent.
    """

    found: bool
    value: Any = None

    @staticmethod
    def absent() -> DecodeResult:
        return _ABSENT

    @staticmethod
    def present(value: Any) -> DecodeResult:
        return DecodeResult(found=True, value=value)

    def unwrap(self, default: Any = None) -> Any:
        """Return the value, or *default* when absent."""
        return self.value if self.found else default


_ABSENT = DecodeResult(found=False)


def encode(value: Any, *, key: str = "") -> str:
    """Serialize *value* to compact JSON text."""
    try:
        return json.dumps(value, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise EncodeError(key, str(e)) from e


def decode(text: str, *, key: str = "", raw: bool = False) -> DecodeResult:
    """Turn wire text back into a :class:`DecodeResult`.

    Raises:
        DecodeError: *text* is non-empty and not valid JSON (non-raw only).
    """
    if raw:
        return DecodeResult.present(text)

    if not text:
        return DecodeResult.absent()

    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(key, e.msg) from e

    if value is None:
        return DecodeResult.absent()
    return DecodeResult.present(value)
