"""Custom exceptions for the replitdb package."""

from __future__ import annotations


class ReplitDBError(Exception):
    """Base exception for all client errors."""


class ConfigurationError(ReplitDBError):
    """Raised when no usable database URL is available at construction."""


class DecodeError(ReplitDBError):
    """Raised when a stored value is not valid JSON.

    The raw text is still reachable with ``get(key, raw=True)``.
    """

    def __init__(self, key: str, detail: str = "") -> None:
        self.key = key
        self.raw_hint = True
        msg = f"Failed to parse value of '{key}', try passing raw=True to get the raw value"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class EncodeError(ReplitDBError, TypeError):
    """Raised when a value cannot be serialized to JSON."""

    def __init__(self, key: str, detail: str = "") -> None:
        self.key = key
        msg = f"Value of '{key}' is not JSON serializable"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class TransportError(ReplitDBError):
    """Raised by the transport when a request fails or returns a non-success status."""

    def __init__(
        self,
        method: str,
        url: str,
        status_code: int | None = None,
        detail: str = "",
    ) -> None:
        self.method = method
        self.url = url
        self.status_code = status_code
        msg = f"{method} {url} failed"
        if status_code is not None:
            msg += f": HTTP {status_code}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
