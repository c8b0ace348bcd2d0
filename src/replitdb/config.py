"""Client configuration resolved from arguments or the environment."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from replitdb.exceptions import ConfigurationError

URL_ENV_VAR = "REPLIT_DB_URL"
DEFAULT_TIMEOUT = 30.0


class ClientConfig(BaseModel):
    """Validated settings for :class:`~replitdb.client.StoreClient`.

    Attributes:
        url:     Base URL of the database.  Trailing slashes are stripped.
        timeout: Per-request timeout in seconds, ``None`` to wait forever.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    timeout: float | None = DEFAULT_TIMEOUT

    @field_validator("url")
    @classmethod
    def check_url(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("database URL is empty")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"database URL must be http(s), got {v!r}")
        return v

    @classmethod
    def resolve(
        cls,
        url: str | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> ClientConfig:
        """Build a config from *url*, falling back to ``REPLIT_DB_URL``.

        Raises:
            ConfigurationError: Neither source provides a valid URL.
        """
        resolved = url or os.getenv(URL_ENV_VAR, "")
        if not resolved:
            raise ConfigurationError(
                f"Database URL not configured (pass url or set {URL_ENV_VAR} env var)"
            )
        try:
            return cls(url=resolved, timeout=timeout)
        except ValidationError as e:
            errors = "; ".join(err["msg"] for err in e.errors())
            raise ConfigurationError(f"Invalid database configuration: {errors}") from e
