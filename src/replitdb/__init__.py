"""replitdb — async client for the Replit Database HTTP API.

Single-key operations map one-to-one onto HTTP requests.  Multi-key
operations fan out over them without transactions: deletes run
concurrently, reads and writes run one at a time.
"""

from replitdb.client import StoreClient
from replitdb.codec import DecodeResult
from replitdb.config import ClientConfig
from replitdb.exceptions import (
    ConfigurationError,
    DecodeError,
    EncodeError,
    ReplitDBError,
    TransportError,
)
from replitdb.transport import HttpxTransport, Transport

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "DecodeError",
    "DecodeResult",
    "EncodeError",
    "HttpxTransport",
    "ReplitDBError",
    "StoreClient",
    "Transport",
    "TransportError",
]
