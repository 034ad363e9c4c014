"""Transport layer for the SporeStack client.

This module handles HTTP communication with no knowledge of API resources.
It is responsible for:
- Building authenticated requests against the base address
- Connection pooling and proxy routing
- Retry logic with bounded backoff
- Translating every failure into one exception hierarchy
"""

from sporestack_client.transport.exceptions import (
    ApiError,
    ConfigurationError,
    DeserializationError,
    RequestConstructionError,
    RetriesExhaustedError,
    SporeStackError,
)
from sporestack_client.transport.http import HttpTransport
from sporestack_client.transport.retry import BoundedRetry

__all__ = [
    "HttpTransport",
    "BoundedRetry",
    "SporeStackError",
    "ConfigurationError",
    "RequestConstructionError",
    "RetriesExhaustedError",
    "ApiError",
    "DeserializationError",
]
