"""Python client for the SporeStack server-provisioning API.

Example:
    >>> from sporestack_client import LaunchRequest, SporeStackClient
    >>> client = SporeStackClient("my-token")
    >>> response = client.servers.launch(LaunchRequest(flavor="vps-1", days=7))
"""

from sporestack_client.client import BASE_URL, TOR_BASE_URL, SporeStackClient
from sporestack_client.config import ClientSettings
from sporestack_client.models import (
    Flavor,
    LaunchRequest,
    LaunchResponse,
    Machine,
    Payment,
    QuoteResponse,
    TokenInfo,
    TopUpRequest,
    UpdateRequest,
)
from sporestack_client.transport.exceptions import (
    ApiError,
    ConfigurationError,
    DeserializationError,
    RequestConstructionError,
    RetriesExhaustedError,
    SporeStackError,
)
from sporestack_client.version import __version__

__all__ = [
    "__version__",
    "BASE_URL",
    "TOR_BASE_URL",
    "SporeStackClient",
    "ClientSettings",
    # Models
    "Flavor",
    "LaunchRequest",
    "LaunchResponse",
    "Machine",
    "Payment",
    "QuoteResponse",
    "TokenInfo",
    "TopUpRequest",
    "UpdateRequest",
    # Exceptions
    "SporeStackError",
    "ConfigurationError",
    "RequestConstructionError",
    "RetriesExhaustedError",
    "ApiError",
    "DeserializationError",
]
