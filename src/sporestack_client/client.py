"""SporeStack API client.

``SporeStackClient`` wires one ``HttpTransport`` to the resource services.
Every service shares that transport, so a client holds exactly one
connection pool.
"""

from __future__ import annotations

from typing import Any

import requests
from pydantic import ValidationError

from sporestack_client.config import ClientSettings
from sporestack_client.services.server import ServerService
from sporestack_client.services.token import TokenService
from sporestack_client.transport.exceptions import ConfigurationError
from sporestack_client.transport.http import HttpTransport

BASE_URL = "https://api.sporestack.com"
TOR_BASE_URL = "https://api.spore64i5sofqlfz5gq2ju4msgzojjwifls7rok2cti624zyq3fcelad.onion"

RETRY_LIMIT = 3
MAX_RATE_LIMIT = 0.9  # seconds


class SporeStackClient:
    """Client for the SporeStack API.

    When ``TOR_PROXY`` is set, every request goes through that proxy to the
    onion address. Otherwise requests go to the clear-web address using the
    ambient ``HTTP(S)_PROXY`` settings, if any.

    Retries: up to 3 after the first attempt, waiting between a third of
    900 ms and 900 ms.

    Args:
        token: Account token
        settings: Client settings (default: loaded from the environment)
        logger: structlog logger for request events (default: None, silent)

    Attributes:
        token: Account token
        transport: Shared HTTP transport
        servers: Server operations
        token_info: Token balance and invoice lookups

    Example:
        >>> with SporeStackClient("my-token") as client:
        ...     for machine in client.servers.list_servers():
        ...         print(machine.machine_id, machine.running)
    """

    def __init__(
        self,
        token: str,
        settings: ClientSettings | None = None,
        logger: Any = None,
    ) -> None:
        if settings is None:
            settings = load_settings()

        self.token = token
        self.settings = settings
        self.transport = HttpTransport(
            base_url=TOR_BASE_URL if settings.tor_proxy else BASE_URL,
            token=token,
            timeout=settings.timeout,
            retries=RETRY_LIMIT,
            backoff_min=MAX_RATE_LIMIT / 3,
            backoff_max=MAX_RATE_LIMIT,
            verify_ssl=settings.verify_ssl,
            proxy=settings.tor_proxy,
            logger=logger,
        )
        self.servers = ServerService(self.transport, token)
        self.token_info = TokenService(self.transport, token)

    @classmethod
    def from_env(cls, logger: Any = None) -> SporeStackClient:
        """Create a client from SPORESTACK_TOKEN and the other settings.

        Raises:
            ConfigurationError: If no token is configured or a setting is invalid
        """
        settings = load_settings()
        if not settings.token:
            raise ConfigurationError("SPORESTACK_TOKEN is not set")
        return cls(settings.token, settings=settings, logger=logger)

    def new_request(self, method: str, path: str, body: bytes | None = None) -> requests.PreparedRequest:
        """Build an authenticated request for an endpoint without a service method."""
        return self.transport.new_request(method, path, body)

    def do_request(self, request: requests.PreparedRequest, destination: Any = None) -> Any:
        """Send a request built by new_request() and decode the response."""
        return self.transport.do_request(request, destination)

    def close(self) -> None:
        """Release pooled connections."""
        self.transport.close()

    def __enter__(self) -> SporeStackClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def load_settings(**overrides: Any) -> ClientSettings:
    """Load settings from the environment, translating validation failures.

    Raises:
        ConfigurationError: If a setting is invalid
    """
    try:
        return ClientSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", cause=e) from e
