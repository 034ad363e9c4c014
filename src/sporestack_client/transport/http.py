"""HTTP transport layer implementation.

This module builds authenticated requests against the API base address and
executes them through a pooled session with bounded retries. It knows no
endpoints: resource services hand it a method, a path and an already
serialized body.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

import requests
import structlog
from pydantic import TypeAdapter, ValidationError
from requests.adapters import HTTPAdapter

from sporestack_client.transport.exceptions import (
    ApiError,
    DeserializationError,
    RequestConstructionError,
    RetriesExhaustedError,
)
from sporestack_client.transport.retry import build_retry, is_retryable_status
from sporestack_client.version import __version__

USER_AGENT = f"sporestack-client/{__version__}"

# Failures that mean the request itself was malformed, not the network.
_CONSTRUCTION_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    requests.exceptions.InvalidHeader,
)


def _silent_logger() -> Any:
    """Logger that drops everything below CRITICAL; the transport only logs debug."""
    return structlog.wrap_logger(
        None,
        wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
    )


@lru_cache(maxsize=64)
def _adapter_for(destination: Any) -> TypeAdapter[Any]:
    return TypeAdapter(destination)


class HttpTransport:
    """HTTP transport for the SporeStack API.

    Owns the ``requests.Session`` (and so the connection pool), the bearer
    token and the retry policy. Instances are read-only after construction
    and safe to share between threads.

    Features:
        - Authorization and User-Agent headers on every request
        - Bounded exponential backoff on network errors and 429/5xx
        - Optional exclusive proxy (Tor), else ambient proxy settings
        - Uniform error translation

    Args:
        base_url: API origin, without trailing slash
        token: Account token sent as bearer credential
        timeout: Per-attempt timeout in seconds (default: 30)
        retries: Retries after the first attempt (default: 3)
        backoff_min: Shortest wait between attempts in seconds (default: 0.3)
        backoff_max: Longest wait between attempts in seconds (default: 0.9)
        verify_ssl: Whether to verify SSL certificates (default: True)
        proxy: Proxy URL all traffic must go through (default: None)
        logger: structlog logger for debug events (default: None, silent)

    Attributes:
        base_url: API origin
        timeout: Per-attempt timeout in seconds
        retries: Retries after the first attempt
        session: Configured requests session

    Example:
        >>> transport = HttpTransport("https://api.sporestack.com", "token")
        >>> request = transport.new_request("GET", "/token/token/info")
        >>> info = transport.do_request(request, TokenInfo)
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30,
        retries: int = 3,
        backoff_min: float = 0.3,
        backoff_max: float = 0.9,
        verify_ssl: bool = True,
        proxy: str | None = None,
        logger: Any = None,
    ) -> None:
        if not base_url:
            raise ValueError("base_url cannot be empty")
        if retries < 0:
            raise ValueError("retries cannot be negative")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retries = retries
        self.proxy = proxy
        self.logger = (logger if logger is not None else _silent_logger()).bind(
            base_url=self.base_url
        )
        self._token = token
        self._retry = build_retry(retries, backoff_min, backoff_max)
        self.session = self._create_session(verify_ssl)

    def _create_session(self, verify_ssl: bool) -> requests.Session:
        """Create the pooled session carrying the retry policy.

        With a proxy configured, environment settings are ignored entirely so
        that ``NO_PROXY`` or ``HTTPS_PROXY`` cannot route around it.

        Args:
            verify_ssl: Whether to verify SSL certificates

        Returns:
            Configured requests session
        """
        session = requests.Session()
        session.verify = verify_ssl

        adapter = HTTPAdapter(
            max_retries=self._retry,
            pool_connections=10,
            pool_maxsize=10,
        )
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        if self.proxy:
            session.trust_env = False
            session.proxies = {"http": self.proxy, "https": self.proxy}

        return session

    @property
    def attempts(self) -> int:
        """Total attempts a request gets before giving up."""
        return self.retries + 1

    def new_request(
        self,
        method: str,
        path: str,
        body: bytes | None = None,
    ) -> requests.PreparedRequest:
        """Build an authenticated request.

        Args:
            method: HTTP method (e.g., "GET", "POST")
            path: Path appended verbatim to the base URL, query included
            body: Pre-serialized JSON payload, sent unmodified

        Returns:
            Prepared request ready for do_request()

        Raises:
            RequestConstructionError: If the URL or headers are invalid

        Example:
            >>> request = transport.new_request("POST", "/server/abc/stop")
            >>> request.headers["User-Agent"]
            'sporestack-client/1.0.0'
        """
        url = f"{self.base_url}{path}"

        headers = {
            "Authorization": f"Bearer: {self._token}",
            "User-Agent": USER_AGENT,
        }
        if body is not None:
            headers["Content-Type"] = "application/json"

        request = requests.Request(method=method, url=url, headers=headers, data=body)
        try:
            return self.session.prepare_request(request)
        except (requests.exceptions.RequestException, ValueError) as e:
            raise RequestConstructionError(
                message=f"Cannot build {method} {url}: {e}",
                cause=e,
            ) from e

    def do_request(
        self,
        request: requests.PreparedRequest,
        destination: Any = None,
    ) -> Any:
        """Send a request and decode a 200 response.

        Args:
            request: Request from new_request()
            destination: Type to validate the JSON body into (a model class,
                ``list[Machine]``, ``str``...); None to ignore the body

        Returns:
            Decoded body, or None when no destination was given

        Raises:
            RequestConstructionError: If no adapter can send the request
            RetriesExhaustedError: If every attempt failed. Any other
                requests error (``TooManyRedirects``, ``ChunkedEncodingError``
                while reading the body...) is reported the same way; urllib3
                never retried those, so ``attempts`` is nominal there.
            ApiError: If the final response is not 200
            DeserializationError: If a 200 body does not match destination

        Example:
            >>> request = transport.new_request("GET", "/server/quote?days=1")
            >>> quote = transport.do_request(request, QuoteResponse)
        """
        self.logger.debug("Request sent", method=request.method, url=request.url)

        try:
            response = self.session.send(request, timeout=self.timeout)
        except _CONSTRUCTION_ERRORS as e:
            raise RequestConstructionError(
                message=f"Cannot send {request.method} {request.url}: {e}",
                cause=e,
            ) from e
        except requests.exceptions.RequestException as e:
            self.logger.debug(
                "Retries exhausted",
                url=request.url,
                attempts=self.attempts,
                error=str(e),
            )
            raise RetriesExhaustedError(self.attempts, cause=e) from e

        try:
            return self._handle_response(response, destination)
        finally:
            response.close()

    def _handle_response(self, response: requests.Response, destination: Any) -> Any:
        status_code = response.status_code
        body = response.text
        self.logger.debug("Response received", url=response.url, status_code=status_code)

        if status_code == 200:
            if destination is None:
                return None
            try:
                return _adapter_for(destination).validate_json(response.content)
            except ValidationError as e:
                raise DeserializationError(
                    message=f"Invalid response body for {destination!r}: {e}",
                    body=body,
                    cause=e,
                ) from e

        # urllib3 only hands back a retryable status once the budget is spent.
        if is_retryable_status(status_code):
            self.logger.debug(
                "Retries exhausted",
                url=response.url,
                attempts=self.attempts,
                status_code=status_code,
            )
            raise RetriesExhaustedError(
                self.attempts,
                status_code=status_code,
                body=body.strip(),
            )

        raise ApiError(status_code, body)

    def close(self) -> None:
        """Close the HTTP session and release pooled connections."""
        self.session.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
