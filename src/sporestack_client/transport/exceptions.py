"""Transport layer exceptions.

Every failure surfaced by the client is one of these. They separate the
four ways a call can fail so callers can tell a request that never left
the process from a service that kept failing, a service that rejected the
call, and a service that answered with something unreadable.
"""

from __future__ import annotations


class SporeStackError(Exception):
    """Base exception for all client errors.

    Args:
        message: Human-readable error description
        status_code: HTTP status code if a response was received
        cause: Original exception that caused this error

    Attributes:
        message: Error message
        status_code: HTTP status code (or None)
        cause: Original exception (or None)
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause

    def __str__(self) -> str:
        return self.message


class ConfigurationError(SporeStackError):
    """Client settings are unusable.

    Raised while constructing a client, e.g. when ``TOR_PROXY`` is not a
    proxy URL.
    """

    pass


class RequestConstructionError(SporeStackError):
    """The request could not be built.

    Raised before anything is sent: an unparseable URL, an unsupported
    scheme, or a payload that cannot be serialized. Never retried.
    """

    pass


class RetriesExhaustedError(SporeStackError):
    """The retry budget ran out.

    Raised when every attempt failed at the network level or with a
    retryable status. ``cause`` holds the last network error when no
    response came back; otherwise ``status_code`` and ``body`` describe the
    last response and both appear in the message.

    Attributes:
        attempts: Total number of attempts made
        body: Trimmed text of the last response body (or None)

    Example:
        >>> str(RetriesExhaustedError(4, status_code=503, body="busy"))
        "gave up after 4 attempts, last error: 503 'busy'"
    """

    def __init__(
        self,
        attempts: int,
        status_code: int | None = None,
        body: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        if body is not None:
            detail = repr(body) if status_code is None else f"{status_code} {body!r}"
        elif cause is not None:
            detail = str(cause)
        else:
            detail = "unavailable"
        super().__init__(
            f"gave up after {attempts} attempts, last error: {detail}",
            status_code=status_code,
            cause=cause,
        )
        self.attempts = attempts
        self.body = body


class ApiError(SporeStackError):
    """The API answered with a non-200 status.

    The status code and the raw body are kept as-is; interpreting them
    (quota exceeded, unknown machine, ...) is up to the caller.

    Attributes:
        body: Raw response body text
    """

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"error {status_code} {body}", status_code=status_code)
        self.body = body


class DeserializationError(SporeStackError):
    """A 200 response body did not match the expected schema.

    Attributes:
        body: Raw response body text
    """

    def __init__(self, message: str, body: str, cause: Exception | None = None) -> None:
        super().__init__(message, status_code=200, cause=cause)
        self.body = body
