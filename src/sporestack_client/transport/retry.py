"""Retry policy for the HTTP transport.

urllib3's stock ``Retry`` sleeps ``backoff_factor * 2 ** (n - 1)`` and skips
the sleep before the first retry. The API rate limits per request, so every
retry has to wait at least a floor and never more than a ceiling.
"""

from __future__ import annotations

from itertools import takewhile
from typing import Any

from urllib3.util.retry import Retry


def is_retryable_status(status_code: int) -> bool:
    """Whether a response status is worth another attempt.

    429 and every 5xx except 501 Not Implemented, which no retry can fix.

    Example:
        >>> is_retryable_status(520), is_retryable_status(501)
        (True, False)
    """
    return status_code == 429 or (status_code >= 500 and status_code != 501)


class BoundedRetry(Retry):
    """urllib3 ``Retry`` whose backoff stays within ``[backoff_min, backoff_max]``.

    The n-th consecutive retry waits ``backoff_min * 2 ** (n - 1)`` seconds,
    clamped to ``backoff_max``. With a 0.3 s floor and a 0.9 s ceiling the
    waits are 0.3, 0.6, 0.9, 0.9, ...

    Args:
        backoff_min: Shortest wait before a retry, in seconds
        **kwargs: Passed through to ``urllib3.util.retry.Retry``

    Example:
        >>> retry = BoundedRetry(total=3, backoff_min=0.3, backoff_max=0.9)
        >>> retry.get_backoff_time()
        0.0
    """

    def __init__(self, *args: Any, backoff_min: float = 0.0, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if backoff_min < 0:
            raise ValueError("backoff_min cannot be negative")
        if backoff_min > self.backoff_max:
            raise ValueError("backoff_min cannot exceed backoff_max")
        self.backoff_min = backoff_min

    def new(self, **kw: Any) -> BoundedRetry:
        # Retry.increment() rebuilds the policy through new(); carry the floor.
        kw.setdefault("backoff_min", self.backoff_min)
        return super().new(**kw)  # type: ignore[return-value]

    def is_retry(self, method: str, status_code: int, has_retry_after: bool = False) -> bool:
        """Retry 429 and 5xx (except 501) for any allowed method.

        ``status_forcelist`` cannot express an open range like 520-599, so
        the status check lives here instead.
        """
        if not self._is_method_retryable(method):
            return False
        return is_retryable_status(status_code)

    def get_backoff_time(self) -> float:
        """Seconds to wait before the next attempt.

        Returns:
            0 before any failure, otherwise a value in
            ``[backoff_min, backoff_max]``
        """
        consecutive_errors = len(
            list(takewhile(lambda x: x.redirect_location is None, reversed(self.history)))
        )
        if consecutive_errors == 0:
            return 0.0
        backoff = self.backoff_min * (2 ** (consecutive_errors - 1))
        return float(max(self.backoff_min, min(self.backoff_max, backoff)))


def build_retry(retries: int, backoff_min: float, backoff_max: float) -> BoundedRetry:
    """Create the transport's retry policy.

    Every HTTP method is retried, not only idempotent ones, on network
    errors and on the statuses ``is_retryable_status`` accepts.
    Exhausting the budget on a retryable status hands the last response
    back instead of raising, so its body can be reported.

    Args:
        retries: Retries after the first attempt
        backoff_min: Shortest wait between attempts, in seconds
        backoff_max: Longest wait between attempts, in seconds

    Returns:
        Configured retry policy
    """
    return BoundedRetry(
        total=retries,
        backoff_min=backoff_min,
        backoff_max=backoff_max,
        allowed_methods=None,
        raise_on_status=False,
        respect_retry_after_header=True,
    )
