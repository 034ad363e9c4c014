"""Token service for account balance and invoices."""

from __future__ import annotations

from sporestack_client.models import Payment, TokenInfo
from sporestack_client.services.base import BaseService


class TokenService(BaseService):
    """Account-level lookups for one token.

    Example:
        >>> info = client.token_info.info()
        >>> print(info.days_remaining)
        12
    """

    def info(self) -> TokenInfo:
        """Fetch the token's balance, burn rate and server counts."""
        result: TokenInfo = self._call(
            "GET",
            f"/token/{self.token}/info",
            destination=TokenInfo,
        )
        return result

    def invoices(self) -> list[Payment]:
        """Fetch every invoice issued for the token, paid or not."""
        result: list[Payment] = self._call(
            "GET",
            f"/token/{self.token}/invoices",
            destination=list[Payment],
        )
        return result
