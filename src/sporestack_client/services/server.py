"""Server service for launching and managing machines.

Every method is a single API call. Quotas, pricing and provisioning are
decided by the API; errors come back as transport exceptions untouched.
"""

from __future__ import annotations

from urllib.parse import urlencode

from sporestack_client.models import (
    LaunchRequest,
    LaunchResponse,
    Machine,
    QuoteResponse,
    TopUpRequest,
    UpdateRequest,
)
from sporestack_client.services.base import BaseService

# No "/" between "token" and the token; kept verbatim for wire compatibility.
LIST_SERVERS_PATH = "/token{token}/servers"


class ServerService(BaseService):
    """Server operations for one account token.

    Example:
        >>> client = SporeStackClient("token")
        >>> response = client.servers.launch(
        ...     LaunchRequest(flavor="vps-1", region="us-east", days=7)
        ... )
        >>> response.machine_id
        'abcd1234abcd1234abcd1234abcd1234'
    """

    def launch(self, request: LaunchRequest) -> LaunchResponse:
        """Launch a server paid for by this token.

        Args:
            request: Launch parameters

        Returns:
            Response holding the new machine ID

        Raises:
            SporeStackError: If the call fails
        """
        result: LaunchResponse = self._call(
            "POST",
            f"/token/{self.token}/servers",
            payload=request,
            destination=LaunchResponse,
        )
        return result

    def list_servers(self) -> list[Machine]:
        """List every server launched by this token.

        Returns:
            Machines, including deleted ones not yet forgotten
        """
        result: list[Machine] = self._call(
            "GET",
            LIST_SERVERS_PATH.format(token=self.token),
            destination=list[Machine],
        )
        return result

    def quote(self, days: int, flavor: str, provider: str) -> QuoteResponse:
        """Price a server before launching it.

        Args:
            days: Number of days
            flavor: Flavor slug
            provider: Provider slug

        Returns:
            Price in cents and dollars
        """
        query = urlencode({"days": days, "flavor_slug": flavor, "provider": provider})
        result: QuoteResponse = self._call(
            "GET",
            f"/server/quote?{query}",
            destination=QuoteResponse,
        )
        return result

    def topup(self, machine_id: str, days: int) -> str:
        """Renew a server by a number of days, paid by this token.

        Consider autorenew instead (see update()).
        """
        result: str = self._call(
            "POST",
            f"/server/{machine_id}/topup",
            payload=TopUpRequest(days=days, token=self.token),
            destination=str,
        )
        return result

    def update(self, machine_id: str, hostname: str, autorenew: bool) -> str:
        """Change a server's hostname and autorenew flag."""
        result: str = self._call(
            "PATCH",
            f"/server/{machine_id}",
            payload=UpdateRequest(hostname=hostname, autorenew=autorenew),
            destination=str,
        )
        return result

    def delete(self, machine_id: str) -> str:
        """Delete a server; the API refunds roughly the unused balance."""
        result: str = self._call("DELETE", f"/server/{machine_id}", destination=str)
        return result

    def forget(self, machine_id: str) -> str:
        """Forget a deleted server so it no longer shows up in list_servers()."""
        result: str = self._call("POST", f"/server/{machine_id}/forget", destination=str)
        return result

    def rebuild(self, machine_id: str) -> str:
        """Reinstall a server with its original operating system and SSH key.

        All data on the server is lost. The rebuild takes a couple of
        minutes after the call returns.
        """
        result: str = self._call("POST", f"/server/{machine_id}/rebuild", destination=str)
        return result

    def stop(self, machine_id: str) -> str:
        """Power off a server immediately."""
        result: str = self._call("POST", f"/server/{machine_id}/stop", destination=str)
        return result
