"""Service layer for the SporeStack client.

One service per API resource. Each method serializes its request model,
sends it through the shared transport and decodes the response; all
business rules live on the API side.
"""

from __future__ import annotations

from sporestack_client.services.server import ServerService
from sporestack_client.services.token import TokenService

__all__ = [
    "ServerService",
    "TokenService",
]
