"""Shared call template for resource services."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from sporestack_client.transport.exceptions import RequestConstructionError
from sporestack_client.transport.http import HttpTransport


class BaseService:
    """Serialize, send, decode.

    Args:
        transport: Shared HTTP transport
        token: Account token, interpolated into paths and bodies

    Attributes:
        transport: HTTP transport instance
        token: Account token
    """

    def __init__(self, transport: HttpTransport, token: str) -> None:
        self.transport = transport
        self.token = token

    def _call(
        self,
        method: str,
        path: str,
        payload: BaseModel | None = None,
        destination: Any = None,
    ) -> Any:
        body = None
        if payload is not None:
            try:
                body = payload.model_dump_json().encode()
            except PydanticSerializationError as e:
                raise RequestConstructionError(
                    message=f"Cannot serialize {type(payload).__name__}: {e}",
                    cause=e,
                ) from e

        request = self.transport.new_request(method, path, body)
        return self.transport.do_request(request, destination)
