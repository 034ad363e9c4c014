"""Root-level pytest configuration for all tests."""

from __future__ import annotations

from typing import Callable
from unittest.mock import Mock

import pytest

from sporestack_client.transport.http import HttpTransport

TOKEN = "f" * 64

_PROXY_VARS = (
    "TOR_PROXY",
    "HTTP_PROXY",
    "HTTPS_PROXY",
    "ALL_PROXY",
    "NO_PROXY",
    "http_proxy",
    "https_proxy",
    "all_proxy",
    "no_proxy",
    "SPORESTACK_TOKEN",
    "SPORESTACK_TIMEOUT",
    "SPORESTACK_VERIFY_SSL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's proxy and client settings out of every test."""
    for name in _PROXY_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def token() -> str:
    return TOKEN


@pytest.fixture
def transport(token: str) -> HttpTransport:
    return HttpTransport("https://api.example.com", token)


def _make_response(status_code: int = 200, text: str = "", url: str = "https://api.example.com/") -> Mock:
    response = Mock()
    response.status_code = status_code
    response.text = text
    response.content = text.encode()
    response.url = url
    return response


@pytest.fixture
def make_response() -> Callable[..., Mock]:
    """Factory for stand-ins of requests.Response."""
    return _make_response
