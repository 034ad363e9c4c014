"""Configuration for the SporeStack client.

Settings come from keyword arguments, then environment variables, then
defaults:

- SPORESTACK_TOKEN: account token used by SporeStackClient.from_env()
- SPORESTACK_TIMEOUT: per-attempt timeout in seconds
- SPORESTACK_VERIFY_SSL: whether to verify SSL certificates (true/false)
- TOR_PROXY: proxy every request must go through (e.g. socks5h://127.0.0.1:9050)
"""

from __future__ import annotations

from urllib.parse import urlsplit

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """SporeStack client settings.

    Attributes:
        token: Account token (optional; a client can be given one directly)
        timeout: Per-attempt timeout in seconds
        verify_ssl: Whether to verify SSL certificates
        tor_proxy: Proxy URL, None to use the ambient proxy settings

    Example:
        >>> settings = ClientSettings(tor_proxy="socks5h://127.0.0.1:9050")
        >>> print(settings.timeout)
        30.0
    """

    token: str | None = Field(default=None)
    timeout: float = Field(default=30.0, gt=0, le=600)
    verify_ssl: bool = Field(default=True)
    tor_proxy: str | None = Field(
        default=None,
        validation_alias=AliasChoices("TOR_PROXY", "tor_proxy"),
    )

    model_config = SettingsConfigDict(
        env_prefix="SPORESTACK_",
        case_sensitive=False,
        populate_by_name=True,
    )

    @field_validator("tor_proxy")
    @classmethod
    def validate_tor_proxy(cls, v: str | None) -> str | None:
        """Require a scheme and a host; treat an empty value as unset."""
        if v is None or not v.strip():
            return None
        v = v.strip()
        parts = urlsplit(v)
        if not parts.scheme or not parts.hostname:
            raise ValueError(f"TOR_PROXY must be a proxy URL like socks5h://host:port, got {v!r}")
        return v
