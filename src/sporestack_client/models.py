"""SporeStack API data contracts.

Pydantic models mirroring the JSON objects the API sends and accepts.
They carry no behavior. Unknown keys are ignored and missing fields fall
back to the zero value the API would have sent, so older or newer API
versions still decode; a field of the wrong type does not.

Nullable fields (``deleted_by``, ``forgotten_at``, ``suspended_at``,
``affiliate_token``) are ``None`` when the event has not happened. An empty
string is never used for that.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class Flavor(_ApiModel):
    """Hardware and pricing class of a server.

    Attributes:
        slug: Flavor identifier (e.g., "vps-1vcpu-1gb")
        cores: Number of vCPUs
        memory: Memory in MiB
        disk: Disk in GiB
        price: Price in cents per day
        bandwidth: Bandwidth in gigabytes per month
        bandwidth_per_month: Bandwidth in terabytes per month
        provider_slug: Provider the flavor belongs to
    """

    slug: str = ""
    cores: int = Field(default=0, ge=0)
    memory: int = Field(default=0, ge=0)
    disk: int = Field(default=0, ge=0)
    price: int = Field(default=0, ge=0)
    ipv4: str = ""
    ipv6: str = ""
    bandwidth: int = Field(default=0, ge=0)
    bandwidth_per_month: float = Field(default=0.0, ge=0)
    provider_slug: str = ""
    provider: str = ""


class Machine(_ApiModel):
    """A provisioned server.

    Timestamps are Unix seconds. ``deleted_by``, ``forgotten_at`` and
    ``suspended_at`` stay None until the event happens.

    Example:
        >>> machine = Machine.model_validate_json('{"machine_id": "abcd"}')
        >>> machine.deleted_by is None
        True
    """

    machine_id: str = ""
    created_at: int = Field(default=0, ge=0)
    expiration: int = Field(default=0, ge=0)
    token: str = ""
    region: str = ""
    ipv4: str = ""
    ipv6: str = ""
    deleted_at: int = Field(default=0, ge=0)
    deleted_by: str | None = None
    forgotten_at: str | None = None
    suspended_at: str | None = None
    provider: str = ""
    running: bool = False
    deny_smtp: bool = False
    flavor_slug: str = ""
    operating_system: str = ""
    hostname: str = ""
    autorenew: bool = False
    flavor: Flavor | None = None


class TokenInfo(_ApiModel):
    """Balance and usage snapshot of an account token."""

    balance_cents: int = Field(default=0, ge=0)
    balance_usd: str = ""
    burn_rate_cents: int = Field(default=0, ge=0)
    burn_rate_usd: str = ""
    days_remaining: int = Field(default=0, ge=0)
    servers: int = Field(default=0, ge=0)
    autorenew_servers: int = Field(default=0, ge=0)
    suspended_servers: int = Field(default=0, ge=0)


class Payment(_ApiModel):
    """Cryptocurrency invoice issued for a token.

    Attributes:
        payment_uri: URI a wallet can pay
        amount: Amount in the coin's smallest unit
        created: Creation time (Unix seconds)
        expires: Expiry time (Unix seconds)
        paid: Payment time (Unix seconds), 0 while unpaid
        affiliate_token: Referring token, None when there is none
        expired: Whether the invoice can no longer be paid
    """

    payment_uri: str = ""
    cryptocurrency: str = ""
    amount: int = Field(default=0, ge=0)
    fiat_per_coin: str = ""
    created: int = Field(default=0, ge=0)
    expires: int = Field(default=0, ge=0)
    paid: int = Field(default=0, ge=0)
    txid: str = ""
    affiliate_token: str | None = None
    id: str = ""
    expired: bool = False


class LaunchRequest(_ApiModel):
    """Body of a server launch."""

    flavor: str = ""
    ssh_key: str = ""
    operating_system: str = ""
    provider: str = ""
    autorenew: bool = False
    days: int = 0
    region: str = ""
    hostname: str = ""
    user_data: str = ""


class LaunchResponse(_ApiModel):
    machine_id: str = ""


class QuoteResponse(_ApiModel):
    cents: int = Field(default=0, ge=0)
    usd: str = ""


class TopUpRequest(_ApiModel):
    """Body of a server renewal. ``token`` pays for it; None lets the API pick."""

    days: int
    token: str | None = None


class UpdateRequest(_ApiModel):
    hostname: str = ""
    autorenew: bool = False
