"""Unit tests for API data contracts."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from sporestack_client.models import LaunchRequest, LaunchResponse, Machine, Payment, QuoteResponse, TopUpRequest

MACHINE_ID = "abcd1234abcd1234abcd1234abcd1234"


class TestMachineNullableFields:
    """Absent events stay absent; present ones keep their literal value."""

    def test_absent_fields_are_none(self) -> None:
        machine = Machine.model_validate_json(json.dumps({"machine_id": MACHINE_ID}))

        assert machine.deleted_by is None
        assert machine.forgotten_at is None
        assert machine.suspended_at is None

    def test_null_fields_are_none(self) -> None:
        machine = Machine.model_validate_json(
            json.dumps(
                {
                    "machine_id": MACHINE_ID,
                    "deleted_by": None,
                    "forgotten_at": None,
                    "suspended_at": None,
                }
            )
        )

        assert machine.deleted_by is None
        assert machine.forgotten_at is None
        assert machine.suspended_at is None

    def test_present_fields_keep_literal_values(self) -> None:
        machine = Machine.model_validate_json(
            json.dumps(
                {
                    "machine_id": MACHINE_ID,
                    "deleted_by": "user-42",
                    "forgotten_at": "2024-01-05T00:00:00Z",
                    "suspended_at": "",
                }
            )
        )

        assert machine.deleted_by == "user-42"
        assert machine.forgotten_at == "2024-01-05T00:00:00Z"
        assert machine.suspended_at == ""

    def test_absence_round_trips(self) -> None:
        machine = Machine.model_validate_json(json.dumps({"machine_id": MACHINE_ID, "deleted_by": "user-42"}))

        dumped = machine.model_dump(exclude_unset=True)

        assert dumped == {"machine_id": MACHINE_ID, "deleted_by": "user-42"}
        assert Machine.model_validate(machine.model_dump()) == machine


class TestMachineDecoding:
    def test_missing_machine_id_takes_zero_value(self) -> None:
        machine = Machine.model_validate_json("{}")

        assert machine.machine_id == ""
        assert LaunchResponse.model_validate_json("{}").machine_id == ""

    @pytest.mark.parametrize("field", ["created_at", "expiration", "deleted_at"])
    def test_negative_timestamps_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            Machine.model_validate({"machine_id": MACHINE_ID, field: -1})

    def test_unknown_keys_ignored(self) -> None:
        machine = Machine.model_validate({"machine_id": MACHINE_ID, "new_field": 1})

        assert not hasattr(machine, "new_field")

    def test_embedded_flavor(self) -> None:
        machine = Machine.model_validate(
            {
                "machine_id": MACHINE_ID,
                "flavor": {"slug": "vps-1", "bandwidth_per_month": 0.5, "provider": "p"},
            }
        )

        assert machine.flavor is not None
        assert machine.flavor.bandwidth_per_month == 0.5


class TestOtherContracts:
    def test_payment_affiliate_token_nullable(self) -> None:
        assert Payment.model_validate({}).affiliate_token is None
        assert Payment.model_validate({"affiliate_token": "t"}).affiliate_token == "t"

    def test_quote_cents_non_negative(self) -> None:
        with pytest.raises(ValidationError):
            QuoteResponse.model_validate({"cents": -5, "usd": "$0"})

    def test_topup_token_serialized_as_null(self) -> None:
        assert json.loads(TopUpRequest(days=3).model_dump_json()) == {"days": 3, "token": None}

    def test_launch_request_serializes_every_field(self) -> None:
        body = json.loads(LaunchRequest(flavor="vps-1", region="us-east", days=7).model_dump_json())

        assert set(body) == {
            "flavor",
            "ssh_key",
            "operating_system",
            "provider",
            "autorenew",
            "days",
            "region",
            "hostname",
            "user_data",
        }
