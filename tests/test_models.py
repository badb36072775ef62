"""Tests for registry models."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from property_registry.models import (
    NULL_IDENTITY,
    Event,
    Property,
    PropertyRegistered,
    PropertyTransferred,
    PropertyValueUpdated,
    Transaction,
    TransactionType,
    is_null_identity,
)

from tests.conftest import ALICE, BOB

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestTransactionType:
    def test_values(self) -> None:
        assert TransactionType.REGISTRATION.value == "registration"
        assert TransactionType.TRANSFER.value == "transfer"

    def test_sale_is_reserved(self) -> None:
        assert TransactionType("sale") is TransactionType.SALE

    def test_is_str(self) -> None:
        assert TransactionType.TRANSFER == "transfer"


class TestNullIdentity:
    @pytest.mark.parametrize("identity", [None, "", NULL_IDENTITY])
    def test_null(self, identity: str | None) -> None:
        assert is_null_identity(identity)

    def test_real_identity(self) -> None:
        assert not is_null_identity(ALICE)


class TestProperty:
    def test_defaults_to_active(self) -> None:
        prop = Property(
            property_id=1,
            property_address="123 Main St",
            description="house",
            current_owner=ALICE,
            current_value=1000,
            registration_date=NOW,
        )

        assert prop.is_active is True


class TestTransaction:
    def test_is_immutable(self) -> None:
        tx = Transaction(
            transaction_id=1,
            property_id=1,
            previous_owner=None,
            new_owner=ALICE,
            transaction_value=1000,
            timestamp=NOW,
            transaction_type=TransactionType.REGISTRATION,
        )

        with pytest.raises(FrozenInstanceError):
            tx.new_owner = BOB  # type: ignore[misc]


class TestNotifications:
    def test_registered_event(self) -> None:
        event = PropertyRegistered(1, ALICE, "123 Main St").to_event(NOW)

        assert isinstance(event, Event)
        assert event.event_type == "property.registered"
        assert event.subject == "1"
        assert event.event_time == NOW
        assert event.source == "property-registry"
        assert event.data == {"property_id": 1, "owner": ALICE, "property_address": "123 Main St"}

    def test_transferred_event(self) -> None:
        event = PropertyTransferred(1, ALICE, BOB, 2000).to_event(NOW)

        assert event.event_type == "property.transferred"
        assert event.data == {
            "property_id": 1,
            "previous_owner": ALICE,
            "new_owner": BOB,
            "transaction_value": 2000,
        }

    def test_value_updated_event(self) -> None:
        event = PropertyValueUpdated(1, 2000, 2500).to_event(NOW)

        assert event.event_type == "property.value_updated"
        assert event.data == {"property_id": 1, "old_value": 2000, "new_value": 2500}

    def test_event_ids_are_unique(self) -> None:
        notification = PropertyValueUpdated(1, 1, 2)

        assert notification.to_event(NOW).event_id != notification.to_event(NOW).event_id
