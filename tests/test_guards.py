"""Tests for authorization and validation guards."""

from datetime import datetime, timezone

import pytest

from property_registry.exceptions import (
    InvalidArgumentError,
    PropertyNotFoundError,
    RegistryError,
    UnauthorizedError,
)
from property_registry.guards import (
    first_failure,
    is_contract_owner,
    is_identity,
    is_property_owner,
    non_negative,
    property_exists,
    valid_new_owner,
)
from property_registry.models import NULL_IDENTITY, Property
from property_registry.store import RegistryStore

from tests.conftest import ALICE, BOB, DEPLOYER


@pytest.fixture
def store() -> RegistryStore:
    store = RegistryStore(contract_owner=DEPLOYER)
    store.add_property(
        Property(
            property_id=store.next_property_id(),
            property_address="123 Main St",
            description="house",
            current_owner=ALICE,
            current_value=1000,
            registration_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )
    )
    return store


class TestPropertyExists:
    def test_existing(self, store: RegistryStore) -> None:
        assert property_exists(store, 1) is None

    def test_missing(self, store: RegistryStore) -> None:
        assert isinstance(property_exists(store, 2), PropertyNotFoundError)

    def test_inactive(self, store: RegistryStore) -> None:
        store.properties[1].is_active = False

        assert isinstance(property_exists(store, 1), PropertyNotFoundError)


class TestIsPropertyOwner:
    def test_owner(self, store: RegistryStore) -> None:
        assert is_property_owner(store, 1, ALICE) is None

    def test_non_owner(self, store: RegistryStore) -> None:
        failure = is_property_owner(store, 1, BOB)

        assert isinstance(failure, UnauthorizedError)
        assert BOB in str(failure)


class TestIsContractOwner:
    def test_deployer(self, store: RegistryStore) -> None:
        assert is_contract_owner(store, DEPLOYER) is None

    def test_other(self, store: RegistryStore) -> None:
        assert isinstance(is_contract_owner(store, ALICE), UnauthorizedError)


class TestIsIdentity:
    @pytest.mark.parametrize("identity", [None, "", NULL_IDENTITY])
    def test_null(self, identity: str | None) -> None:
        failure = is_identity("caller", identity)

        assert isinstance(failure, InvalidArgumentError)
        assert "caller" in str(failure)

    def test_valid(self) -> None:
        assert is_identity("caller", ALICE) is None


class TestValidNewOwner:
    @pytest.mark.parametrize("new_owner", [None, "", NULL_IDENTITY])
    def test_null(self, new_owner: str | None) -> None:
        assert isinstance(valid_new_owner(new_owner, ALICE), InvalidArgumentError)

    def test_self_transfer(self) -> None:
        assert isinstance(valid_new_owner(ALICE, ALICE), InvalidArgumentError)

    def test_other(self) -> None:
        assert valid_new_owner(BOB, ALICE) is None


class TestNonNegative:
    def test_zero(self) -> None:
        assert non_negative("value", 0) is None

    def test_negative(self) -> None:
        assert isinstance(non_negative("value", -1), InvalidArgumentError)

    @pytest.mark.parametrize("value", [1.5, "10", True, None])
    def test_non_integer(self, value: object) -> None:
        assert isinstance(non_negative("value", value), InvalidArgumentError)  # type: ignore[arg-type]


class TestFirstFailure:
    def test_all_pass(self) -> None:
        assert first_failure(lambda: None, lambda: None) is None

    def test_no_checks(self) -> None:
        assert first_failure() is None

    def test_short_circuits(self) -> None:
        calls: list[str] = []

        def fail() -> RegistryError:
            calls.append("fail")
            return UnauthorizedError("first")

        def never() -> RegistryError | None:
            calls.append("never")
            return None

        failure = first_failure(lambda: None, fail, never)

        assert str(failure) == "first"
        assert calls == ["fail"]
