"""Registry data store: properties, transaction log and owner index."""

from dataclasses import dataclass, field

from property_registry.exceptions import InvariantViolationError
from property_registry.models import Property, Transaction, TransactionType


@dataclass
class RegistryStore:
    """In-memory store for registry state with relationship tracking.

    The store does no authorization. Callers (the registry) validate first
    and then apply mutations that cannot fail half way.
    """

    contract_owner: str

    # Primary entities
    properties: dict[int, Property] = field(default_factory=dict)

    # Transaction log arena, all properties, append order
    transactions: list[Transaction] = field(default_factory=list)

    # Counters (last assigned id, never decremented)
    property_counter: int = 0
    transaction_counter: int = 0

    # Relationship indexes
    _property_transactions: dict[int, list[int]] = field(default_factory=dict)
    _owner_properties: dict[str, list[int]] = field(default_factory=dict)

    def next_property_id(self) -> int:
        """Advance and return the property counter."""
        self.property_counter += 1
        return self.property_counter

    def next_transaction_id(self) -> int:
        """Advance and return the transaction counter."""
        self.transaction_counter += 1
        return self.transaction_counter

    def add_property(self, prop: Property) -> None:
        """Add a property to the store."""
        self.properties[prop.property_id] = prop
        self._property_transactions[prop.property_id] = []

    def append_transaction(self, transaction: Transaction) -> None:
        """Append a transaction to the log of its property."""
        idx = len(self.transactions)
        self.transactions.append(transaction)
        self._property_transactions[transaction.property_id].append(idx)

    def add_owned_property(self, owner: str, property_id: int) -> None:
        """Append a property id to an owner's index entry."""
        self._owner_properties.setdefault(owner, []).append(property_id)

    def remove_owned_property(self, owner: str, property_id: int) -> None:
        """Remove a property id from an owner's index entry.

        Swap-and-pop: the matching slot is overwritten with the last element
        and the last slot is dropped, so the remaining order changes.
        """
        owned = self._owner_properties.get(owner, [])
        for i, pid in enumerate(owned):
            if pid == property_id:
                owned[i] = owned[-1]
                owned.pop()
                return

    # Query methods
    def get_property(self, property_id: int) -> Property | None:
        """Get an active property, or None if missing or inactive."""
        prop = self.properties.get(property_id)
        if prop is None or not prop.is_active:
            return None
        return prop

    def get_property_transactions(self, property_id: int) -> list[Transaction]:
        """Get the ordered transaction history for a property."""
        indices = self._property_transactions.get(property_id, [])
        return [self.transactions[i] for i in indices]

    def get_owned_properties(self, owner: str) -> list[int]:
        """Get a copy of the property ids currently owned by an identity."""
        return list(self._owner_properties.get(owner, []))

    def owner_index(self) -> dict[str, list[int]]:
        """Copy of the owner index, omitting owners with no properties."""
        return {owner: list(owned) for owner, owned in self._owner_properties.items() if owned}

    def summary(self) -> dict[str, int]:
        """Return summary counts of registry state."""
        return {
            "properties": len(self.properties),
            "transactions": len(self.transactions),
            "owners": sum(1 for owned in self._owner_properties.values() if owned),
            "property_counter": self.property_counter,
            "transaction_counter": self.transaction_counter,
        }

    def check_invariants(self) -> None:
        """Verify owner index and history consistency.

        Raises
        ------
        InvariantViolationError
            If any active property is indexed under the wrong owner, indexed
            more than once, or has a history not starting with registration.
        """
        seen: dict[int, str] = {}
        for owner, owned in self._owner_properties.items():
            for pid in owned:
                if pid in seen:
                    raise InvariantViolationError(
                        f"Property {pid} indexed under both {seen[pid]} and {owner}"
                    )
                seen[pid] = owner

        for pid, prop in self.properties.items():
            if not prop.is_active:
                continue
            if seen.get(pid) != prop.current_owner:
                raise InvariantViolationError(
                    f"Property {pid} owned by {prop.current_owner} but indexed under {seen.get(pid)}"
                )
            history = self.get_property_transactions(pid)
            if (
                not history
                or history[0].transaction_type != TransactionType.REGISTRATION
                or history[0].previous_owner is not None
            ):
                raise InvariantViolationError(f"Property {pid} history does not start with registration")

        if self.transactions and self.transactions[-1].transaction_id != self.transaction_counter:
            raise InvariantViolationError("Transaction counter out of step with the log")
