"""Property registry state machine.

The registry owns a :class:`RegistryStore` and is the only thing that
mutates it. Every public operation takes the caller identity explicitly,
runs its guards before touching state and applies its mutations under the
write lock. The notification is queued under the lock and delivered after
it is released, in commit order, so sinks may query the registry. A rejected call
changes nothing and publishes nothing.
"""

import logging
import threading
from collections import deque
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Callable, Iterable

from property_registry.config import RegistryConfig
from property_registry.exceptions import RegistryError, SinkError
from property_registry.guards import (
    first_failure,
    is_identity,
    is_property_owner,
    non_negative,
    property_exists,
    valid_new_owner,
)
from property_registry.locking import ReadWriteLock
from property_registry.models import (
    Event,
    Notification,
    Property,
    PropertyRegistered,
    PropertyTransferred,
    PropertyValueUpdated,
    Transaction,
    TransactionType,
)
from property_registry.sinks import NotificationSink, build_sinks
from property_registry.sinks.serialization import to_dict
from property_registry.store import RegistryStore

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PropertyRegistry:
    """Registry of properties, their owners and ownership histories.

    Parameters
    ----------
    contract_owner : str
        Identity that created the registry. Recorded for privileged
        operations; no current operation is restricted to it.
    sinks : Iterable[NotificationSink]
        Destinations for notifications.
    clock : Callable[[], datetime] | None
        Source of timestamps (default: current UTC time).
    store : RegistryStore | None
        Existing state to operate on (default: a fresh, empty store).
    """

    def __init__(
        self,
        contract_owner: str,
        sinks: Iterable[NotificationSink] = (),
        clock: Callable[[], datetime] | None = None,
        store: RegistryStore | None = None,
    ) -> None:
        self.store = store if store is not None else RegistryStore(contract_owner=contract_owner)
        self.sinks = list(sinks)
        self._clock = clock or _utcnow
        self._lock = ReadWriteLock()
        self._closed = False
        self._pending: deque[Event] = deque()
        self._delivery_lock = threading.RLock()
        self._draining = False

    @property
    def contract_owner(self) -> str:
        return self.store.contract_owner

    # Lifecycle
    def close(self) -> None:
        """Close all sinks. Further mutations are rejected."""
        with self._lock.write():
            if self._closed:
                return
            self._closed = True
        self._deliver()
        for sink in self.sinks:
            sink.close()
        logger.info("Registry closed: %s", self.store.summary())

    def __enter__(self) -> "PropertyRegistry":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # State-changing operations
    def register_property(
        self,
        caller: str,
        property_address: str,
        description: str,
        initial_value: int,
    ) -> int:
        """Register a new property owned by ``caller``.

        Returns
        -------
        int
            The new property id. Ids start at 1 and are never reused.
        """
        with self._lock.write():
            self._reject_if(
                "register_property",
                self._open_check,
                lambda: is_identity("caller", caller),
                lambda: non_negative("initial_value", initial_value),
            )

            now = self._clock()
            store = self.store
            property_id = store.next_property_id()
            store.add_property(
                Property(
                    property_id=property_id,
                    property_address=property_address,
                    description=description,
                    current_owner=caller,
                    current_value=initial_value,
                    registration_date=now,
                )
            )
            store.add_owned_property(caller, property_id)
            store.append_transaction(
                Transaction(
                    transaction_id=store.next_transaction_id(),
                    property_id=property_id,
                    previous_owner=None,
                    new_owner=caller,
                    transaction_value=initial_value,
                    timestamp=now,
                    transaction_type=TransactionType.REGISTRATION,
                )
            )

            logger.info("Registered property %d for %s", property_id, caller)
            self._enqueue(PropertyRegistered(property_id, caller, property_address), now)
        self._deliver()
        return property_id

    def transfer_property(
        self,
        caller: str,
        property_id: int,
        new_owner: str,
        transaction_value: int,
    ) -> None:
        """Transfer a property from ``caller`` to ``new_owner``.

        Checks run in order: the property exists, the caller owns it, the
        recipient is not null and is not the caller, the value is unsigned.
        """
        with self._lock.write():
            store = self.store
            self._reject_if(
                "transfer_property",
                self._open_check,
                lambda: property_exists(store, property_id),
                lambda: is_property_owner(store, property_id, caller),
                lambda: valid_new_owner(new_owner, caller),
                lambda: non_negative("transaction_value", transaction_value),
            )

            now = self._clock()
            prop = store.properties[property_id]
            previous_owner = prop.current_owner
            prop.current_owner = new_owner
            prop.current_value = transaction_value

            store.remove_owned_property(previous_owner, property_id)
            store.add_owned_property(new_owner, property_id)
            store.append_transaction(
                Transaction(
                    transaction_id=store.next_transaction_id(),
                    property_id=property_id,
                    previous_owner=previous_owner,
                    new_owner=new_owner,
                    transaction_value=transaction_value,
                    timestamp=now,
                    transaction_type=TransactionType.TRANSFER,
                )
            )

            logger.info("Transferred property %d from %s to %s", property_id, previous_owner, new_owner)
            self._enqueue(
                PropertyTransferred(property_id, previous_owner, new_owner, transaction_value),
                now,
            )
        self._deliver()

    def update_property_value(self, caller: str, property_id: int, new_value: int) -> None:
        """Overwrite a property's current value.

        No transaction is appended; the change is only visible through the
        value-updated notification and the property's ``current_value``.
        """
        with self._lock.write():
            store = self.store
            self._reject_if(
                "update_property_value",
                self._open_check,
                lambda: property_exists(store, property_id),
                lambda: is_property_owner(store, property_id, caller),
                lambda: non_negative("new_value", new_value),
            )

            now = self._clock()
            prop = store.properties[property_id]
            old_value = prop.current_value
            prop.current_value = new_value

            logger.info("Updated value of property %d: %d -> %d", property_id, old_value, new_value)
            self._enqueue(PropertyValueUpdated(property_id, old_value, new_value), now)
        self._deliver()

    # Queries
    def get_property_history(self, property_id: int) -> list[Transaction]:
        """Return the property's transactions, oldest first."""
        with self._lock.read():
            self._reject_if("get_property_history", lambda: property_exists(self.store, property_id))
            return self.store.get_property_transactions(property_id)

    def get_properties_by_owner(self, owner: str) -> list[int]:
        """Return the ids currently owned by ``owner``. Order carries no meaning."""
        with self._lock.read():
            return self.store.get_owned_properties(owner)

    def get_property_details(self, property_id: int) -> Property:
        """Return a copy of the property record."""
        with self._lock.read():
            self._reject_if("get_property_details", lambda: property_exists(self.store, property_id))
            return replace(self.store.properties[property_id])

    def get_total_properties(self) -> int:
        with self._lock.read():
            return self.store.property_counter

    def get_total_transactions(self) -> int:
        with self._lock.read():
            return self.store.transaction_counter

    def summary(self) -> dict[str, int]:
        """Return summary counts of registry state."""
        with self._lock.read():
            return self.store.summary()

    def snapshot(self) -> dict[str, Any]:
        """Return a JSON-serializable copy of the full registry state."""
        with self._lock.read():
            store = self.store
            return {
                "contract_owner": store.contract_owner,
                "property_counter": store.property_counter,
                "transaction_counter": store.transaction_counter,
                "properties": [to_dict(prop) for prop in store.properties.values()],
                "transactions": [to_dict(tx) for tx in store.transactions],
                "owners": store.owner_index(),
            }

    # Internals
    def _open_check(self) -> RegistryError | None:
        if self._closed:
            return RegistryError("Registry is closed")
        return None

    def _reject_if(self, operation: str, *checks: Callable[[], RegistryError | None]) -> None:
        failure = first_failure(*checks)
        if failure is not None:
            logger.warning("Rejected %s: %s", operation, failure)
            raise failure

    def _enqueue(self, notification: Notification, event_time: datetime) -> None:
        # caller holds the write lock, so queue order is commit order
        self._pending.append(notification.to_event(event_time))

    def _deliver(self) -> None:
        # One drainer at a time. A sink that mutates the registry re-enters
        # here on the same thread; the outer loop delivers what it queued.
        with self._delivery_lock:
            if self._draining:
                return
            self._draining = True
            try:
                while self._pending:
                    self._publish(self._pending.popleft())
            finally:
                self._draining = False

    def _publish(self, event: Event) -> None:
        for sink in self.sinks:
            try:
                sink.publish(event)
            except SinkError:
                logger.exception("Failed to deliver %s for property %s", event.event_type, event.subject)
            except Exception:
                # state is committed; log and keep delivering
                logger.exception("Sink %s crashed delivering %s", type(sink).__name__, event.event_type)


def build_registry(
    config: RegistryConfig,
    clock: Callable[[], datetime] | None = None,
) -> PropertyRegistry:
    """Create a registry with the sinks named in ``config``."""
    config.validate()
    return PropertyRegistry(config.contract_owner, sinks=build_sinks(config), clock=clock)
