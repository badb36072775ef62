"""Faker-backed generator of registry identities, properties and operations."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from faker import Faker

from property_registry.registry import PropertyRegistry

logger = logging.getLogger(__name__)

PROPERTY_KINDS = ["house", "apartment", "land", "townhouse", "warehouse", "office"]


class ActivityGenerator:
    """Generate realistic-looking registry inputs.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.fake = Faker(locale)
        self.rng = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)

    def identity(self) -> str:
        """Generate a 0x-prefixed 40 hex digit account address."""
        return self.fake.hexify(text="0x" + "^" * 40)

    def property_address(self) -> str:
        return f"{self.fake.street_address()}, {self.fake.city()}"

    def description(self) -> str:
        kind = self.rng.choice(PROPERTY_KINDS)
        return f"{kind}, {self.rng.randint(1, 6)} rooms, {self.rng.randint(40, 800)} sqm"

    def value(self, base: int | None = None) -> int:
        """Generate a value in cents, optionally drifting from ``base``."""
        if base is None:
            return self.rng.randint(50_000, 2_000_000) * 100
        return max(0, int(base * self.rng.uniform(0.85, 1.25)))


@dataclass
class SimulationResult:
    """Counts of operations performed by :func:`simulate`."""

    owners: int = 0
    registrations: int = 0
    transfers: int = 0
    value_updates: int = 0


def simulate(
    registry: PropertyRegistry,
    generator: ActivityGenerator,
    num_owners: int = 10,
    num_properties: int = 20,
    num_operations: int = 50,
    transfer_ratio: float = 0.6,
) -> SimulationResult:
    """Drive a registry with random registrations, transfers and value updates.

    Parameters
    ----------
    registry : PropertyRegistry
        Registry to operate on.
    generator : ActivityGenerator
        Source of identities and values.
    num_owners : int
        Number of distinct identities taking part (at least 2).
    num_properties : int
        Properties registered before any transfer or update.
    num_operations : int
        Transfers plus value updates after the registrations.
    transfer_ratio : float
        Probability that an operation is a transfer rather than an update.

    Returns
    -------
    SimulationResult
        Counts of what was done.
    """
    if num_owners < 2:
        raise ValueError("num_owners must be at least 2")

    rng = generator.rng
    owners = [generator.identity() for _ in range(num_owners)]
    result = SimulationResult(owners=num_owners)

    for _ in range(num_properties):
        registry.register_property(
            rng.choice(owners),
            generator.property_address(),
            generator.description(),
            generator.value(),
        )
        result.registrations += 1

    if result.registrations == 0:
        return result

    for _ in range(num_operations):
        property_id = rng.randint(1, registry.get_total_properties())
        prop = registry.get_property_details(property_id)

        if rng.random() < transfer_ratio:
            new_owner = rng.choice([o for o in owners if o != prop.current_owner])
            registry.transfer_property(
                prop.current_owner,
                property_id,
                new_owner,
                generator.value(prop.current_value),
            )
            result.transfers += 1
        else:
            registry.update_property_value(
                prop.current_owner,
                property_id,
                generator.value(prop.current_value),
            )
            result.value_updates += 1

    logger.info(
        "Simulation complete: %d registrations, %d transfers, %d value updates",
        result.registrations,
        result.transfers,
        result.value_updates,
    )
    return result
