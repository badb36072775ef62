"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from property_registry.registry import PropertyRegistry
from property_registry.sinks import MemorySink

ALICE = "0x00000000000000000000000000000000000a11ce"
BOB = "0x0000000000000000000000000000000000000b0b"
CAROL = "0x00000000000000000000000000000000000ca401"
DEPLOYER = "0x00000000000000000000000000000000000de910"


class StepClock:
    """Clock that advances one second on every call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + timedelta(seconds=1)
        return now


@pytest.fixture
def clock() -> StepClock:
    """Deterministic clock starting at 2024-01-01 UTC."""
    return StepClock()


@pytest.fixture
def sink() -> MemorySink:
    """Collects notifications published by the registry."""
    return MemorySink()


@pytest.fixture
def registry(sink: MemorySink, clock: StepClock) -> PropertyRegistry:
    """Fresh registry deployed by DEPLOYER."""
    return PropertyRegistry(DEPLOYER, sinks=[sink], clock=clock)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42
