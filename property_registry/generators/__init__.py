"""Synthetic registry activity for demos and load tests."""

from property_registry.generators.activity import ActivityGenerator, SimulationResult, simulate

__all__ = ["ActivityGenerator", "SimulationResult", "simulate"]
