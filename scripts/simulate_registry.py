#!/usr/bin/env python3
"""Run a simulated workload against a property registry.

Registers properties for a set of generated identities, then performs a
random mix of transfers and value updates. Notifications go to the sinks
configured through the environment (see ``RegistryConfig.from_env``) or the
``--sink`` flags, and the final state summary is printed.
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from property_registry.config import RegistryConfig
from property_registry.generators import ActivityGenerator, simulate
from property_registry.logging import get_logger, setup_logging
from property_registry.registry import build_registry

logger = get_logger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate property registry activity")
    parser.add_argument("--owners", type=int, default=10, help="Number of identities")
    parser.add_argument("--properties", type=int, default=20, help="Properties to register")
    parser.add_argument("--operations", type=int, default=50, help="Transfers and value updates")
    parser.add_argument("--transfer-ratio", type=float, default=0.6, help="Share of transfers")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--sink",
        action="append",
        choices=["console", "json", "kafka", "memory"],
        help="Notification sink (repeatable, overrides REGISTRY_SINKS)",
    )
    parser.add_argument("--output-dir", type=Path, default=None, help="Directory for the json sink")
    parser.add_argument("--snapshot", type=Path, default=None, help="Write final state to this file")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    config = RegistryConfig.from_env()
    if args.sink:
        config.sinks = args.sink
    if args.output_dir:
        config.output.json_output_dir = args.output_dir

    setup_logging(config.log_level, config.log_format)

    generator = ActivityGenerator(seed=args.seed)
    with build_registry(config) as registry:
        result = simulate(
            registry,
            generator,
            num_owners=args.owners,
            num_properties=args.properties,
            num_operations=args.operations,
            transfer_ratio=args.transfer_ratio,
        )
        registry.store.check_invariants()
        summary = registry.summary()

        if args.snapshot:
            with open(args.snapshot, "w", encoding="utf-8") as f:
                json.dump(registry.snapshot(), f, indent=2, ensure_ascii=False)
            logger.info("Snapshot written to %s", args.snapshot)

    print(f"Registrations: {result.registrations}")
    print(f"Transfers: {result.transfers}")
    print(f"Value updates: {result.value_updates}")
    for key, value in summary.items():
        print(f"  {key}: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
