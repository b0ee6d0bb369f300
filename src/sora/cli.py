# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Command line entry point.

Usage:
    sora create-fixtures --subdivide --seed 42
    sora show --filter offices
    sora --database sora.duckdb simulate --duration 24 --target-days 360
"""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys
from typing import List, Optional

from pydantic import ValidationError

from .core.primitives import GlobalSettings, SimulationSettings, SoraError
from .fixtures import create_fixtures
from .persistence import ShowFilter, Store, render, show
from .reporting import OccupancyReport
from .simulation import Simulation

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "sora.duckdb"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sora", description="Office sharing marketplace and occupancy simulator"
    )
    parser.add_argument(
        "--database",
        default=os.environ.get("SORA_DATABASE", DEFAULT_DATABASE),
        help="DuckDB database file (defaults to $SORA_DATABASE or sora.duckdb)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    fixtures = subparsers.add_parser(
        "create-fixtures", help="Replace the database content with random data"
    )
    fixtures.add_argument(
        "--subdivide", action="store_true", help="Split one office in two halves"
    )
    fixtures.add_argument("--seed", type=int, default=None, help="Random seed")

    show_parser = subparsers.add_parser("show", help="Display database content")
    show_parser.add_argument(
        "--filter",
        default=None,
        help="users, offices, spl, contracts, or a single <prefix>-<uuid> identifier",
    )

    simulate = subparsers.add_parser(
        "simulate", help="Sign contracts until every user reaches the target"
    )
    simulate.add_argument(
        "--duration", type=int, default=24, help="Horizon length in months"
    )
    simulate.add_argument(
        "--target-days",
        type=int,
        default=360,
        help="Office days every user should have locked",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> GlobalSettings:
    simulation = SimulationSettings()
    if args.command == "simulate":
        simulation = SimulationSettings(
            duration_months=args.duration,
            target_days_in_office=args.target_days,
        )
    return GlobalSettings(database=args.database, simulation=simulation)


def run_create_fixtures(store: Store, settings: GlobalSettings, args) -> None:
    fixtures = create_fixtures(
        store,
        random.Random(args.seed),
        subdivide=args.subdivide,
        settings=settings.fixtures,
    )
    print(
        f"Created {len(fixtures.users)} users, {len(fixtures.offices)} offices, "
        f"{len(fixtures.subdivisions)} subdivisions and {len(fixtures.contracts)} contracts"
    )


def run_show(store: Store, settings: GlobalSettings, args) -> None:
    print(render(show(store, ShowFilter.parse(args.filter))))


def run_simulate(store: Store, settings: GlobalSettings, args) -> None:
    simulation = Simulation.from_settings(settings.simulation)
    users = store.users()
    offices = store.leaf_offices()
    contracts = store.contracts_within(simulation.start, simulation.end)

    result = simulation.run(users, offices, contracts)
    stored = store.add_contracts(result.new_contracts)
    logger.info(f"{stored} new contracts saved")

    print(OccupancyReport(result, users, offices).render())


COMMANDS = {
    "create-fixtures": run_create_fixtures,
    "show": run_show,
    "simulate": run_simulate,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = settings_from_args(args)
        with Store(settings.database) as store:
            COMMANDS[args.command](store, settings, args)
    except SoraError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    except ValidationError as e:
        logger.error(f"Invalid settings: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
