# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Sora - Office sharing marketplace and occupancy simulator

Owners list offices (optionally split into subdivisions), guests rent them
through contracts, and a greedy simulation signs new contracts until every
user has enough office days over a horizon.

Key Entry Points:
- sora.entities.* - Users, offices and contracts
- sora.simulation.Simulation - Occupancy scheduling
- sora.persistence.Store - DuckDB persistence
- sora.reporting.OccupancyReport - Simulation reports

Example Usage:
    ```python
    from sora.persistence import Store
    from sora.reporting import OccupancyReport
    from sora.simulation import Simulation

    with Store("sora.duckdb") as store:
        simulation = Simulation.for_duration(duration_months=24)
        users, offices = store.users(), store.leaf_offices()
        result = simulation.run(
            users, offices, store.contracts_within(simulation.start, simulation.end)
        )
        store.add_contracts(result.new_contracts)
        print(OccupancyReport(result, users, offices).render())
    ```
"""

import importlib
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "entities",
    "fixtures",
    "persistence",
    "reporting",
    "simulation",
]


_LAZY_MODULES = {
    "core": "sora.core",
    "entities": "sora.entities",
    "fixtures": "sora.fixtures",
    "persistence": "sora.persistence",
    "reporting": "sora.reporting",
    "simulation": "sora.simulation",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'sora' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
