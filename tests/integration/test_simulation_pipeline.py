# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
End-to-end pipeline: fixtures, load from the store, simulate, persist the new
contracts and run a second simulation on top of them.
"""

from __future__ import annotations

import random
from datetime import date

from sora.fixtures import create_fixtures
from sora.persistence import Store
from sora.reporting import OccupancyReport
from sora.simulation import Simulation

TODAY = date(2024, 1, 1)


def run_once(store: Store, simulation: Simulation):
    users = store.users()
    offices = store.leaf_offices()
    result = simulation.run(users, offices, store.contracts_within(simulation.start, simulation.end))
    store.add_contracts(result.new_contracts)
    return users, offices, result


def test_pipeline_persists_and_is_idempotent(tmp_path):
    simulation = Simulation.for_duration(24, today=TODAY)

    with Store(str(tmp_path / "pipeline.duckdb")) as store:
        create_fixtures(store, random.Random(2024), subdivide=True, today=TODAY)

        users, offices, first = run_once(store, simulation)
        assert first.new_contracts
        assert store.count("contracts") == len(first.contracts)

        report = OccupancyReport(first, users, offices)
        summary = report.user_summary()
        assert set(summary["user"]) == {str(user.id) for user in users}
        assert (summary["days_locked"] + summary["missing_days"] >= 360).all()
        assert len(report.office_schedule()) == len(first.contracts)

        # Everything a second run could sign was already signed by the first one
        _, _, second = run_once(store, simulation)
        assert second.new_contracts == []
        assert second.shortfalls([u.id for u in users]) == first.shortfalls([u.id for u in users])
