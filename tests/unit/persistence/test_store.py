# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from sora.core.primitives import SubdivisionId
from sora.entities import SubdivisionPart
from sora.persistence import TABLES, Store
from tests.conftest import create_test_contract, create_test_office, create_test_user, d


class TestStoreRoundTrip:
    def test_users(self, store, owner, guest):
        assert store.add_users([guest, owner]) == 2
        assert store.users() == sorted([owner, guest], key=lambda user: user.id)

    def test_offices(self, store, owner, office):
        store.add_users([owner])
        store.add_offices([office])
        assert store.offices() == [office]

    def test_contracts(self, populated_store, office, guest):
        contracts = populated_store.contracts()
        assert len(contracts) == 1
        contract = contracts[0]
        assert contract.guest == guest.id
        assert contract.office == office.id
        assert contract.start == d("2024-03-01")
        assert contract.rent == office.monthly_rent

    def test_subdivision_contract_keeps_office_kind(self, store, owner, guest, office):
        subdivisions = office.split(
            [
                SubdivisionPart(available_positions=50, surface=300),
                SubdivisionPart(available_positions=50, surface=300),
            ]
        )
        contract = create_test_contract(subdivisions[0], guest.id, d("2024-01-01"), d("2024-06-01"))
        store.add_offices([office, *subdivisions])
        store.add_contracts([contract])

        loaded = store.contracts()[0]
        assert isinstance(loaded.office, SubdivisionId)
        assert loaded == contract

    def test_empty_inserts(self, store):
        assert store.add_users([]) == 0
        assert store.add_contracts([]) == 0
        assert store.count("users") == 0


class TestStoreQueries:
    def test_leaf_offices_exclude_split_offices(self, store, owner):
        kept = create_test_office(owner.id, name="Kept")
        split = create_test_office(owner.id, name="Split")
        subdivisions = split.split(
            [
                SubdivisionPart(available_positions=40, surface=200),
                SubdivisionPart(available_positions=60, surface=400),
            ]
        )
        store.add_offices([kept, split, *subdivisions])

        leaves = store.leaf_offices()
        assert [office.id for office in leaves] == [kept.id] + [s.id for s in subdivisions]
        assert len(store.offices()) == 4

    def test_contracts_within_horizon(self, store, office, guest):
        inside = create_test_contract(office, guest.id, d("2024-02-01"), d("2024-07-01"))
        before = create_test_contract(office, guest.id, d("2023-01-01"), d("2023-06-01"))
        straddling = create_test_contract(office, guest.id, d("2024-11-01"), d("2025-04-01"))
        early = create_test_contract(office, guest.id, d("2024-01-01"), d("2024-05-01"))
        store.add_contracts([inside, before, straddling, early])

        within = store.contracts_within(d("2024-01-01"), d("2025-01-01"))
        assert [c.id for c in within] == [early.id, inside.id]

    def test_insert_or_ignore_contracts(self, populated_store):
        existing = populated_store.contracts()
        populated_store.add_contracts(existing)
        assert populated_store.count("contracts") == 1

    def test_reset(self, populated_store):
        populated_store.reset()
        for table in TABLES:
            assert populated_store.count(table) == 0

    def test_table_and_row(self, populated_store, guest):
        users = populated_store.table("users")
        assert list(users.columns) == ["id", "created_at", "first_name", "last_name"]
        assert len(users) == 2

        row = populated_store.row("users", guest.id.uuid)
        assert row["first_name"].tolist() == ["Léa"]

    def test_unknown_table(self, store):
        with pytest.raises(ValueError, match="Unknown table"):
            store.table("offices; DROP TABLE users")

    def test_file_database_persists(self, tmp_path):
        path = str(tmp_path / "sora.duckdb")
        user = create_test_user()
        with Store(path) as store:
            store.add_users([user])
        with Store(path) as store:
            assert store.users() == [user]
