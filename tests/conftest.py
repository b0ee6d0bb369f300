# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for sora testing.

Factories build valid entities with sensible defaults so tests only spell
out the attributes they care about.
"""

from __future__ import annotations

from datetime import date

import pytest

from sora.core.primitives import UserId
from sora.entities import Contract, Office, User
from sora.persistence import Store


def create_test_user(first_name: str = "Camille", last_name: str = "Martin") -> User:
    return User.new(first_name, last_name)


def create_test_office(
    owner: UserId,
    available_positions: int = 100,
    surface: int = 600,
    position_price: int = 45_000,
    name: str = "Canal Saint-Martin",
) -> Office:
    """
    Create a valid real office for testing.

    Example:
        >>> office = create_test_office(UserId())
        >>> office.monthly_rent
        4500000
    """
    return Office.new_real(
        name=name,
        address="12 quai de Jemmapes, Paris 75010",
        latitude=48.87,
        longitude=2.36,
        owner=owner,
        available_positions=available_positions,
        surface=surface,
        position_price=position_price,
    )


def create_test_contract(
    office: Office,
    guest: UserId,
    start: date,
    end: date,
) -> Contract:
    return Contract.for_office(office, guest, start, end)


def d(value: str) -> date:
    """Shorthand for ISO dates in test tables."""
    return date.fromisoformat(value)


@pytest.fixture
def owner() -> User:
    return create_test_user("Hugo", "Bernard")


@pytest.fixture
def guest() -> User:
    return create_test_user("Léa", "Dubois")


@pytest.fixture
def office(owner: User) -> Office:
    return create_test_office(owner.id)


@pytest.fixture
def store():
    with Store(":memory:") as in_memory:
        yield in_memory


@pytest.fixture
def populated_store(store: Store, owner: User, guest: User, office: Office):
    """Store holding two users, one office and one contract."""
    store.add_users([owner, guest])
    store.add_offices([office])
    store.add_contracts(
        [create_test_contract(office, guest.id, d("2024-03-01"), d("2024-07-01"))]
    )
    return store
