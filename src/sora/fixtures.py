# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Random marketplace datasets.

Generates a handful of users and offices with valid random attributes,
optionally splits one office in two halves, and signs one seed contract so
that simulations start from a non-empty contract list. Existing data is
deleted first.
"""

from __future__ import annotations

import logging
import math
import random
from datetime import date, timedelta
from typing import List, Optional

from faker import Faker
from pydantic import Field

from .core.primitives import CONTRACT_DURATION_MINIMUM_DAYS, FixtureSettings, Model
from .entities import Contract, Office, SubdivisionPart, User
from .persistence import Store

logger = logging.getLogger(__name__)

FAKER_LOCALE = "fr_FR"

# Random attribute ranges, upper bounds excluded
AVAILABLE_POSITIONS_RANGE = (80, 180)
SURFACE_RANGE = (500, 1000)
POSITION_PRICE_RANGE = (30_000, 80_000)

SEED_CONTRACT_HORIZON_DAYS = 365 * 2


class FixtureSet(Model):
    """Entities written to the store by ``create_fixtures``."""

    users: List[User] = Field(default_factory=list)
    offices: List[Office] = Field(default_factory=list)
    subdivisions: List[Office] = Field(default_factory=list)
    contracts: List[Contract] = Field(default_factory=list)

    @property
    def leaf_offices(self) -> List[Office]:
        split = {office.parent_office for office in self.subdivisions}
        return [office for office in self.offices if office.id not in split] + list(
            self.subdivisions
        )


def _randrange(rng: random.Random, bounds: tuple) -> int:
    return rng.randrange(bounds[0], bounds[1])


def new_faker(rng: random.Random) -> Faker:
    """French fake-data generator seeded from ``rng``."""
    fake = Faker(FAKER_LOCALE)
    fake.seed_instance(rng.getrandbits(64))
    return fake


def generate_user(fake: Faker) -> User:
    return User.new(fake.first_name(), fake.last_name())


def generate_office(rng: random.Random, fake: Faker, owner: User) -> Office:
    address = (
        f"{fake.building_number()} {fake.street_name()}, "
        f"{fake.city()} {fake.postcode()}"
    )
    return Office.new_real(
        name=fake.company(),
        address=address,
        latitude=rng.uniform(-90.0, 90.0),
        longitude=rng.uniform(-180.0, 180.0),
        owner=owner.id,
        available_positions=_randrange(rng, AVAILABLE_POSITIONS_RANGE),
        surface=_randrange(rng, SURFACE_RANGE),
        position_price=_randrange(rng, POSITION_PRICE_RANGE),
    )


def split_in_halves(office: Office) -> List[Office]:
    """Split an office in two parts, the second one taking the odd remainder."""
    return office.split(
        [
            SubdivisionPart(
                available_positions=math.floor(office.available_positions / 2),
                surface=math.floor(office.surface / 2),
            ),
            SubdivisionPart(
                available_positions=math.ceil(office.available_positions / 2),
                surface=math.ceil(office.surface / 2),
            ),
        ]
    )


def generate_seed_contract(
    rng: random.Random, users: List[User], offices: List[Office], today: date
) -> Optional[Contract]:
    """A minimum-length contract for a random guest on an office they do not own."""
    guests = [
        user for user in users if any(office.owner != user.id for office in offices)
    ]
    if not guests:
        return None

    guest = rng.choice(guests)
    office = next(
        office for office in reversed(offices) if office.owner != guest.id
    )

    start_offset = rng.randrange(
        CONTRACT_DURATION_MINIMUM_DAYS,
        SEED_CONTRACT_HORIZON_DAYS - CONTRACT_DURATION_MINIMUM_DAYS,
    )
    start = today + timedelta(days=start_offset)
    return Contract.for_office(
        office,
        guest.id,
        start,
        start + timedelta(days=CONTRACT_DURATION_MINIMUM_DAYS),
    )


def create_fixtures(
    store: Store,
    rng: random.Random,
    subdivide: bool = False,
    settings: Optional[FixtureSettings] = None,
    today: Optional[date] = None,
) -> FixtureSet:
    """
    Replace the store content with a random dataset.

    Args:
        store: Target store, emptied first
        rng: Random generator; seed it for reproducible datasets
        subdivide: Split one random office in two subdivisions
        settings: Bounds on the number of generated users and offices
        today: Reference date for the seed contract

    Returns:
        FixtureSet with everything written to the store
    """
    settings = settings or FixtureSettings()
    today = today or date.today()

    logger.info("Creating database fixtures")
    store.reset()

    max_offices = settings.max_offices
    if subdivide:
        max_offices = max(
            settings.min_offices, max_offices - settings.subdivision_office_reduction
        )

    fake = new_faker(rng)
    users = [
        generate_user(fake)
        for _ in range(rng.randint(settings.min_users, settings.max_users))
    ]
    offices = [
        generate_office(rng, fake, rng.choice(users))
        for _ in range(rng.randint(settings.min_offices, max_offices))
    ]

    store.add_users(users)
    logger.info(f"Created {len(users)} users")
    store.add_offices(offices)
    logger.info(f"Created {len(offices)} offices")

    subdivisions: List[Office] = []
    if subdivide:
        subdivisions = split_in_halves(rng.choice(offices))
        store.add_offices(subdivisions)
        logger.info(f"Created {len(subdivisions)} office subdivisions")

    fixtures = FixtureSet(users=users, offices=offices, subdivisions=subdivisions)

    logger.info("Creating a seed contract")
    contract = generate_seed_contract(rng, users, fixtures.leaf_offices, today)
    if contract is None:
        logger.warning("Every office belongs to the only user, no seed contract created")
        return fixtures

    store.add_contracts([contract])
    return fixtures.model_copy(update={"contracts": [contract]})
