# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rentable office resources.

An ``Office`` is either a real office, identified by a ``RealOfficeId``, or a
subdivision of one, identified by a ``SubdivisionId`` and pointing back to its
parent through ``parent_office``. Both share the same attributes so the
scheduling engine can rent either kind the same way.

Real offices couple their seat count to their floor space: at most 5 seats
per batch of ``k`` square meters, where ``k`` is 7 above 60 m² and 8 below.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Sequence

from pydantic import Field, model_validator

from ..core.primitives import (
    AvailablePositionsOutOfBounds,
    CoordinatesOutOfBounds,
    Model,
    MustBeDividedInAtLeastTwoParts,
    OfficeId,
    PositiveInt,
    PriceOutOfBounds,
    RealOfficeId,
    SubdivisionCannotBeSubdivided,
    SubdivisionId,
    TooManyPositionsForSurface,
    TotalAvailablePositionsNotMatching,
    TotalSurfaceNotMatching,
    UserId,
)
from .user import utc_now

logger = logging.getLogger(__name__)

LATITUDE_BOUNDARY = 90.0
LONGITUDE_BOUNDARY = 180.0

POSITION_PRICE_MINIMUM = 30_000
POSITION_PRICE_MAXIMUM = 80_000

AVAILABLE_POSITIONS_MINIMUM = 40
AVAILABLE_POSITIONS_MAXIMUM = 180


class PositionsConstraint(Model):
    """At most ``positions`` seats for every ``per_square_meters`` of surface."""

    positions: int
    per_square_meters: int


def positions_constraint_for_surface(surface: int) -> PositionsConstraint:
    return PositionsConstraint(
        positions=5,
        per_square_meters=7 if surface > 60 else 8,
    )


def max_positions_for_surface(surface: int) -> int:
    constraint = positions_constraint_for_surface(surface)
    return (surface // constraint.per_square_meters) * constraint.positions


def validate_coordinates(latitude: float, longitude: float) -> None:
    if not -LATITUDE_BOUNDARY <= latitude <= LATITUDE_BOUNDARY:
        raise CoordinatesOutOfBounds("latitude", latitude, LATITUDE_BOUNDARY)
    if not -LONGITUDE_BOUNDARY <= longitude <= LONGITUDE_BOUNDARY:
        raise CoordinatesOutOfBounds("longitude", longitude, LONGITUDE_BOUNDARY)


def validate_position_price(position_price: int) -> None:
    if not POSITION_PRICE_MINIMUM <= position_price <= POSITION_PRICE_MAXIMUM:
        raise PriceOutOfBounds(
            position_price, POSITION_PRICE_MINIMUM, POSITION_PRICE_MAXIMUM
        )


def validate_available_positions_for_surface(
    available_positions: int, surface: int
) -> None:
    if not AVAILABLE_POSITIONS_MINIMUM <= available_positions <= AVAILABLE_POSITIONS_MAXIMUM:
        raise AvailablePositionsOutOfBounds(
            available_positions,
            AVAILABLE_POSITIONS_MINIMUM,
            AVAILABLE_POSITIONS_MAXIMUM,
        )

    maximum = max_positions_for_surface(surface)
    if available_positions > maximum:
        raise TooManyPositionsForSurface(available_positions, maximum)


class SubdivisionPart(Model):
    """Seat count and surface requested for one part of an office split."""

    available_positions: PositiveInt
    surface: PositiveInt


class Office(Model):
    """
    A rentable office, real or subdivided.

    Attributes:
        id: ``RealOfficeId`` for real offices, ``SubdivisionId`` for subdivisions
        owner: User renting the office out; becomes the host of its contracts
        available_positions: Number of seats
        surface: Floor space in square meters
        position_price: Price of one seat for one month, in cents
        parent_office: Real office this subdivision was split from

    Examples:
        >>> owner = UserId()
        >>> office = Office.new_real(
        ...     name="Canal Saint-Martin",
        ...     address="12 quai de Jemmapes, Paris 75010",
        ...     latitude=48.87,
        ...     longitude=2.36,
        ...     owner=owner,
        ...     available_positions=100,
        ...     surface=600,
        ...     position_price=45_000,
        ... )
        >>> office.monthly_rent
        4500000
    """

    id: OfficeId
    created_at: datetime = Field(default_factory=utc_now)
    name: str
    address: str
    latitude: float
    longitude: float
    owner: UserId
    available_positions: int
    surface: int
    position_price: int
    parent_office: Optional[RealOfficeId] = None

    @model_validator(mode="after")
    def check_office(self) -> "Office":
        if isinstance(self.id, SubdivisionId) != (self.parent_office is not None):
            raise ValueError(
                "Subdivisions must reference a parent office and real offices must not"
            )

        validate_coordinates(self.latitude, self.longitude)
        validate_position_price(self.position_price)
        # Subdivision capacity is bounded by the parent's partition instead
        if not self.is_subdivision:
            validate_available_positions_for_surface(
                self.available_positions, self.surface
            )
        return self

    @classmethod
    def new_real(
        cls,
        name: str,
        address: str,
        latitude: float,
        longitude: float,
        owner: UserId,
        available_positions: int,
        surface: int,
        position_price: int,
    ) -> "Office":
        """
        Create a new real office with a fresh identifier.

        Raises:
            CoordinatesOutOfBounds: latitude or longitude out of range
            PriceOutOfBounds: position price outside [30000, 80000]
            AvailablePositionsInvalid: seat count outside [40, 180] or too
                large for the surface
        """
        return cls(
            id=RealOfficeId(),
            name=name,
            address=address,
            latitude=latitude,
            longitude=longitude,
            owner=owner,
            available_positions=available_positions,
            surface=surface,
            position_price=position_price,
        )

    @property
    def is_subdivision(self) -> bool:
        return isinstance(self.id, SubdivisionId)

    @property
    def monthly_rent(self) -> int:
        """Rent of the whole office for one month, in cents."""
        return self.available_positions * self.position_price

    def split(self, parts: Sequence[SubdivisionPart]) -> List["Office"]:
        """
        Divide a real office into subdivisions.

        The parts must add up exactly to the office's surface and seat count.
        Each subdivision keeps the parent's name, address, coordinates, owner
        and position price.

        Raises:
            SubdivisionCannotBeSubdivided: called on a subdivision
            MustBeDividedInAtLeastTwoParts: fewer than two parts given
            TotalSurfaceNotMatching: surfaces do not add up
            TotalAvailablePositionsNotMatching: seat counts do not add up
        """
        if self.is_subdivision:
            raise SubdivisionCannotBeSubdivided()

        if len(parts) < 2:
            raise MustBeDividedInAtLeastTwoParts(len(parts))

        total_surface = sum(part.surface for part in parts)
        if total_surface != self.surface:
            raise TotalSurfaceNotMatching(given=total_surface, expected=self.surface)

        total_available_positions = sum(part.available_positions for part in parts)
        if total_available_positions != self.available_positions:
            raise TotalAvailablePositionsNotMatching(
                given=total_available_positions, expected=self.available_positions
            )

        subdivisions = [
            Office(
                id=SubdivisionId(),
                name=self.name,
                address=self.address,
                latitude=self.latitude,
                longitude=self.longitude,
                owner=self.owner,
                available_positions=part.available_positions,
                surface=part.surface,
                position_price=self.position_price,
                parent_office=self.id,
            )
            for part in parts
        ]
        logger.debug(f"Split office {self.id} into {len(subdivisions)} subdivisions")
        return subdivisions

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"
