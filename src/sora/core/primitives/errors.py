# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Domain errors raised when constructing offices, subdivisions and contracts.

None of these derive from ``ValueError``. Pydantic only wraps
``ValueError``/``AssertionError`` into a ``ValidationError``, so when a model
validator raises one of these the caller receives the typed error itself.
"""

from __future__ import annotations


class SoraError(Exception):
    """Base class for every domain error raised by sora."""


# --- Offices ---


class OfficeError(SoraError):
    """Raised when an office cannot be created with the given attributes."""


class CoordinatesOutOfBounds(OfficeError):
    """Raised when a latitude or longitude lies outside its valid range."""

    def __init__(self, axis: str, value: float, boundary: float):
        self.axis = axis
        self.value = value
        self.boundary = boundary
        super().__init__(
            f"{axis.capitalize()} must be between -{boundary} and {boundary}, got {value}"
        )


class PriceOutOfBounds(OfficeError):
    """Raised when the monthly price of a position is outside the allowed range."""

    def __init__(self, price: int, minimum: int, maximum: int):
        self.price = price
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Given price per position ({price}) is out of bounds [{minimum}, {maximum}]."
        )


class AvailablePositionsInvalid(OfficeError):
    """Raised when the seat count of an office is not acceptable."""


class AvailablePositionsOutOfBounds(AvailablePositionsInvalid):
    def __init__(self, available_positions: int, minimum: int, maximum: int):
        self.available_positions = available_positions
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Given available positions ({available_positions}) is out of bounds "
            f"[{minimum}, {maximum}]."
        )


class TooManyPositionsForSurface(AvailablePositionsInvalid):
    def __init__(self, available_positions: int, max_positions_for_surface: int):
        self.available_positions = available_positions
        self.max_positions_for_surface = max_positions_for_surface
        super().__init__(
            f"Given available positions {available_positions} is greater than the maximum "
            f"value computed for given surface ({max_positions_for_surface})."
        )


# --- Subdivisions ---


class OfficeSplitError(SoraError):
    """Raised when an office cannot be split into the requested parts."""


class SubdivisionCannotBeSubdivided(OfficeSplitError):
    def __init__(self):
        super().__init__("An office subdivision cannot be sub-divided again")


class MustBeDividedInAtLeastTwoParts(OfficeSplitError):
    def __init__(self, parts: int):
        self.parts = parts
        super().__init__(
            f"An office must be divided in at least two parts, got {parts}"
        )


class TotalSurfaceNotMatching(OfficeSplitError):
    def __init__(self, given: int, expected: int):
        self.given = given
        self.expected = expected
        super().__init__(
            f"The sum of all given surfaces ({given}) does not match the expected value ({expected})"
        )


class TotalAvailablePositionsNotMatching(OfficeSplitError):
    def __init__(self, given: int, expected: int):
        self.given = given
        self.expected = expected
        super().__init__(
            f"The sum of all given available positions ({given}) does not match "
            f"the expected value ({expected})"
        )


# --- Contracts ---


class ContractError(SoraError):
    """Raised when a contract cannot be created."""


class ContractTooShort(ContractError):
    def __init__(self, days: int, minimum: int):
        self.days = days
        self.minimum = minimum
        super().__init__(
            f"A contract must last at least {minimum} days, "
            f"but tried to create one with {days} days"
        )


class GuestIsHost(ContractError):
    def __init__(self, user: object):
        self.user = user
        super().__init__(f"User {user} cannot rent an office they own")


# --- Display ---


class ShowFilterError(SoraError):
    """Raised when a show filter matches no table and no identifier."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f'No filter matched for "{value}"')
