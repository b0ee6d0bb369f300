# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Sora Core Primitives

Essential building blocks shared by every sora component: the immutable model
base, typed identifiers, date interval algebra, settings and domain errors.
"""

from .date_range import (
    DateRange,
    invert_ranges_in_boundary,
    is_contained_in,
    overlap,
    total_days,
)
from .errors import (
    AvailablePositionsInvalid,
    AvailablePositionsOutOfBounds,
    ContractError,
    ContractTooShort,
    CoordinatesOutOfBounds,
    GuestIsHost,
    MustBeDividedInAtLeastTwoParts,
    OfficeError,
    OfficeSplitError,
    PriceOutOfBounds,
    ShowFilterError,
    SoraError,
    SubdivisionCannotBeSubdivided,
    TooManyPositionsForSurface,
    TotalAvailablePositionsNotMatching,
    TotalSurfaceNotMatching,
)
from .identifiers import (
    IDENTIFIER_KINDS,
    ContractId,
    Identifier,
    OfficeId,
    RealOfficeId,
    SubdivisionId,
    UserId,
    parse_identifier,
    uuid7,
)
from .model import Model
from .settings import (
    CONTRACT_DURATION_MINIMUM_DAYS,
    DAYS_PER_MONTH,
    FixtureSettings,
    GlobalSettings,
    SimulationSettings,
)
from .types import NonNegativeInt, PositiveInt

__all__ = [
    # Core models
    "Model",
    "DateRange",
    # Identifiers
    "Identifier",
    "UserId",
    "RealOfficeId",
    "SubdivisionId",
    "ContractId",
    "OfficeId",
    "IDENTIFIER_KINDS",
    "parse_identifier",
    "uuid7",
    # Interval algebra
    "overlap",
    "is_contained_in",
    "invert_ranges_in_boundary",
    "total_days",
    # Settings
    "CONTRACT_DURATION_MINIMUM_DAYS",
    "DAYS_PER_MONTH",
    "FixtureSettings",
    "GlobalSettings",
    "SimulationSettings",
    # Types
    "PositiveInt",
    "NonNegativeInt",
    # Errors
    "SoraError",
    "OfficeError",
    "CoordinatesOutOfBounds",
    "PriceOutOfBounds",
    "AvailablePositionsInvalid",
    "AvailablePositionsOutOfBounds",
    "TooManyPositionsForSurface",
    "OfficeSplitError",
    "SubdivisionCannotBeSubdivided",
    "MustBeDividedInAtLeastTwoParts",
    "TotalSurfaceNotMatching",
    "TotalAvailablePositionsNotMatching",
    "ContractError",
    "ContractTooShort",
    "GuestIsHost",
    "ShowFilterError",
]
