# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Marketplace entities: users, offices (real and subdivided) and contracts.

Every entity is an immutable model validated at construction time.
"""

from .contract import Contract
from .office import (
    AVAILABLE_POSITIONS_MAXIMUM,
    AVAILABLE_POSITIONS_MINIMUM,
    POSITION_PRICE_MAXIMUM,
    POSITION_PRICE_MINIMUM,
    Office,
    PositionsConstraint,
    SubdivisionPart,
    max_positions_for_surface,
    positions_constraint_for_surface,
)
from .user import User

__all__ = [
    "User",
    "Office",
    "SubdivisionPart",
    "PositionsConstraint",
    "Contract",
    "positions_constraint_for_surface",
    "max_positions_for_surface",
    "AVAILABLE_POSITIONS_MINIMUM",
    "AVAILABLE_POSITIONS_MAXIMUM",
    "POSITION_PRICE_MINIMUM",
    "POSITION_PRICE_MAXIMUM",
]
