# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Occupancy scheduling: signs contracts so users reach their office-day target.
"""

from .engine import Simulation, locked_ranges, office_busy_ranges
from .results import SimulationResult

__all__ = [
    "Simulation",
    "SimulationResult",
    "locked_ranges",
    "office_busy_ranges",
]
