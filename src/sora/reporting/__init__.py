# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Sora reporting: presentation of simulation results.
"""

from .base import BaseReport, contract_total_rent, format_cents
from .occupancy import (
    OfficeScheduleReport,
    UserOccupancyReport,
    OccupancyReport,
)

__all__ = [
    "BaseReport",
    "OfficeScheduleReport",
    "UserOccupancyReport",
    "OccupancyReport",
    "contract_total_rent",
    "format_cents",
]
