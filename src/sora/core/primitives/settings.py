# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field, model_validator

from .model import Model
from .types import PositiveInt

# A month counts as 30 days everywhere durations are expressed in days
DAYS_PER_MONTH = 30

CONTRACT_DURATION_MINIMUM_DAYS = DAYS_PER_MONTH * 4


class SimulationSettings(Model):
    """Settings controlling a single occupancy simulation run."""

    duration_months: PositiveInt = Field(
        default=24,
        description="Length of the simulation horizon in months, starting today.",
    )
    target_days_in_office: PositiveInt = Field(
        default=12 * DAYS_PER_MONTH,
        description="Number of office days every user should have locked over the horizon.",
    )


class FixtureSettings(Model):
    """
    Bounds used when generating a random dataset.

    Usage Examples:
        # Default bounds
        settings = FixtureSettings()

        # A larger marketplace
        settings = FixtureSettings(max_users=20, max_offices=12)
    """

    min_users: PositiveInt = Field(default=2, description="Minimum number of users.")
    max_users: PositiveInt = Field(default=6, description="Maximum number of users.")
    min_offices: PositiveInt = Field(default=3, description="Minimum number of real offices.")
    max_offices: PositiveInt = Field(default=5, description="Maximum number of real offices.")
    subdivision_office_reduction: int = Field(
        default=2,
        ge=0,
        description="How many fewer offices may be generated when one of them gets subdivided.",
    )

    @model_validator(mode="after")
    def check_bounds(self) -> "FixtureSettings":
        if self.min_users > self.max_users:
            raise ValueError("min_users must be lower than or equal to max_users")
        if self.min_offices > self.max_offices:
            raise ValueError("min_offices must be lower than or equal to max_offices")
        return self


class GlobalSettings(Model):
    """Top-level configuration object aggregating all settings categories."""

    database: str = Field(
        default=":memory:",
        description="DuckDB database path, or ':memory:' for a throwaway database.",
    )
    simulation: SimulationSettings = Field(default_factory=SimulationSettings)
    fixtures: FixtureSettings = Field(default_factory=FixtureSettings)
