# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Base reporting classes.

Reports operate on a finished ``SimulationResult`` and only format and
present data; they never sign or alter contracts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List

import pandas as pd

from ..core.primitives import DAYS_PER_MONTH
from ..entities import Contract, Office, User
from ..simulation import SimulationResult


def format_cents(cents: float) -> str:
    return f"{cents / 100:,.2f}€"


def contract_total_rent(contract: Contract) -> float:
    """Rent paid over the whole contract, in cents (months counted as 30 days)."""
    return contract.rent * contract.duration_days / DAYS_PER_MONTH


class BaseReport(ABC):
    """
    Abstract base class for all report formatters.

    Args:
        results: Outcome of ``Simulation.run``
        users: Users to report on
        offices: Offices to report on (usually the leaf offices)
    """

    def __init__(
        self,
        results: SimulationResult,
        users: Iterable[User],
        offices: Iterable[Office],
    ):
        if not isinstance(results, SimulationResult):
            raise TypeError("Reports require a SimulationResult object")
        self._results = results
        self._users: List[User] = sorted(users, key=lambda user: user.id)
        self._offices: List[Office] = sorted(offices, key=lambda office: office.id.uuid)

    @abstractmethod
    def generate(self) -> pd.DataFrame:
        """Report content as a DataFrame."""
        pass

    @abstractmethod
    def render(self) -> str:
        """Report content as printable text."""
        pass
