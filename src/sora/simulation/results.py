# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import Dict, List

from pydantic import Field

from ..core.primitives import Model, OfficeId, UserId
from ..entities import Contract


class SimulationResult(Model):
    """
    Outcome of a simulation run.

    ``contracts`` holds the input contracts followed by the new ones in
    creation order; ``new_contracts`` is only the delta to persist.
    """

    start: date
    end: date
    target_days_in_office: int
    contracts: List[Contract] = Field(default_factory=list)
    new_contracts: List[Contract] = Field(default_factory=list)

    def contracts_for_guest(self, user_id: UserId) -> List[Contract]:
        return [contract for contract in self.contracts if contract.guest == user_id]

    def contracts_for_office(self, office_id: OfficeId) -> List[Contract]:
        return [contract for contract in self.contracts if contract.office == office_id]

    def locked_days(self, user_id: UserId) -> int:
        return sum(contract.duration_days for contract in self.contracts_for_guest(user_id))

    def missing_days(self, user_id: UserId) -> int:
        return max(self.target_days_in_office - self.locked_days(user_id), 0)

    def is_satisfied(self, user_id: UserId) -> bool:
        return self.missing_days(user_id) == 0

    def shortfalls(self, user_ids: List[UserId]) -> Dict[UserId, int]:
        """Missing days for every given user still below target."""
        return {
            user_id: self.missing_days(user_id)
            for user_id in user_ids
            if not self.is_satisfied(user_id)
        }
