# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Occupancy scheduling engine.

Given a horizon, the marketplace users, the rentable (leaf) offices and the
contracts already signed inside the horizon, the engine signs additional
contracts so that every user reaches a target number of locked office days.

The allocation is a deterministic greedy first-fit:

1. Users are processed in ascending identifier order.
2. For each user, the missing days are the target minus the days already
   locked as guest. A user already at target is skipped.
3. Slots are searched office by office (ascending identifier, excluding the
   user's own offices), then through the user's free ranges, then through the
   office's free ranges. The first common range that yields a valid contract
   wins; slots too short for the legal minimum are pruned.
4. After each signed contract, availability is recomputed from the running
   contract list and the search continues until the user is satisfied or no
   slot is left. A remaining shortfall is reported, never raised.

The engine performs no I/O and never mutates its inputs: the running contract
list is a private copy that only grows.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable, List, Optional, Sequence

from dateutil.relativedelta import relativedelta
from pydantic import Field, model_validator

from ..core.primitives import (
    CONTRACT_DURATION_MINIMUM_DAYS,
    ContractError,
    DateRange,
    Model,
    OfficeId,
    PositiveInt,
    SimulationSettings,
    UserId,
    invert_ranges_in_boundary,
    total_days,
)
from ..entities import Contract, Office, User
from .results import SimulationResult

logger = logging.getLogger(__name__)


def locked_ranges(contracts: Iterable[Contract], user_id: UserId) -> List[DateRange]:
    """Date ranges of every contract where ``user_id`` is the guest."""
    return [contract.date_range for contract in contracts if contract.guest == user_id]


def office_busy_ranges(
    contracts: Iterable[Contract], office_id: OfficeId
) -> List[DateRange]:
    return [contract.date_range for contract in contracts if contract.office == office_id]


class Simulation(Model):
    """
    A one-shot occupancy planning run over a fixed horizon.

    Attributes:
        start: First day of the horizon
        end: Last day of the horizon
        target_days_in_office: Days every user should have locked as guest

    Example:
        ```python
        simulation = Simulation.for_duration(duration_months=24)
        result = simulation.run(users, leaf_offices, contracts)
        store.add_contracts(result.new_contracts)
        ```
    """

    start: date
    end: date
    target_days_in_office: PositiveInt = Field(default=360)

    @model_validator(mode="after")
    def check_horizon(self) -> "Simulation":
        if self.start > self.end:
            raise ValueError(
                f"Simulation start ({self.start}) must be on or before end ({self.end})"
            )
        return self

    @classmethod
    def for_duration(
        cls,
        duration_months: int,
        target_days_in_office: int = 360,
        today: Optional[date] = None,
    ) -> "Simulation":
        """Horizon starting ``today`` and lasting ``duration_months`` months."""
        start = today or date.today()
        return cls(
            start=start,
            end=start + relativedelta(months=duration_months),
            target_days_in_office=target_days_in_office,
        )

    @classmethod
    def from_settings(
        cls, settings: SimulationSettings, today: Optional[date] = None
    ) -> "Simulation":
        return cls.for_duration(
            duration_months=settings.duration_months,
            target_days_in_office=settings.target_days_in_office,
            today=today,
        )

    @property
    def horizon(self) -> DateRange:
        return DateRange(start=self.start, end=self.end)

    def run(
        self,
        users: Iterable[User],
        offices: Iterable[Office],
        contracts: Iterable[Contract],
    ) -> SimulationResult:
        """
        Sign new contracts until every user reaches the target, as far as possible.

        Args:
            users: Every marketplace user
            offices: Leaf offices only (unsplit real offices and subdivisions)
            contracts: Existing contracts inside the horizon

        Returns:
            SimulationResult holding the full contract list and the new ones
        """
        running: List[Contract] = list(contracts)
        created: List[Contract] = []
        ordered_users = sorted(users, key=lambda user: user.id)
        ordered_offices = sorted(offices, key=lambda office: office.id.uuid)

        logger.info(
            f"Simulating {len(ordered_users)} users over {len(ordered_offices)} offices "
            f"from {self.start} to {self.end} (target: {self.target_days_in_office} days)"
        )

        for user in ordered_users:
            created.extend(self._schedule_user(user, ordered_offices, running))

        logger.info(f"Simulation done, {len(created)} contracts created")

        return SimulationResult(
            start=self.start,
            end=self.end,
            target_days_in_office=self.target_days_in_office,
            contracts=running,
            new_contracts=created,
        )

    def _schedule_user(
        self, user: User, offices: Sequence[Office], running: List[Contract]
    ) -> List[Contract]:
        """Sign contracts for one user, appending them to ``running``."""
        locked_days = total_days(locked_ranges(running, user.id))
        missing_days = max(self.target_days_in_office - locked_days, 0)

        logger.info(
            f"User {user.id} has {locked_days}/{self.target_days_in_office} days of "
            f"locked office, {missing_days} days still missing"
        )

        if missing_days == 0:
            return []

        candidates = [office for office in offices if office.owner != user.id]
        signed: List[Contract] = []

        while missing_days > 0:
            # Never attempt a contract shorter than the legal minimum
            attempt_days = max(missing_days, CONTRACT_DURATION_MINIMUM_DAYS)
            contract = self._next_contract(user, candidates, running, attempt_days)
            if contract is None:
                logger.info(
                    f"User {user.id} still needs to lock {missing_days} more days "
                    f"but no slot is left"
                )
                break

            running.append(contract)
            signed.append(contract)
            missing_days -= contract.duration_days

        if missing_days <= 0:
            logger.info(f"User {user.id} has locked all necessary days")

        return signed

    def _next_contract(
        self,
        user: User,
        candidates: Sequence[Office],
        running: Sequence[Contract],
        attempt_days: int,
    ) -> Optional[Contract]:
        """
        First valid contract for ``user`` given the current contract list.

        Free ranges are recomputed from ``running`` on every call so that a
        contract signed just before is taken into account.
        """
        user_free = invert_ranges_in_boundary(
            locked_ranges(running, user.id), self.start, self.end
        )
        if not user_free:
            return None

        for office in candidates:
            office_free = invert_ranges_in_boundary(
                office_busy_ranges(running, office.id), self.start, self.end
            )

            for user_availability in user_free:
                for office_availability in office_free:
                    overlap_start = max(user_availability.start, office_availability.start)
                    overlap_end = min(user_availability.end, office_availability.end)

                    if overlap_start >= overlap_end:
                        continue

                    contract_end = min(
                        overlap_start + timedelta(days=attempt_days), overlap_end
                    )
                    logger.debug(
                        f"Trying to lock office {office.id} from {overlap_start} "
                        f"to {contract_end} for user {user.id}"
                    )

                    try:
                        contract = Contract.for_office(
                            office, user.id, overlap_start, contract_end
                        )
                    except ContractError as e:
                        logger.debug(f"Skipping slot: {e}")
                        continue

                    logger.info(
                        f"Locked office {office.id} from {contract.start} to "
                        f"{contract.end} ({contract.duration_days} days) for user {user.id}"
                    )
                    return contract

        return None
