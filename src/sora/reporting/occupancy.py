# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Occupancy reports printed after a simulation: who occupies each office and
when, and how many days and how much rent each user is committed to.
"""

from __future__ import annotations

from typing import List

import pandas as pd

from .base import BaseReport, contract_total_rent, format_cents

OFFICE_SCHEDULE_COLUMNS = ["office", "contract", "guest", "start", "end", "days", "new"]
USER_SUMMARY_COLUMNS = [
    "user",
    "name",
    "contracts",
    "days_locked",
    "target_days",
    "missing_days",
    "total_rent",
]


class OfficeScheduleReport(BaseReport):
    """One row per contract, grouped by office in identifier order."""

    def generate(self) -> pd.DataFrame:
        new_ids = {contract.id for contract in self._results.new_contracts}
        rows = []
        for office in self._offices:
            for contract in self._results.contracts_for_office(office.id):
                rows.append(
                    {
                        "office": str(office.id),
                        "contract": str(contract.id),
                        "guest": str(contract.guest),
                        "start": contract.start,
                        "end": contract.end,
                        "days": contract.duration_days,
                        "new": contract.id in new_ids,
                    }
                )
        return pd.DataFrame(rows, columns=OFFICE_SCHEDULE_COLUMNS)

    def render(self) -> str:
        lines: List[str] = ["Displaying information for offices", ""]
        for office in self._offices:
            lines.append(f"Office {office.id}:")
            for contract in self._results.contracts_for_office(office.id):
                lines.append(
                    f"> From {contract.start} to {contract.end} ({contract.duration_days} days), "
                    f"office will be occupied by {contract.guest} with contract {contract.id}"
                )
            lines.append("")
        return "\n".join(lines)


class UserOccupancyReport(BaseReport):
    """One row per user with locked days against target and total rent."""

    def generate(self) -> pd.DataFrame:
        rows = []
        for user in self._users:
            contracts = self._results.contracts_for_guest(user.id)
            rows.append(
                {
                    "user": str(user.id),
                    "name": user.full_name,
                    "contracts": len(contracts),
                    "days_locked": self._results.locked_days(user.id),
                    "target_days": self._results.target_days_in_office,
                    "missing_days": self._results.missing_days(user.id),
                    "total_rent": sum(contract_total_rent(c) for c in contracts),
                }
            )
        return pd.DataFrame(rows, columns=USER_SUMMARY_COLUMNS)

    def render(self) -> str:
        lines: List[str] = ["Displaying user information", ""]
        for user in self._users:
            contracts = self._results.contracts_for_guest(user.id)
            lines.append(f"Displaying information for {user.id}")
            lines.append(
                f"> They will rent offices for {self._results.locked_days(user.id)} days "
                f"with a total of {len(contracts)} contracts"
            )
            for contract in contracts:
                lines.append(
                    f"> Contract {contract.id} for office {contract.office} will span from "
                    f"{contract.start} to {contract.end}, for a total of "
                    f"{contract.duration_days} days"
                )
                lines.append(
                    f"> The rent for said office is {format_cents(contract.rent)}/month, "
                    f"user will be paying a total of {format_cents(contract_total_rent(contract))} "
                    f"for the contract duration"
                )
            missing = self._results.missing_days(user.id)
            if missing:
                lines.append(f"> Still {missing} days short of the target")
            lines.append("")
        return "\n".join(lines)


class OccupancyReport:
    """
    Complete post-simulation report: office schedules, then user summaries.

    Example:
        ```python
        report = OccupancyReport(result, store.users(), store.leaf_offices())
        print(report.render())
        summary = report.user_summary()
        ```
    """

    def __init__(self, results, users, offices):
        users = list(users)
        offices = list(offices)
        self.offices = OfficeScheduleReport(results, users, offices)
        self.users = UserOccupancyReport(results, users, offices)

    def office_schedule(self) -> pd.DataFrame:
        return self.offices.generate()

    def user_summary(self) -> pd.DataFrame:
        return self.users.generate()

    def render(self) -> str:
        return "\n".join(
            [
                "Simulation done, printing best solution found:",
                self.offices.render(),
                "============================",
                self.users.render(),
            ]
        )
