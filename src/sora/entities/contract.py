# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date, datetime

from pydantic import Field, model_validator

from ..core.primitives import (
    CONTRACT_DURATION_MINIMUM_DAYS,
    ContractId,
    ContractTooShort,
    DateRange,
    GuestIsHost,
    Model,
    NonNegativeInt,
    OfficeId,
    UserId,
)
from .office import Office
from .user import utc_now


class Contract(Model):
    """
    A rental agreement between the owner of an office (host) and a guest.

    A contract lasts at least ``CONTRACT_DURATION_MINIMUM_DAYS`` days and a
    user can never rent an office they own. ``rent`` is the monthly price of
    the whole office in cents at signing time.
    """

    id: ContractId = Field(default_factory=ContractId)
    created_at: datetime = Field(default_factory=utc_now)
    host: UserId
    guest: UserId
    office: OfficeId
    rent: NonNegativeInt
    start: date
    end: date

    @model_validator(mode="after")
    def check_contract(self) -> "Contract":
        days = (self.end - self.start).days
        if days < CONTRACT_DURATION_MINIMUM_DAYS:
            raise ContractTooShort(days=days, minimum=CONTRACT_DURATION_MINIMUM_DAYS)
        if self.guest == self.host:
            raise GuestIsHost(self.guest)
        return self

    @classmethod
    def new(
        cls,
        host: UserId,
        guest: UserId,
        office: OfficeId,
        rent: int,
        start: date,
        end: date,
    ) -> "Contract":
        """
        Raises:
            ContractTooShort: ``end - start`` is below the legal minimum
            GuestIsHost: the guest owns the office
        """
        return cls(
            host=host, guest=guest, office=office, rent=rent, start=start, end=end
        )

    @classmethod
    def for_office(
        cls, office: Office, guest: UserId, start: date, end: date
    ) -> "Contract":
        """Create a contract whose host and rent derive from ``office``."""
        return cls.new(
            host=office.owner,
            guest=guest,
            office=office.id,
            rent=office.monthly_rent,
            start=start,
            end=end,
        )

    @property
    def duration_days(self) -> int:
        return (self.end - self.start).days

    @property
    def date_range(self) -> DateRange:
        return DateRange(start=self.start, end=self.end)

    def __str__(self) -> str:
        return f"{self.id} ({self.office}, {self.start} -> {self.end})"
