# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import Field

from ..core.primitives import Model, UserId


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class User(Model):
    """
    A marketplace member.

    A user can own offices (as host) and rent other users' offices (as guest)
    at the same time. Neither relationship is stored here: ownership lives on
    ``Office.owner`` and tenancy on ``Contract.guest``.
    """

    id: UserId = Field(default_factory=UserId)
    created_at: datetime = Field(default_factory=utc_now)
    first_name: str
    last_name: str

    @classmethod
    def new(cls, first_name: str, last_name: str) -> "User":
        return cls(first_name=first_name, last_name=last_name)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return f"{self.full_name} ({self.id})"
