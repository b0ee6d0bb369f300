# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Typed, time-ordered identifiers for every entity kind.

Each identifier wraps a UUID version 7, strictly increasing within the
process, and renders with a short prefix naming the entity kind (``usr-``,
``ofc-``, ``spl-``, ``agr-``). Two identifiers of different kinds never
compare equal, even when they wrap the same UUID.

Examples:
    >>> user_id = UserId()
    >>> str(user_id).startswith("usr-")
    True
    >>> parse_identifier(str(user_id)) == user_id
    True
"""

from __future__ import annotations

from typing import ClassVar, Dict, Type, Union
from uuid import UUID

from pydantic import Field
from uuid_utils.compat import uuid7

from .model import Model


class Identifier(Model):
    """
    Base class for typed identifiers.

    Subclasses only set ``prefix``. Identifiers sort by their UUID, which
    follows creation order.
    """

    prefix: ClassVar[str] = ""

    uuid: UUID = Field(default_factory=uuid7)

    def __str__(self) -> str:
        return f"{self.prefix}-{self.uuid}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.uuid < other.uuid

    @classmethod
    def new(cls):
        return cls()

    @classmethod
    def parse(cls, value: str):
        """Parse ``<prefix>-<uuid>`` for this identifier kind."""
        prefix, _, raw = value.partition("-")
        if prefix != cls.prefix or not raw:
            raise ValueError(f"'{value}' is not a valid {cls.__name__}")
        return cls(uuid=UUID(raw))


class UserId(Identifier):
    prefix: ClassVar[str] = "usr"


class RealOfficeId(Identifier):
    prefix: ClassVar[str] = "ofc"


class SubdivisionId(Identifier):
    prefix: ClassVar[str] = "spl"


class ContractId(Identifier):
    prefix: ClassVar[str] = "agr"


# An office is either a real office or a subdivision of one
OfficeId = Union[RealOfficeId, SubdivisionId]

IDENTIFIER_KINDS: Dict[str, Type[Identifier]] = {
    kind.prefix: kind for kind in (UserId, RealOfficeId, SubdivisionId, ContractId)
}


def parse_identifier(value: str) -> Identifier:
    """
    Parse any rendered identifier back into its typed form.

    Raises:
        ValueError: If the prefix is unknown or the UUID part is malformed
    """
    prefix = value.partition("-")[0]
    kind = IDENTIFIER_KINDS.get(prefix)
    if kind is None:
        raise ValueError(f"Unknown identifier prefix '{prefix}' in '{value}'")
    return kind.parse(value)
