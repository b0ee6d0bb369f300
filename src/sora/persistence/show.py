# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Read-only dumps of the store content.

A filter selects what to display: nothing (every table), a table alias
(``users``, ``usr``, ``offices``, ``ofc``, ``spl``, ``contracts``, ``agr``...)
or a single rendered identifier such as ``agr-0190c3e2-...``.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Tuple
from uuid import UUID

import pandas as pd

from ..core.primitives import Model, ShowFilterError, parse_identifier
from .store import Store

logger = logging.getLogger(__name__)


class Aggregate(str, Enum):
    """Displayable entity groups."""

    USERS = "users"
    OFFICES = "offices"
    OFFICE_SUBDIVISIONS = "subdivisions"
    CONTRACTS = "contracts"

    @property
    def table(self) -> str:
        if self is Aggregate.OFFICE_SUBDIVISIONS:
            return "offices"
        return self.value

    @property
    def condition(self) -> Optional[str]:
        if self is Aggregate.OFFICE_SUBDIVISIONS:
            return "parent_office_id IS NOT NULL"
        return None

    @classmethod
    def from_alias(cls, alias: str) -> Optional["Aggregate"]:
        return _ALIASES.get(alias)


_ALIASES = {
    "usr": Aggregate.USERS,
    "user": Aggregate.USERS,
    "users": Aggregate.USERS,
    "ofc": Aggregate.OFFICES,
    "office": Aggregate.OFFICES,
    "offices": Aggregate.OFFICES,
    "spl": Aggregate.OFFICE_SUBDIVISIONS,
    "agr": Aggregate.CONTRACTS,
    "contract": Aggregate.CONTRACTS,
    "contracts": Aggregate.CONTRACTS,
}

_PREFIX_AGGREGATES = {
    "usr": Aggregate.USERS,
    "ofc": Aggregate.OFFICES,
    "spl": Aggregate.OFFICES,
    "agr": Aggregate.CONTRACTS,
}


class ShowFilter(Model):
    """What to display: everything, one aggregate, or one row."""

    aggregate: Optional[Aggregate] = None
    uuid: Optional[UUID] = None

    @classmethod
    def parse(cls, value: Optional[str]) -> "ShowFilter":
        """
        Parse a user supplied filter.

        Raises:
            ShowFilterError: If the value is neither an alias nor an identifier
        """
        if value is None:
            return cls()

        cleaned = value.strip().strip("'\"")
        if not cleaned:
            return cls()

        aggregate = Aggregate.from_alias(cleaned)
        if aggregate is not None:
            return cls(aggregate=aggregate)

        try:
            identifier = parse_identifier(cleaned)
        except ValueError as e:
            raise ShowFilterError(cleaned) from e

        return cls(aggregate=_PREFIX_AGGREGATES[identifier.prefix], uuid=identifier.uuid)


def show(store: Store, show_filter: ShowFilter) -> List[Tuple[str, pd.DataFrame]]:
    """Titled DataFrames matching ``show_filter``."""
    logger.info(f"Using filter {show_filter}")

    if show_filter.aggregate is None:
        return [
            (aggregate.value, store.table(aggregate.table))
            for aggregate in (Aggregate.USERS, Aggregate.CONTRACTS, Aggregate.OFFICES)
        ]

    aggregate = show_filter.aggregate
    if show_filter.uuid is not None:
        return [
            (
                f"{aggregate.value} {show_filter.uuid}",
                store.row(aggregate.table, show_filter.uuid),
            )
        ]

    return [(aggregate.value, store.table(aggregate.table, aggregate.condition))]


def render(tables: List[Tuple[str, pd.DataFrame]]) -> str:
    sections = []
    for title, frame in tables:
        body = "(empty)" if frame.empty else frame.to_string(index=False)
        sections.append(f"== {title} ({len(frame)} rows)\n{body}")
    return "\n\n".join(sections)
