# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Interval algebra over closed date ranges.

A ``DateRange`` is a transient value used by the scheduling engine to reason
about busy and free periods. Ranges are closed (``[start, end]``): two ranges
that only touch at an endpoint are considered overlapping. Contracts built on
top of them are half-open in practice, so a free range starting on the day a
busy one ends can be rented back-to-back.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, List

from pydantic import model_validator

from .model import Model


class DateRange(Model):
    """
    A closed interval of calendar dates with ``start <= end``.

    Examples:
        >>> from datetime import date
        >>> january = DateRange(start=date(2024, 1, 1), end=date(2024, 1, 31))
        >>> january.days
        30
    """

    start: date
    end: date

    @model_validator(mode="after")
    def check_ordering(self) -> "DateRange":
        if self.start > self.end:
            raise ValueError(
                f"DateRange start ({self.start}) must be on or before end ({self.end})"
            )
        return self

    @property
    def days(self) -> int:
        """Length of the range in days (``end - start``)."""
        return (self.end - self.start).days

    def overlaps(self, other: "DateRange") -> bool:
        return overlap(self, other)

    def is_contained_in(self, other: "DateRange") -> bool:
        return is_contained_in(self, other)

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}]"


def overlap(a: DateRange, b: DateRange) -> bool:
    """True when both ranges share at least one date. Symmetric."""
    return a.start <= b.end and a.end >= b.start


def is_contained_in(a: DateRange, b: DateRange) -> bool:
    """True when ``a`` lies entirely within ``b``."""
    return b.start <= a.start and b.end >= a.end


def total_days(ranges: Iterable[DateRange]) -> int:
    return sum(date_range.days for date_range in ranges)


def invert_ranges_in_boundary(
    ranges: Iterable[DateRange], start: date, end: date
) -> List[DateRange]:
    """
    Compute the free ranges of ``[start, end]`` left uncovered by ``ranges``.

    The busy ranges may be given in any order and may overlap each other.
    Portions lying outside the boundary are ignored. The result is sorted by
    start date and its ranges never overlap each other; each free range shares
    its endpoints with the neighbouring busy ranges.

    Args:
        ranges: Busy ranges, in any order
        start: First date of the boundary
        end: Last date of the boundary

    Returns:
        Free ranges in ascending order. A single ``[start, end]`` range when
        nothing is busy, an empty list when the boundary is fully covered.

    Raises:
        ValueError: If ``start`` is after ``end``

    Example:
        >>> from datetime import date
        >>> busy = [DateRange(start=date(2023, 1, 10), end=date(2023, 1, 15))]
        >>> [str(r) for r in invert_ranges_in_boundary(busy, date(2023, 1, 5), date(2023, 1, 20))]
        ['[2023-01-05, 2023-01-10]', '[2023-01-15, 2023-01-20]']
    """
    if start > end:
        raise ValueError(f"Boundary start ({start}) must be on or before end ({end})")

    free: List[DateRange] = []
    cursor = start

    for busy in sorted(ranges, key=lambda date_range: date_range.start):
        if busy.end < start or busy.start > end:
            continue
        busy_start = max(busy.start, start)
        if cursor < busy_start:
            free.append(DateRange(start=cursor, end=busy_start))
        cursor = max(cursor, min(busy.end, end))

    if cursor < end:
        free.append(DateRange(start=cursor, end=end))

    return free
