# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import random
from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from sora.core.primitives import (
    DateRange,
    invert_ranges_in_boundary,
    is_contained_in,
    overlap,
    total_days,
)
from tests.conftest import d


def r(start: str, end: str) -> DateRange:
    return DateRange(start=d(start), end=d(end))


class TestDateRange:
    def test_start_after_end_is_rejected(self):
        with pytest.raises(ValidationError, match="must be on or before end"):
            r("2024-02-01", "2024-01-01")

    def test_single_day_range_is_allowed(self):
        assert r("2024-01-01", "2024-01-01").days == 0

    def test_days(self):
        assert r("2024-01-01", "2024-12-31").days == 365

    def test_str(self):
        assert str(r("2024-01-01", "2024-01-31")) == "[2024-01-01, 2024-01-31]"

    def test_frozen(self):
        date_range = r("2024-01-01", "2024-01-31")
        with pytest.raises(ValidationError):
            date_range.start = d("2023-01-01")

    def test_total_days(self):
        assert total_days([r("2024-01-01", "2024-01-11"), r("2024-02-01", "2024-02-06")]) == 15
        assert total_days([]) == 0


class TestOverlap:
    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (("2023-01-01", "2023-01-10"), ("2023-01-05", "2023-01-20"), True),
            (("2023-01-01", "2023-01-10"), ("2023-01-10", "2023-01-20"), True),
            (("2023-01-01", "2023-01-10"), ("2023-01-11", "2023-01-20"), False),
            (("2023-01-01", "2023-12-31"), ("2023-03-01", "2023-03-02"), True),
            (("2023-05-01", "2023-05-01"), ("2023-05-01", "2023-05-01"), True),
        ],
    )
    def test_overlap(self, a, b, expected):
        assert overlap(r(*a), r(*b)) is expected
        assert r(*a).overlaps(r(*b)) is expected

    def test_overlap_is_symmetric(self):
        rng = random.Random(7)
        origin = date(2023, 1, 1)
        for _ in range(200):
            a_start = origin + timedelta(days=rng.randrange(0, 100))
            b_start = origin + timedelta(days=rng.randrange(0, 100))
            a = DateRange(start=a_start, end=a_start + timedelta(days=rng.randrange(0, 30)))
            b = DateRange(start=b_start, end=b_start + timedelta(days=rng.randrange(0, 30)))
            assert overlap(a, b) == overlap(b, a)
            if is_contained_in(a, b):
                assert overlap(a, b)


class TestContainment:
    def test_contained(self):
        assert is_contained_in(r("2023-02-01", "2023-02-10"), r("2023-01-01", "2023-12-31"))

    def test_equal_ranges_are_contained(self):
        assert r("2023-01-01", "2023-02-01").is_contained_in(r("2023-01-01", "2023-02-01"))

    def test_partially_outside(self):
        assert not is_contained_in(r("2022-12-25", "2023-01-10"), r("2023-01-01", "2023-12-31"))


class TestInvertRangesInBoundary:
    def test_single_busy_range(self):
        """Gap computation around one busy range."""
        free = invert_ranges_in_boundary(
            [r("2023-01-10", "2023-01-15")], d("2023-01-05"), d("2023-01-20")
        )
        assert free == [r("2023-01-05", "2023-01-10"), r("2023-01-15", "2023-01-20")]

    def test_unsorted_busy_ranges(self):
        free = invert_ranges_in_boundary(
            [r("2023-01-20", "2023-01-25"), r("2023-01-10", "2023-01-15")],
            d("2023-01-05"),
            d("2023-01-30"),
        )
        assert free == [
            r("2023-01-05", "2023-01-10"),
            r("2023-01-15", "2023-01-20"),
            r("2023-01-25", "2023-01-30"),
        ]

    def test_no_busy_ranges_returns_whole_boundary(self):
        assert invert_ranges_in_boundary([], d("2023-01-05"), d("2023-01-30")) == [
            r("2023-01-05", "2023-01-30")
        ]

    def test_fully_covered_boundary(self):
        assert (
            invert_ranges_in_boundary(
                [r("2022-12-01", "2024-01-31")], d("2023-01-01"), d("2023-12-31")
            )
            == []
        )

    def test_overlapping_busy_ranges_are_merged(self):
        free = invert_ranges_in_boundary(
            [r("2023-01-10", "2023-01-20"), r("2023-01-12", "2023-01-15")],
            d("2023-01-01"),
            d("2023-01-31"),
        )
        assert free == [r("2023-01-01", "2023-01-10"), r("2023-01-20", "2023-01-31")]

    def test_busy_ranges_outside_boundary_are_ignored(self):
        free = invert_ranges_in_boundary(
            [r("2022-01-01", "2022-02-01"), r("2024-03-01", "2024-04-01")],
            d("2023-01-01"),
            d("2023-12-31"),
        )
        assert free == [r("2023-01-01", "2023-12-31")]

    def test_busy_ranges_are_clipped_to_boundary(self):
        free = invert_ranges_in_boundary(
            [r("2022-12-01", "2023-02-01"), r("2023-11-01", "2024-02-01")],
            d("2023-01-01"),
            d("2023-12-31"),
        )
        assert free == [r("2023-02-01", "2023-11-01")]

    def test_inverted_boundary_is_rejected(self):
        with pytest.raises(ValueError):
            invert_ranges_in_boundary([], d("2023-12-31"), d("2023-01-01"))

    def test_random_inversions_are_sorted_disjoint_and_round_trip(self):
        rng = random.Random(42)
        start, end = date(2023, 1, 1), date(2023, 12, 31)
        for _ in range(100):
            busy = []
            for _ in range(rng.randrange(0, 6)):
                busy_start = start + timedelta(days=rng.randrange(-30, 365))
                busy.append(
                    DateRange(
                        start=busy_start,
                        end=busy_start + timedelta(days=rng.randrange(1, 60)),
                    )
                )

            free = invert_ranges_in_boundary(busy, start, end)

            for current, following in zip(free, free[1:]):
                assert current.end < following.start
            for free_range in free:
                assert start <= free_range.start <= free_range.end <= end
                assert free_range.days > 0

            # Free and busy ranges together cover the whole boundary
            assert invert_ranges_in_boundary(free + busy, start, end) == []

            # Inverting the free ranges gives back the busy cover inside the boundary
            busy_again = invert_ranges_in_boundary(free, start, end)
            assert invert_ranges_in_boundary(busy_again, start, end) == free
