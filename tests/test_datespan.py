"""Tests for the DateSpan class."""

from datetime import datetime, timedelta, timezone
from typing import Callable
from zoneinfo import ZoneInfo

import pytest

from caltime import DateSpan, date_span
from caltime.errors import (
    ConflictingArgumentsError,
    InvalidArgumentRangeError,
    InvalidArgumentTypeError,
)

At = Callable[..., datetime]


class TestDateSpanConstruction:
    """Tests for DateSpan construction and validation."""

    def test_from_duration(self, at: At) -> None:
        """Test building a span from a begin and a duration."""
        span = DateSpan(at(2017, 7, 16, 12), duration_mins=30, duration_secs=15)

        assert span.begin == at(2017, 7, 16, 12)
        assert span.end == at(2017, 7, 16, 12, 30, 15)
        assert span.total_duration() == 30 * 60_000 + 15_000

    def test_from_end(self, at: At) -> None:
        """Test that the duration is derived from begin and end."""
        span = DateSpan(at(2017, 7, 16, 12), at(2017, 7, 17, 13, 1, 2, 3))

        assert span.duration_mins == 25 * 60 + 1
        assert span.duration_secs == 2
        assert span.duration_ms == 3
        assert span.end == at(2017, 7, 17, 13, 1, 2, 3)

    def test_factory_positional(self, at: At) -> None:
        """Test date_span with a positional minute duration."""
        assert date_span(at(2017, 7, 16), None, 30) == DateSpan(
            at(2017, 7, 16), duration_mins=30
        )

    def test_zero_duration(self, at: At) -> None:
        """Test that an empty span is allowed."""
        span = DateSpan(at(2017, 7, 16), at(2017, 7, 16))
        assert span.total_duration() == 0
        assert span.begin == span.end

    def test_stored_in_utc(self) -> None:
        """Test that begin is normalised to UTC."""
        begin = datetime(2017, 7, 15, 14, tzinfo=ZoneInfo("Asia/Dubai"))
        span = DateSpan(begin, duration_mins=60)

        assert span.begin.tzinfo is timezone.utc
        assert span.begin == datetime(2017, 7, 15, 10, tzinfo=timezone.utc)

    def test_end_with_zero_duration_is_allowed(self, at: At) -> None:
        """Test that explicit zero durations do not conflict with end."""
        span = DateSpan(at(2017, 7, 16), at(2017, 7, 16, 1), 0, 0, 0)
        assert span.duration_mins == 60

    def test_both_end_and_duration(self, at: At) -> None:
        """Test that end plus a duration is rejected."""
        with pytest.raises(ConflictingArgumentsError, match="not both"):
            DateSpan(at(2017, 7, 16), at(2017, 7, 16, 1), duration_mins=60)

    def test_neither_end_nor_duration(self, at: At) -> None:
        """Test that a begin alone is rejected."""
        with pytest.raises(ConflictingArgumentsError):
            DateSpan(at(2017, 7, 16))

    def test_end_before_begin(self, at: At) -> None:
        """Test that an inverted span is rejected."""
        with pytest.raises(InvalidArgumentRangeError, match="end must not be before"):
            DateSpan(at(2017, 7, 16, 1), at(2017, 7, 16))

    def test_naive_begin(self) -> None:
        """Test that naive datetimes are rejected."""
        with pytest.raises(InvalidArgumentTypeError):
            DateSpan(datetime(2017, 7, 16), duration_mins=1)

    def test_non_datetime_end(self, at: At) -> None:
        """Test that a non-datetime end is rejected."""
        with pytest.raises(InvalidArgumentTypeError):
            DateSpan(at(2017, 7, 16), "2017-07-17")

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"duration_mins": -1},
            {"duration_mins": 1, "duration_secs": 60},
            {"duration_mins": 1, "duration_ms": 1000},
        ],
    )
    def test_duration_out_of_range(self, at: At, kwargs: dict[str, int]) -> None:
        """Test that duration components are range checked."""
        with pytest.raises(InvalidArgumentRangeError):
            DateSpan(at(2017, 7, 16), **kwargs)

    def test_duration_past_latest_instant(self) -> None:
        """Test that an unrepresentable end is rejected."""
        begin = datetime(9999, 12, 31, 23, tzinfo=timezone.utc)
        with pytest.raises(InvalidArgumentRangeError, match="latest representable"):
            DateSpan(begin, duration_mins=120)


class TestDateSpanIntersection:
    """Tests for is_intersecting, intersect and union."""

    def test_overlapping(self, at: At) -> None:
        """Test overlap of two spans."""
        a = DateSpan(at(2017, 7, 16, 8), at(2017, 7, 16, 12))
        b = DateSpan(at(2017, 7, 16, 10), at(2017, 7, 16, 14))

        assert a.is_intersecting(b)
        assert b.is_intersecting(a)
        assert a.intersect(b) == DateSpan(at(2017, 7, 16, 10), at(2017, 7, 16, 12))
        assert a.union(b) == DateSpan(at(2017, 7, 16, 8), at(2017, 7, 16, 14))

    def test_touching_spans(self, at: At) -> None:
        """Test that spans sharing only a boundary do not intersect."""
        a = DateSpan(at(2017, 7, 16, 8), at(2017, 7, 16, 12))
        b = DateSpan(at(2017, 7, 16, 12), at(2017, 7, 16, 14))

        assert not a.is_intersecting(b)
        assert a.intersect(b) is None
        assert a.union(b) is None

    def test_contained(self, at: At) -> None:
        """Test that intersecting with a contained span gives that span."""
        outer = DateSpan(at(2017, 7, 16), duration_mins=1440)
        inner = DateSpan(at(2017, 7, 16, 3), duration_mins=60)

        assert outer.intersect(inner) == inner
        assert outer.union(inner) == outer

    def test_self_intersection(self, at: At) -> None:
        """Test that a span intersects itself, even when empty."""
        span = DateSpan(at(2017, 7, 16), duration_mins=5)
        empty = DateSpan(at(2017, 7, 16), at(2017, 7, 16))

        assert span.intersect(span) == span
        assert span.union(span) == span
        assert empty.intersect(empty) == empty

    def test_is_intersecting_non_span(self, at: At) -> None:
        """Test that is_intersecting answers False for other types."""
        span = DateSpan(at(2017, 7, 16), duration_mins=5)
        assert span.is_intersecting(None) is False

    @pytest.mark.parametrize("method", ["intersect", "union", "subtract", "difference"])
    def test_rejects_non_span(self, at: At, method: str) -> None:
        """Test that operations reject non-DateSpan arguments."""
        span = DateSpan(at(2017, 7, 16), duration_mins=5)
        with pytest.raises(InvalidArgumentTypeError, match="must be a DateSpan"):
            getattr(span, method)({"begin": at(2017, 7, 16)})


class TestDateSpanSubtract:
    """Tests for subtract."""

    def test_matching_begin_leaves_one_remainder(self, at: At) -> None:
        """Test subtracting a span that shares the begin."""
        day = DateSpan(at(2017, 7, 16), duration_mins=1440)
        hour = DateSpan(at(2017, 7, 16), duration_mins=60)

        assert day.subtract(hour) == [DateSpan(at(2017, 7, 16, 1), at(2017, 7, 17))]

    def test_matching_end_leaves_one_remainder(self, at: At) -> None:
        """Test subtracting a span that shares the end."""
        day = DateSpan(at(2017, 7, 16), duration_mins=1440)
        hour = DateSpan(at(2017, 7, 16, 23), duration_mins=60)

        assert day.subtract(hour) == [DateSpan(at(2017, 7, 16), at(2017, 7, 16, 23))]

    def test_interior_leaves_two_remainders(self, at: At) -> None:
        """Test subtracting a strictly interior span."""
        day = DateSpan(at(2017, 7, 16), duration_mins=1440)
        hour = DateSpan(at(2017, 7, 16, 12), duration_mins=60)

        assert day.subtract(hour) == [
            DateSpan(at(2017, 7, 16), at(2017, 7, 16, 12)),
            DateSpan(at(2017, 7, 16, 13), at(2017, 7, 17)),
        ]

    def test_equal_leaves_nothing(self, at: At) -> None:
        """Test subtracting a span from itself."""
        span = DateSpan(at(2017, 7, 16), duration_mins=60)
        assert span.subtract(span) == []

    def test_partial_overlap_is_none(self, at: At) -> None:
        """Test that subtract refuses a partial overlap."""
        a = DateSpan(at(2017, 7, 16, 8), at(2017, 7, 16, 12))
        b = DateSpan(at(2017, 7, 16, 10), at(2017, 7, 16, 14))
        assert a.subtract(b) is None

    def test_disjoint_is_none(self, at: At) -> None:
        """Test that subtract refuses disjoint spans."""
        a = DateSpan(at(2017, 7, 16, 8), at(2017, 7, 16, 12))
        b = DateSpan(at(2017, 7, 17, 8), at(2017, 7, 17, 12))
        assert a.subtract(b) is None

    def test_empty_span_removes_nothing(self, at: At) -> None:
        """Test subtracting an empty span."""
        day = DateSpan(at(2017, 7, 16), duration_mins=1440)
        empty = DateSpan(at(2017, 7, 16, 12), at(2017, 7, 16, 12))
        assert day.subtract(empty) == [day]


class TestDateSpanDifference:
    """Tests for difference."""

    def test_disjoint(self, at: At) -> None:
        """Test that a disjoint span leaves this span unchanged."""
        a = DateSpan(at(2017, 7, 16, 8), at(2017, 7, 16, 12))
        b = DateSpan(at(2017, 7, 16, 12), at(2017, 7, 16, 14))
        assert a.difference(b) == [a]

    def test_covered(self, at: At) -> None:
        """Test that a covering span leaves nothing."""
        a = DateSpan(at(2017, 7, 16, 8), at(2017, 7, 16, 12))
        b = DateSpan(at(2017, 7, 16, 6), at(2017, 7, 16, 14))
        assert a.difference(b) == []

    def test_overlap_at_end(self, at: At) -> None:
        """Test the remainder when other overlaps the end."""
        a = DateSpan(at(2017, 7, 16, 8), at(2017, 7, 16, 12))
        b = DateSpan(at(2017, 7, 16, 10), at(2017, 7, 16, 14))
        assert a.difference(b) == [DateSpan(at(2017, 7, 16, 8), at(2017, 7, 16, 10))]

    def test_overlap_at_begin(self, at: At) -> None:
        """Test the remainder when other overlaps the begin."""
        a = DateSpan(at(2017, 7, 16, 10), at(2017, 7, 16, 14))
        b = DateSpan(at(2017, 7, 16, 8), at(2017, 7, 16, 12))
        assert a.difference(b) == [DateSpan(at(2017, 7, 16, 12), at(2017, 7, 16, 14))]

    def test_interior(self, at: At) -> None:
        """Test that an interior span splits this one."""
        a = DateSpan(at(2017, 7, 16, 8), at(2017, 7, 16, 12))
        b = DateSpan(at(2017, 7, 16, 9), at(2017, 7, 16, 10))
        assert a.difference(b) == [
            DateSpan(at(2017, 7, 16, 8), at(2017, 7, 16, 9)),
            DateSpan(at(2017, 7, 16, 10), at(2017, 7, 16, 12)),
        ]


class TestDateSpanContainsAndEquality:
    """Tests for containment and equality."""

    def test_contains_instant(self, at: At) -> None:
        """Test that begin is inside and end is outside."""
        span = DateSpan(at(2017, 7, 16, 8), at(2017, 7, 16, 12))

        assert at(2017, 7, 16, 8) in span
        assert at(2017, 7, 16, 11, 59, 59, 999) in span
        assert at(2017, 7, 16, 12) not in span
        assert datetime(2017, 7, 16, 9) not in span

    def test_contains_span(self, at: At) -> None:
        """Test span containment."""
        span = DateSpan(at(2017, 7, 16, 8), at(2017, 7, 16, 12))

        assert span.contains(DateSpan(at(2017, 7, 16, 9), duration_mins=60))
        assert not span.contains(DateSpan(at(2017, 7, 16, 11), duration_mins=120))

    def test_contains_rejects_naive(self, at: At) -> None:
        """Test that contains() rejects naive datetimes."""
        span = DateSpan(at(2017, 7, 16, 8), at(2017, 7, 16, 12))
        with pytest.raises(InvalidArgumentTypeError):
            span.contains(datetime(2017, 7, 16, 9))

    def test_equality_across_zones(self, at: At) -> None:
        """Test that the same instant in different zones gives equal spans."""
        dubai = datetime(2017, 7, 15, 14, tzinfo=ZoneInfo("Asia/Dubai"))
        assert DateSpan(dubai, duration_mins=60) == DateSpan(
            at(2017, 7, 15, 10), duration_mins=60
        )

    def test_is_equal(self, at: At) -> None:
        """Test exact component equality."""
        a = DateSpan(at(2017, 7, 16), duration_mins=60)

        assert a.is_equal(DateSpan(at(2017, 7, 16), at(2017, 7, 16, 1)))
        assert not a.is_equal(DateSpan(at(2017, 7, 16), duration_mins=61))
        assert not a.is_equal("span")
        assert len({a, DateSpan(at(2017, 7, 16), duration_mins=60)}) == 1

    def test_duration_timedelta(self, at: At) -> None:
        """Test the timedelta view of the duration."""
        span = DateSpan(at(2017, 7, 16), duration_mins=90)
        assert span.duration() == timedelta(minutes=90)

    def test_str(self, at: At) -> None:
        """Test the ISO interval form."""
        span = DateSpan(at(2017, 7, 16, 12, 55, 40, 600), duration_mins=30)
        assert str(span) == "2017-07-16T12:55:40.600Z/2017-07-16T13:25:40.600Z"
