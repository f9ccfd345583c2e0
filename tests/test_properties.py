"""
Property-based tests for span algebra invariants using Hypothesis.

These tests check the algebraic laws of DateSpan and the collection
operations against random spans.
"""

from datetime import datetime, timedelta, timezone

from hypothesis import given, settings
from hypothesis import strategies as st

from caltime import (
    DateSpan,
    DurationPolicy,
    measure_spans,
    merge_spans,
    sort_spans,
)

# ============================================================================
# Strategies
# ============================================================================

instants = st.datetimes(
    min_value=datetime(2000, 1, 1),
    max_value=datetime(2030, 12, 31),
    timezones=st.just(timezone.utc),
).map(lambda dt: dt.replace(microsecond=dt.microsecond // 1000 * 1000))

spans = st.builds(
    DateSpan,
    instants,
    duration_mins=st.integers(min_value=0, max_value=3 * 1440),
    duration_secs=st.integers(min_value=0, max_value=59),
    duration_ms=st.integers(min_value=0, max_value=999),
)

non_empty_spans = st.builds(
    DateSpan,
    instants,
    duration_mins=st.integers(min_value=1, max_value=3 * 1440),
)

span_lists = st.lists(spans, max_size=12)


# ============================================================================
# Pairwise Algebra
# ============================================================================


@given(spans)
def test_self_intersection_and_union(span: DateSpan):
    """A span intersected or united with itself is unchanged."""
    assert span.intersect(span) == span
    assert span.union(span) == span


@given(non_empty_spans, st.integers(min_value=0, max_value=10**9), non_empty_spans)
def test_disjoint_spans_do_not_intersect(a: DateSpan, gap_ms: int, b: DateSpan):
    """Spans that share no instant never intersect."""
    later = DateSpan(
        a.end + timedelta(milliseconds=gap_ms), duration_mins=b.duration_mins
    )
    assert not a.is_intersecting(later)
    assert not later.is_intersecting(a)
    assert a.intersect(later) is None
    assert a.union(later) is None


@given(instants, st.integers(min_value=0, max_value=10**10))
def test_end_round_trip(begin: datetime, length_ms: int):
    """A span built from (begin, end) reports that end and duration."""
    end = begin + timedelta(milliseconds=length_ms)
    span = DateSpan(begin, end)
    assert span.end == end
    assert span.total_duration() == length_ms


@given(spans, spans)
def test_difference_stays_inside_and_avoids_other(a: DateSpan, b: DateSpan):
    """Remainders lie inside the span and outside the removed span."""
    for part in a.difference(b):
        assert a.contains(part)
        if part.total_duration() > 0 and b.total_duration() > 0:
            assert not part.is_intersecting(b)


@given(spans, spans)
def test_subtract_agrees_with_difference_when_contained(a: DateSpan, b: DateSpan):
    """subtract and difference agree whenever subtract is defined."""
    result = a.subtract(b)
    if a.contains(b):
        assert result == a.difference(b)
    else:
        assert result is None


# ============================================================================
# Collection Operations
# ============================================================================


@given(span_lists)
def test_merge_is_idempotent(items: list[DateSpan]):
    """Merging a merged list changes nothing."""
    once = merge_spans(items)
    assert merge_spans(once) == once


@given(span_lists)
def test_merge_output_sorted_and_disjoint(items: list[DateSpan]):
    """Merged spans are sorted with a gap between neighbours."""
    merged = merge_spans(items)
    for left, right in zip(merged, merged[1:]):
        assert left.end < right.begin
        assert not left.is_intersecting(right)


@given(span_lists)
def test_merge_covers_every_input(items: list[DateSpan]):
    """Every input span lies inside exactly one merged span."""
    merged = merge_spans(items)
    for span in items:
        assert sum(1 for m in merged if m.contains(span)) == 1


@given(st.lists(spans, max_size=12, unique_by=lambda s: s.begin))
def test_descending_sort_reverses_ascending(items: list[DateSpan]):
    """With distinct begins, descending order is ascending reversed."""
    assert sort_spans(items, descending=True) == sort_spans(items)[::-1]


@given(span_lists)
def test_raw_measure_sums_merged_durations(items: list[DateSpan]):
    """RAW_MSECS equals the total duration of the merged spans."""
    expected = sum(s.total_duration() for s in merge_spans(items))
    assert measure_spans(items, DurationPolicy.RAW_MSECS) == expected
    assert expected <= sum(s.total_duration() for s in items)


@settings(max_examples=50)
@given(span_lists)
def test_natural_seconds_bound_raw_duration(items: list[DateSpan]):
    """Touched seconds cover the raw duration with at most one extra per edge."""
    merged = merge_spans(items)
    raw_ms = measure_spans(items, DurationPolicy.RAW_MSECS)
    seconds = measure_spans(items, DurationPolicy.NATURAL_SECS, "Etc/UTC")

    assert seconds * 1000 >= raw_ms
    assert seconds <= raw_ms // 1000 + 2 * len(merged)
