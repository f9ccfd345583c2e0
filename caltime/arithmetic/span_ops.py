"""Operations on collections of spans.

This module provides functions that work across many spans at once:
    - sort_spans: Order DateSpans by begin instant
    - merge_spans: Collapse DateSpans into a minimal disjoint cover
    - intersect_spans: Overlap of two DateSpan collections
    - measure_spans: Total time covered, raw or in natural units
    - sort_time_spans: Order TimeSpans by start time of day
    - merge_time_spans: Collapse TimeSpans into a minimal disjoint cover

These complement the pairwise algebra on DateSpan and TimeSpan. None of
them mutate their input.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, TypeVar

from caltime import config
from caltime._internal.validation import coerce_enum
from caltime.core.datespan import DateSpan
from caltime.core.timespan import TimeSpan
from caltime.errors import InvalidArgumentTypeError
from caltime.units.policy import DurationPolicy
from caltime.units.timezone import TimeZone

logger = logging.getLogger(__name__)

S = TypeVar("S", DateSpan, TimeSpan)


def _collect(name: str, spans: Iterable[S], kind: type[S]) -> list[S]:
    """Materialise an iterable of spans, checking every element's type."""
    if isinstance(spans, (str, bytes)) or not isinstance(spans, Iterable):
        raise InvalidArgumentTypeError(
            f"{name} must be an iterable of {kind.__name__}, "
            f"got {type(spans).__name__}"
        )
    items = list(spans)
    for item in items:
        if not isinstance(item, kind):
            raise InvalidArgumentTypeError(
                f"{name} must contain only {kind.__name__}, "
                f"got {type(item).__name__}"
            )
    return items


# -----------------------------------------------------------------------------
# DateSpan collections
# -----------------------------------------------------------------------------


def sort_spans(spans: Iterable[DateSpan], descending: bool = False) -> list[DateSpan]:
    """Sort DateSpans by begin instant.

    The sort is stable: spans with equal begins keep their input order.

    Args:
        spans: DateSpans to sort.
        descending: Latest begin first when True.

    Returns:
        A new sorted list.

    Raises:
        InvalidArgumentTypeError: If spans is not an iterable of DateSpan.
    """
    items = _collect("spans", spans, DateSpan)
    return sorted(items, key=lambda s: s.begin, reverse=descending)


def merge_spans(spans: Iterable[DateSpan]) -> list[DateSpan]:
    """Merge overlapping or touching DateSpans into a minimal set.

    Spans are sorted by begin and swept left to right. A span that starts
    after the current run's end closes the run; anything else extends it.
    Spans that touch end to begin are therefore merged.

    Args:
        spans: DateSpans to merge.

    Returns:
        A list sorted by begin whose spans are pairwise disjoint.

    Raises:
        InvalidArgumentTypeError: If spans is not an iterable of DateSpan.

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2017, 7, 16, 12, tzinfo=timezone.utc)
        >>> spans = [
        ...     DateSpan(start, duration_mins=60),
        ...     DateSpan(start.replace(hour=13), duration_mins=60),
        ... ]
        >>> [str(s) for s in merge_spans(spans)]
        ['2017-07-16T12:00:00.000Z/2017-07-16T14:00:00.000Z']
    """
    ordered = sort_spans(spans)
    if not ordered:
        return []

    result: list[DateSpan] = []
    begin, end = ordered[0].begin, ordered[0].end
    for span in ordered[1:]:
        if span.begin > end:
            result.append(DateSpan._from_bounds(begin, end))
            begin, end = span.begin, span.end
        else:
            end = max(end, span.end)
    result.append(DateSpan._from_bounds(begin, end))
    return result


def intersect_spans(
    spans_a: Iterable[DateSpan], spans_b: Iterable[DateSpan]
) -> list[DateSpan]:
    """Return the time covered by both collections.

    Each collection is merged first so that overlaps within one side are
    not counted twice.

    Args:
        spans_a: First collection of DateSpans.
        spans_b: Second collection of DateSpans.

    Returns:
        The overlaps in time order.

    Raises:
        InvalidArgumentTypeError: If either argument is not an iterable of
            DateSpan.
    """
    merged_a = merge_spans(spans_a)
    merged_b = merge_spans(spans_b)

    result: list[DateSpan] = []
    for span_a in merged_a:
        found = False
        for span_b in merged_b:
            overlap = span_a.intersect(span_b)
            if overlap is not None:
                result.append(overlap)
                found = True
            elif found:
                # merged_b is sorted and disjoint, so nothing later can overlap
                break
    return result


def measure_spans(
    spans: Iterable[DateSpan],
    policy: DurationPolicy | int,
    timezone: TimeZone | str | None = None,
) -> int:
    """Measure the time covered by a collection of DateSpans.

    The spans are merged first. RAW_MSECS sums the merged durations in
    milliseconds. The natural policies count how many distinct civil
    seconds, minutes, hours or days the merged spans touch, with unit
    boundaries taken in the given timezone. A unit touched by the end of
    one span and the start of the next is counted once.

    Args:
        spans: DateSpans to measure.
        policy: A DurationPolicy or its integer code.
        timezone: Zone for natural unit boundaries. Defaults to
            config.DEFAULT_TIMEZONE, or the process's local zone when that
            is unset.

    Returns:
        Milliseconds for RAW_MSECS, otherwise a unit count.

    Raises:
        InvalidArgumentTypeError: If spans is not an iterable of DateSpan
            or policy is not an integer.
        InvalidArgumentRangeError: If policy is not a known code.
        UnresolvableTimezoneError: If the timezone cannot be resolved.

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2017, 7, 16, 12, 55, 40, 600000, tzinfo=timezone.utc)
        >>> span = DateSpan(start, duration_mins=30)
        >>> measure_spans([span], DurationPolicy.NATURAL_MINS, "Etc/UTC")
        31
    """
    policy = coerce_enum(DurationPolicy, "policy", policy)
    merged = merge_spans(spans)
    if timezone is not None:
        timezone = TimeZone.resolve(timezone)

    if not policy.is_natural:
        return sum(span.total_duration() for span in merged)

    if timezone is None:
        timezone = config.DEFAULT_TIMEZONE
    zone = TimeZone.resolve(timezone)
    logger.debug(
        "Measuring %d merged spans as %s in %s", len(merged), policy.name, zone
    )

    total = 0
    counted_until: datetime | None = None
    for span in merged:
        if span.begin == span.end:
            continue

        first_full = zone.ceil(span.begin, policy)
        last_full = zone.floor(span.end, policy)
        if last_full > first_full:
            total += zone.count_units(first_full, last_full, policy)

        # Leading partial unit, unless the previous span already counted it
        if span.begin < first_full and (
            counted_until is None or counted_until <= zone.floor(span.begin, policy)
        ):
            total += 1

        # Trailing partial unit
        if span.end > last_full and last_full >= first_full:
            total += 1

        counted_until = zone.ceil(span.end, policy)

    return total


# -----------------------------------------------------------------------------
# TimeSpan collections
# -----------------------------------------------------------------------------


def sort_time_spans(
    spans: Iterable[TimeSpan], descending: bool = False
) -> list[TimeSpan]:
    """Sort TimeSpans by start time of day. The sort is stable."""
    items = _collect("spans", spans, TimeSpan)
    return sorted(items, key=lambda s: s.begin_ms, reverse=descending)


def merge_time_spans(spans: Iterable[TimeSpan]) -> list[TimeSpan]:
    """Merge overlapping or touching TimeSpans into a minimal set.

    Works like merge_spans, on offsets from midnight.

    Raises:
        InvalidArgumentTypeError: If spans is not an iterable of TimeSpan.
    """
    ordered = sort_time_spans(spans)
    if not ordered:
        return []

    result: list[TimeSpan] = []
    begin, end = ordered[0].begin_ms, ordered[0].end_ms
    for span in ordered[1:]:
        if span.begin_ms > end:
            result.append(TimeSpan._from_offsets(begin, end))
            begin, end = span.begin_ms, span.end_ms
        else:
            end = max(end, span.end_ms)
    result.append(TimeSpan._from_offsets(begin, end))
    return result


__all__ = [
    "sort_spans",
    "merge_spans",
    "intersect_spans",
    "measure_spans",
    "sort_time_spans",
    "merge_time_spans",
]
