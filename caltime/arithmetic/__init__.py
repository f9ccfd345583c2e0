"""Operations on collections of spans.

This module provides:
    - sort_spans, merge_spans, intersect_spans, measure_spans: DateSpan
      collections
    - sort_time_spans, merge_time_spans: TimeSpan collections
"""

from __future__ import annotations

from caltime.arithmetic.span_ops import (
    intersect_spans,
    measure_spans,
    merge_spans,
    merge_time_spans,
    sort_spans,
    sort_time_spans,
)

__all__: list[str] = [
    "intersect_spans",
    "measure_spans",
    "merge_spans",
    "merge_time_spans",
    "sort_spans",
    "sort_time_spans",
]
