"""Module D: Distinct presence-day counting.

Two trips covering the same days must count those days once. Summing interval lengths
double counts overlaps, so intervals are unioned first (sort by start, sweep, merge
overlapping or adjacent) and only the merged lengths are summed.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Iterator

from staywatch.services.intervals import DateInterval
from staywatch.services.window import clip_interval

_ONE_DAY = timedelta(days=1)


def merge_intervals(intervals: Iterable[DateInterval]) -> list[DateInterval]:
    """Union of intervals as a sorted list of disjoint, non-adjacent intervals."""
    ordered = sorted(intervals)
    if not ordered:
        return []
    merged: list[DateInterval] = []
    cur_start, cur_end = ordered[0].start, ordered[0].end
    for interval in ordered[1:]:
        if (interval.start - cur_end).days <= 1:
            # overlapping or contiguous
            if interval.end > cur_end:
                cur_end = interval.end
        else:
            merged.append(DateInterval(cur_start, cur_end))
            cur_start, cur_end = interval.start, interval.end
    merged.append(DateInterval(cur_start, cur_end))
    return merged


def count_distinct_days(intervals: Iterable[DateInterval], window_start: date, window_end: date) -> int:
    """Number of distinct calendar days covered by the intervals within [window_start, window_end]."""
    if window_end < window_start:
        return 0
    clipped = []
    for interval in intervals:
        part = clip_interval(interval, window_start, window_end)
        if part is not None:
            clipped.append(part)
    return sum(m.days for m in merge_intervals(clipped))


def iter_days(interval: DateInterval) -> Iterator[date]:
    day = interval.start
    while True:
        yield day
        if day >= interval.end:
            return
        day += _ONE_DAY


def presence_days(intervals: Iterable[DateInterval], not_before: date | None = None) -> frozenset[date]:
    """Every counted day as a set, optionally ignoring days before not_before."""
    days: set[date] = set()
    for interval in merge_intervals(intervals):
        if not_before is not None:
            if interval.end < not_before:
                continue
            if interval.start < not_before:
                interval = DateInterval(not_before, interval.end)
        days.update(iter_days(interval))
    return frozenset(days)


def presence_bounds(days: Iterable[date]) -> tuple[date, date] | None:
    """Earliest and latest presence day, or None for no presence."""
    ordered = sorted(days)
    if not ordered:
        return None
    return ordered[0], ordered[-1]
