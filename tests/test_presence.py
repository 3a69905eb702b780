"""
Tests for distinct-day counting (interval union).
"""

from __future__ import annotations

from datetime import date

from staywatch.services.intervals import DateInterval
from staywatch.services.presence import count_distinct_days, merge_intervals, presence_bounds, presence_days

WINDOW = (date(2025, 1, 1), date(2025, 12, 31))


def _iv(m1, d1, m2, d2):
    return DateInterval(date(2025, m1, d1), date(2025, m2, d2))


def test_overlap_counted_once():
    assert count_distinct_days([_iv(11, 1, 11, 10), _iv(11, 5, 11, 15)], *WINDOW) == 15


def test_identical_trips_counted_once():
    assert count_distinct_days([_iv(3, 1, 3, 10), _iv(3, 1, 3, 10)], *WINDOW) == 10


def test_adjacent_trips_merge():
    assert merge_intervals([_iv(3, 6, 3, 10), _iv(3, 1, 3, 5)]) == [_iv(3, 1, 3, 10)]


def test_contained_trip_absorbed():
    assert merge_intervals([_iv(3, 1, 3, 31), _iv(3, 10, 3, 12)]) == [_iv(3, 1, 3, 31)]


def test_disjoint_trips_kept_apart():
    assert merge_intervals([_iv(5, 1, 5, 2), _iv(3, 1, 3, 2)]) == [_iv(3, 1, 3, 2), _iv(5, 1, 5, 2)]


def test_clip_to_window():
    assert count_distinct_days([_iv(3, 1, 3, 31)], date(2025, 3, 20), date(2025, 4, 30)) == 12


def test_empty_window_counts_zero():
    assert count_distinct_days([_iv(3, 1, 3, 31)], date(2025, 4, 1), date(2025, 3, 1)) == 0
    assert count_distinct_days([], *WINDOW) == 0


def test_presence_days_and_bounds():
    days = presence_days([_iv(3, 1, 3, 3), _iv(3, 2, 3, 4)], not_before=date(2025, 3, 2))
    assert days == frozenset({date(2025, 3, 2), date(2025, 3, 3), date(2025, 3, 4)})
    assert presence_bounds(days) == (date(2025, 3, 2), date(2025, 3, 4))
    assert presence_bounds([]) is None


def test_merge_and_presence_at_last_representable_day():
    last = DateInterval(date(9999, 12, 30), date.max)
    assert merge_intervals([last, DateInterval(date(9999, 12, 25), date(9999, 12, 29))]) == [
        DateInterval(date(9999, 12, 25), date.max)
    ]
    assert presence_bounds(presence_days([last])) == (date(9999, 12, 30), date.max)
