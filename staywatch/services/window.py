"""Module C: Trailing window arithmetic.

The window for a reference date R and size N is [R - (N - 1), R], inclusive of both
ends, so it spans exactly N calendar days. For the default N = 180, a day 179 days
before R is inside and a day 180 days before R is outside.
"""
from datetime import date, timedelta
from staywatch.schemas.compliance import ComplianceConfig
from staywatch.services.errors import InvalidConfigError
from staywatch.services.intervals import DateInterval


def add_days(day: date, days: int) -> date:
    """day + days, clamped to the representable date range."""
    try:
        return day + timedelta(days=days)
    except OverflowError:
        return date.max if days > 0 else date.min


def window_bounds(reference_date: date, window_size_days: int) -> tuple[date, date]:
    if window_size_days < 1:
        raise InvalidConfigError("window_size_days", "must be at least 1")
    return add_days(reference_date, -(window_size_days - 1)), reference_date


def effective_window_bounds(config: ComplianceConfig) -> tuple[date, date]:
    """Window bounds with the start raised to the tracking start date, if one is set.

    When tracking starts after the reference date the returned start is after the end,
    meaning nothing can be counted yet.
    """
    start, end = window_bounds(config.reference_date, config.window_size_days)
    if config.tracking_start_date and start < config.tracking_start_date:
        start = config.tracking_start_date
    return start, end


def is_in_window(day: date, reference_date: date, window_size_days: int) -> bool:
    start, end = window_bounds(reference_date, window_size_days)
    return start <= day <= end


def clip_interval(interval: DateInterval, window_start: date, window_end: date) -> DateInterval | None:
    """Part of the interval inside the window; None when nothing overlaps."""
    start = max(interval.start, window_start)
    end = min(interval.end, window_end)
    if end < start:
        return None
    return DateInterval(start, end)
