"""Module F: Forecasting, what-if scenarios and safe-entry planning.

Everything here re-runs the normal compliance pipeline with the reference date moved
one day at a time. A hypothetical trip is never special-cased: it is appended to a new
tuple of trips and scored like any other.
"""
from __future__ import annotations

import calendar
import logging
from datetime import date, timedelta
from typing import Iterable, Iterator

from staywatch.schemas.compliance import (
    ComplianceConfig,
    ComplianceResult,
    DailyCompliance,
    ExpiryProjection,
    SafeEntryResult,
    Trip,
    WhatIfResult,
)
from staywatch.services.compliance import result_from_normalized
from staywatch.services.countries import is_counted_country
from staywatch.services.errors import InvalidDateRangeError
from staywatch.services.intervals import DateInterval, NormalizedTrips, normalize_trips
from staywatch.services.presence import presence_days
from staywatch.services.window import add_days, clip_interval
from staywatch.services.risk import classify_risk

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)


class ComplianceForecast:
    """Daily compliance results for every date in [start, end], computed lazily.

    Inputs are frozen at construction, so iterating twice yields the same results.
    """

    def __init__(self, trips: Iterable[Trip], config: ComplianceConfig, start: date, end: date):
        if end < start:
            raise InvalidDateRangeError(start, end, what="forecast")
        config.ensure_valid()
        self.trips = tuple(trips)
        self.config = config
        self.start = start
        self.end = end
        self._normalized = normalize_trips(self.trips)

    def __len__(self) -> int:
        return (self.end - self.start).days + 1

    def __iter__(self) -> Iterator[ComplianceResult]:
        day = self.start
        while True:
            yield result_from_normalized(self._normalized, self.config.at(day))
            if day >= self.end:
                return
            day += _ONE_DAY

    def first_breach(self) -> ComplianceResult | None:
        return next((r for r in self if not r.is_compliant), None)


def forecast(trips: Iterable[Trip], config: ComplianceConfig, start: date, end: date) -> ComplianceForecast:
    return ComplianceForecast(trips, config, start, end)


def _influence_end(trip: Trip, config: ComplianceConfig) -> date:
    # Last reference date whose window still contains the trip's exit day.
    return add_days(trip.exit_date, config.window_size_days - 1)


def what_if(trips: Iterable[Trip], hypothetical: Trip, config: ComplianceConfig) -> WhatIfResult:
    """Score persisted trips plus one unbooked trip over every date the new trip can affect.

    The breach may not be on the trip itself: a later booked trip can tip the window
    over the limit once it slides, so each date from entry through the end of the
    trip's influence is checked.
    """
    scenario = (*tuple(trips), hypothetical)
    run = forecast(scenario, config, hypothetical.entry_date, _influence_end(hypothetical, config))
    first_breach_date = None
    peak = None
    at_exit = None
    for result in run:
        if first_breach_date is None and not result.is_compliant:
            first_breach_date = result.reference_date
        if peak is None or result.days_used > peak.days_used:
            peak = result
        if result.reference_date == hypothetical.exit_date:
            at_exit = result
    counted = not hypothetical.ghosted and is_counted_country(hypothetical.country)
    logger.debug(
        "what-if %s..%s %s: first breach %s, peak %d on %s",
        hypothetical.entry_date, hypothetical.exit_date, hypothetical.country,
        first_breach_date, peak.days_used, peak.reference_date,
    )
    return WhatIfResult(
        hypothetical_trip=hypothetical,
        trip_days=hypothetical.duration_days if counted else 0,
        is_safe=first_breach_date is None,
        first_breach_date=first_breach_date,
        result_at_exit=at_exit,
        peak_days_used=peak.days_used,
        peak_date=peak.reference_date,
        warnings=at_exit.warnings,
    )


def earliest_safe_start(
    trips: Iterable[Trip],
    hypothetical: Trip,
    config: ComplianceConfig,
    max_shift_days: int | None = None,
) -> date | None:
    """First entry date, on or after the planned one, at which the same-length trip causes no breach.

    Searches up to window_size_days ahead unless max_shift_days is given. None if no such date.
    """
    persisted = tuple(trips)
    horizon = config.window_size_days if max_shift_days is None else max_shift_days
    for shift in range(horizon + 1):
        if (date.max - hypothetical.exit_date).days < shift:
            break
        candidate = hypothetical.shifted(shift)
        run = forecast((*persisted, candidate), config, candidate.entry_date, _influence_end(candidate, config))
        if run.first_breach() is None:
            return candidate.entry_date
    return None


def _can_enter(result: ComplianceResult) -> bool:
    # Room for at least one more day.
    return result.days_used <= result.limit_days - 1


def earliest_safe_entry(trips: Iterable[Trip], config: ComplianceConfig) -> date | None:
    """First date from config.reference_date on which entry leaves room for at least one day.

    Returns the reference date itself when entry is possible now. None means nothing within
    window_size_days qualifies (e.g. long future trips already booked), never "enter now".
    """
    normalized = normalize_trips(trips)
    for ahead in range(config.window_size_days + 1):
        if (date.max - config.reference_date).days < ahead:
            break
        day = config.reference_date + timedelta(days=ahead)
        if _can_enter(result_from_normalized(normalized, config.at(day))):
            return day
    return None


def safe_entry_info(trips: Iterable[Trip], config: ComplianceConfig) -> SafeEntryResult:
    trips = tuple(trips)
    normalized = normalize_trips(trips)
    today = result_from_normalized(normalized, config)
    if _can_enter(today):
        return SafeEntryResult(
            can_enter_today=True,
            earliest_safe_date=config.reference_date,
            days_until_compliant=0,
            days_used_on_entry=today.days_used,
        )
    safe_date = earliest_safe_entry(trips, config)
    if safe_date is None:
        return SafeEntryResult(
            can_enter_today=False,
            earliest_safe_date=None,
            days_until_compliant=None,
            days_used_on_entry=today.days_used,
        )
    on_entry = result_from_normalized(normalized, config.at(safe_date))
    return SafeEntryResult(
        can_enter_today=False,
        earliest_safe_date=safe_date,
        days_until_compliant=(safe_date - config.reference_date).days,
        days_used_on_entry=on_entry.days_used,
    )


def _stay_breaches(normalized: NormalizedTrips, config: ComplianceConfig, length: int) -> bool:
    start = config.reference_date
    stay = DateInterval(start, add_days(start, length - 1))
    with_stay = NormalizedTrips(normalized.intervals + (stay,), normalized.warnings)
    day = start
    last = add_days(stay.end, config.window_size_days - 1)
    while True:
        if not result_from_normalized(with_stay, config.at(day)).is_compliant:
            return True
        if day >= last:
            return False
        day += _ONE_DAY


def max_stay_days(trips: Iterable[Trip], config: ComplianceConfig) -> int:
    """Longest continuous stay starting on the reference date that never breaches the limit.

    Accounts for days expiring from the window during the stay and for trips already
    booked after it. Capped at window_size_days.
    """
    normalized = normalize_trips(trips)
    if _stay_breaches(normalized, config, 1):
        return 0
    # Breaching is monotone in stay length, so binary search the longest safe length.
    lo, hi = 1, config.window_size_days
    if not _stay_breaches(normalized, config, hi):
        return hi
    while hi - lo > 1:
        mid = (lo + hi) // 2
        if _stay_breaches(normalized, config, mid):
            hi = mid
        else:
            lo = mid
    return lo


def project_expiring_days(trips: Iterable[Trip], config: ComplianceConfig, days: int) -> list[ExpiryProjection]:
    """Day-by-day view of presence days falling out of the window over the next `days` days."""
    run = forecast(trips, config, config.reference_date, add_days(config.reference_date, days))
    out: list[ExpiryProjection] = []
    previous = None
    for result in run:
        expiring = 0 if previous is None else max(0, previous - result.days_used)
        out.append(
            ExpiryProjection(
                day=result.reference_date,
                expiring_days=expiring,
                days_used=result.days_used,
                days_remaining=result.days_remaining,
            )
        )
        previous = result.days_used
    return out


def compliance_vector(trips: Iterable[Trip], config: ComplianceConfig, start: date, end: date) -> list[DailyCompliance]:
    """Daily compliance for a calendar, sliding the window one day at a time.

    Produces the same numbers as `forecast` but updates the count incrementally: the day
    leaving the window is subtracted and the day entering is added.
    """
    if end < start:
        raise InvalidDateRangeError(start, end, what="calendar")
    config.ensure_valid()
    normalized = normalize_trips(trips)
    span = timedelta(days=config.window_size_days - 1)
    window_start = add_days(start, -(config.window_size_days - 1))
    # Only days that can fall inside some window of the range matter.
    relevant = [
        part for part in (clip_interval(i, window_start, end) for i in normalized.intervals) if part is not None
    ]
    presence = presence_days(relevant, not_before=config.tracking_start_date)

    count = sum(1 for d in presence if window_start <= d <= start)
    out: list[DailyCompliance] = []
    day = start
    while True:
        remaining = config.limit_days - count
        out.append(
            DailyCompliance(
                day=day,
                days_used=count,
                days_remaining=remaining,
                risk_level=classify_risk(remaining, config.risk_thresholds),
            )
        )
        if day >= end:
            break
        if (day - date.min) >= span and day - span in presence:
            count -= 1
        day += _ONE_DAY
        if day in presence:
            count += 1
    return out


def month_compliance(trips: Iterable[Trip], config: ComplianceConfig, year: int, month: int) -> list[DailyCompliance]:
    last = calendar.monthrange(year, month)[1]
    return compliance_vector(trips, config, date(year, month, 1), date(year, month, last))


def year_compliance(trips: Iterable[Trip], config: ComplianceConfig, year: int) -> list[DailyCompliance]:
    return compliance_vector(trips, config, date(year, 1, 1), date(year, 12, 31))
