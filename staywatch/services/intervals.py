"""Module B: Interval normalization. Raw trips -> closed date intervals that count."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from staywatch.schemas.compliance import ComplianceWarning, Trip
from staywatch.services.countries import CountryClass, classify_country
from staywatch.services.errors import InvalidDateRangeError

logger = logging.getLogger(__name__)

WARNING_UNKNOWN_COUNTRY = "unknown_country"


@dataclass(frozen=True, order=True)
class DateInterval:
    """Closed interval of calendar days, inclusive of both ends."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise InvalidDateRangeError(self.start, self.end, what="interval")

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1


@dataclass(frozen=True)
class NormalizedTrips:
    intervals: tuple[DateInterval, ...]
    warnings: tuple[ComplianceWarning, ...] = field(default_factory=tuple)


def _unknown_country_warning(trip: Trip) -> ComplianceWarning:
    return ComplianceWarning(
        code=WARNING_UNKNOWN_COUNTRY,
        message=f"Country '{trip.country}' is not recognized; trip {trip.entry_date}..{trip.exit_date} was not counted.",
        trip_id=trip.id,
        country=trip.country,
    )


def normalize_trips(trips: Iterable[Trip]) -> NormalizedTrips:
    """Keep trips that count toward the limit, as inclusive intervals.

    Ghosted trips and trips to excluded or unrecognized countries are dropped; unrecognized
    countries also produce a warning since dropping them can hide real risk. A trip whose exit
    precedes its entry is rejected outright. Overlaps are left for the day aggregator.
    """
    intervals: list[DateInterval] = []
    warnings: list[ComplianceWarning] = []
    for trip in trips:
        if trip.exit_date < trip.entry_date:
            raise InvalidDateRangeError(trip.entry_date, trip.exit_date)
        if trip.ghosted:
            continue
        country_class = classify_country(trip.country)
        if country_class == CountryClass.unknown:
            logger.warning("Unrecognized country %r on trip %s; not counted", trip.country, trip.id or "(no id)")
            warnings.append(_unknown_country_warning(trip))
            continue
        if country_class == CountryClass.excluded_but_recorded:
            continue
        intervals.append(DateInterval(trip.entry_date, trip.exit_date))
    return NormalizedTrips(tuple(intervals), tuple(warnings))
