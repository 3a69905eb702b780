"""Compliance calculation: trips + config -> days used, days remaining, risk level.

Pure function of its inputs; safe to call concurrently. Nothing is read from
application settings here, callers pass the company's configuration in.
"""
from datetime import date
from typing import Iterable, Mapping
from staywatch.schemas.compliance import ComplianceConfig, ComplianceResult, Trip
from staywatch.services.intervals import NormalizedTrips, normalize_trips
from staywatch.services.presence import count_distinct_days
from staywatch.services.risk import classify_risk
from staywatch.services.window import effective_window_bounds, window_bounds


def result_from_normalized(normalized: NormalizedTrips, config: ComplianceConfig) -> ComplianceResult:
    """Score already-normalized intervals as of config.reference_date."""
    config.ensure_valid()
    count_start, count_end = effective_window_bounds(config)
    days_used = count_distinct_days(normalized.intervals, count_start, count_end)
    days_remaining = config.limit_days - days_used
    window_start, window_end = window_bounds(config.reference_date, config.window_size_days)
    return ComplianceResult(
        reference_date=config.reference_date,
        window_start=window_start,
        window_end=window_end,
        days_used=days_used,
        days_remaining=days_remaining,
        limit_days=config.limit_days,
        is_compliant=days_used <= config.limit_days,
        risk_level=classify_risk(days_remaining, config.risk_thresholds),
        warnings=list(normalized.warnings),
    )


def calculate_compliance(trips: Iterable[Trip], config: ComplianceConfig) -> ComplianceResult:
    return result_from_normalized(normalize_trips(trips), config)


def days_used_in_window(trips: Iterable[Trip], config: ComplianceConfig) -> int:
    return calculate_compliance(trips, config).days_used


def batch_compliance(people: Mapping[str, Iterable[Trip]], config: ComplianceConfig) -> dict[str, ComplianceResult]:
    """Score several people against one shared configuration and reference date.

    Keys are caller-chosen person ids and come back unchanged, in input order.
    """
    config.ensure_valid()
    return {person_id: calculate_compliance(trips, config) for person_id, trips in people.items()}


def compliance_at_dates(
    trips: Iterable[Trip],
    config: ComplianceConfig,
    dates: Iterable[date],
) -> dict[date, ComplianceResult]:
    """Results at arbitrary reference dates, normalizing the trips only once.

    config.reference_date is ignored. Repeated dates collapse to one entry; order follows first appearance.
    """
    normalized = normalize_trips(trips)
    results: dict[date, ComplianceResult] = {}
    for day in dates:
        if day not in results:
            results[day] = result_from_normalized(normalized, config.at(day))
    return results
