"""Compliance calculation, forecasting and what-if endpoints. Trips come in the body, nothing is stored."""
from datetime import date
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from staywatch.config import Settings
from staywatch.database import get_db
from staywatch.dependencies import check_range, get_app_settings, get_today, resolve_config
from staywatch.schemas.compliance import (
    BatchComplianceRequest,
    CalendarRequest,
    ComplianceRequest,
    ComplianceResult,
    DailyCompliance,
    DatesComplianceRequest,
    ForecastRequest,
    SafeEntryResult,
    WhatIfRequest,
    WhatIfResult,
)
from staywatch.services.compliance import batch_compliance, calculate_compliance, compliance_at_dates
from staywatch.services.errors import ComplianceError
from staywatch.services.forecast import (
    earliest_safe_start,
    forecast,
    month_compliance,
    safe_entry_info,
    what_if,
    year_compliance,
)

router = APIRouter(prefix="/compliance", tags=["compliance"])


@router.post("/calculate", response_model=ComplianceResult)
def calculate(
    data: ComplianceRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    today: date = Depends(get_today),
):
    config = resolve_config(data, db, settings, today)
    try:
        return calculate_compliance(data.trips, config)
    except ComplianceError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/batch", response_model=dict[str, ComplianceResult])
def calculate_batch(
    data: BatchComplianceRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    today: date = Depends(get_today),
):
    """Score several people (keyed by id) against the same reference date and company settings."""
    if len(data.people) > settings.batch_max_people:
        raise HTTPException(
            status_code=400,
            detail=f"Batch of {len(data.people)} people exceeds the maximum of {settings.batch_max_people}.",
        )
    config = resolve_config(data, db, settings, today)
    try:
        return batch_compliance(data.people, config)
    except ComplianceError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/at-dates", response_model=list[ComplianceResult])
def calculate_at_dates(
    data: DatesComplianceRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    today: date = Depends(get_today),
):
    if len(data.dates) > settings.forecast_max_days:
        raise HTTPException(
            status_code=400,
            detail=f"{len(data.dates)} dates exceeds the maximum of {settings.forecast_max_days}.",
        )
    config = resolve_config(data, db, settings, today)
    try:
        return list(compliance_at_dates(data.trips, config, data.dates).values())
    except ComplianceError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/forecast", response_model=list[ComplianceResult])
def forecast_range(
    data: ForecastRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    today: date = Depends(get_today),
):
    config = resolve_config(data, db, settings, today)
    start = data.start_date or config.reference_date
    check_range(start, data.end_date, settings)
    try:
        return list(forecast(data.trips, config, start, data.end_date))
    except ComplianceError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/what-if", response_model=WhatIfResult)
def what_if_trip(
    data: WhatIfRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    today: date = Depends(get_today),
):
    """Would booking this trip breach the limit at any point? Optionally find the earliest safe start."""
    config = resolve_config(data, db, settings, today)
    check_range(data.hypothetical_trip.entry_date, data.hypothetical_trip.exit_date, settings)
    try:
        result = what_if(data.trips, data.hypothetical_trip, config)
        if data.find_safe_start and not result.is_safe:
            safe_start = earliest_safe_start(data.trips, data.hypothetical_trip, config)
            result = result.model_copy(update={"earliest_safe_start": safe_start})
        elif result.is_safe:
            result = result.model_copy(update={"earliest_safe_start": data.hypothetical_trip.entry_date})
    except ComplianceError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return result


@router.post("/safe-entry", response_model=SafeEntryResult)
def safe_entry(
    data: ComplianceRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    today: date = Depends(get_today),
):
    config = resolve_config(data, db, settings, today)
    try:
        return safe_entry_info(data.trips, config)
    except ComplianceError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/calendar", response_model=list[DailyCompliance])
def calendar(
    data: CalendarRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    today: date = Depends(get_today),
):
    """Daily status for a month (or a whole year when month is omitted)."""
    config = resolve_config(data, db, settings, today)
    try:
        if data.month:
            return month_compliance(data.trips, config, data.year, data.month)
        return year_compliance(data.trips, config, data.year)
    except ComplianceError as e:
        raise HTTPException(status_code=400, detail=str(e))
