"""Shared dependencies: settings, today's date, engine config for a request."""
from datetime import date
from fastapi import HTTPException
from sqlalchemy.orm import Session
from staywatch.config import Settings, get_settings
from staywatch.schemas.compliance import BatchComplianceRequest, ComplianceConfig, ComplianceRequest
from staywatch.services.company_settings import build_config


def get_app_settings() -> Settings:
    return get_settings()


def get_today() -> date:
    """Reference date when a request omits one. Overridden in tests."""
    return date.today()


def resolve_config(
    data: ComplianceRequest | BatchComplianceRequest,
    db: Session,
    settings: Settings,
    today: date,
) -> ComplianceConfig:
    try:
        return build_config(db, settings, data.reference_date or today, data.company_id)
    except ValueError as e:
        # Stored settings that no longer validate
        raise HTTPException(status_code=400, detail=str(e))


def check_range(start: date, end: date, settings: Settings) -> None:
    if end < start:
        raise HTTPException(status_code=400, detail="end_date must be on or after start_date")
    days = (end - start).days + 1
    if days > settings.forecast_max_days:
        raise HTTPException(
            status_code=400,
            detail=f"Range of {days} days exceeds the maximum of {settings.forecast_max_days} days.",
        )
