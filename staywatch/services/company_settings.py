"""Company settings store: stored thresholds/limits -> ComplianceConfig for the engine."""
from datetime import date
from sqlalchemy.orm import Session
from staywatch.config import Settings
from staywatch.models.company_settings import CompanySettings
from staywatch.schemas.company_settings import CompanySettingsResponse, CompanySettingsUpdate
from staywatch.schemas.compliance import ComplianceConfig, RiskThresholds


def get_company_settings(db: Session, company_id: str) -> CompanySettings | None:
    return db.query(CompanySettings).filter(CompanySettings.company_id == company_id).first()


def defaults_response(settings: Settings, company_id: str) -> CompanySettingsResponse:
    return CompanySettingsResponse(
        company_id=company_id,
        risk_threshold_green=settings.risk_threshold_green,
        risk_threshold_amber=settings.risk_threshold_amber,
        limit_days=settings.limit_days,
        window_size_days=settings.window_size_days,
        tracking_start_date=settings.tracking_start_date,
        stored=False,
    )


def upsert_company_settings(db: Session, company_id: str, data: CompanySettingsUpdate) -> CompanySettings:
    row = get_company_settings(db, company_id)
    if row is None:
        row = CompanySettings(company_id=company_id)
        db.add(row)
    row.risk_threshold_green = data.risk_threshold_green
    row.risk_threshold_amber = data.risk_threshold_amber
    row.limit_days = data.limit_days
    row.window_size_days = data.window_size_days
    row.tracking_start_date = data.tracking_start_date
    db.commit()
    db.refresh(row)
    return row


def build_config(
    db: Session,
    settings: Settings,
    reference_date: date,
    company_id: str | None = None,
) -> ComplianceConfig:
    """Config for one calculation: the company's stored row, else the default company's row, else Settings."""
    row = get_company_settings(db, company_id) if company_id else None
    if row is None:
        row = get_company_settings(db, settings.default_company_id)
    if row is None:
        return ComplianceConfig(
            reference_date=reference_date,
            window_size_days=settings.window_size_days,
            limit_days=settings.limit_days,
            risk_thresholds=RiskThresholds(
                green_min=settings.risk_threshold_green,
                amber_min=settings.risk_threshold_amber,
            ),
            tracking_start_date=settings.tracking_start_date,
        )
    return ComplianceConfig(
        reference_date=reference_date,
        window_size_days=row.window_size_days,
        limit_days=row.limit_days,
        risk_thresholds=RiskThresholds(
            green_min=row.risk_threshold_green,
            amber_min=row.risk_threshold_amber,
        ),
        tracking_start_date=row.tracking_start_date,
    )
