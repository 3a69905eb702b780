"""Seed the default company's compliance settings from application settings."""
from sqlalchemy.orm import Session
from staywatch.config import Settings
from staywatch.models.company_settings import CompanySettings


def seed_default_company_settings(db: Session, settings: Settings) -> None:
    if db.query(CompanySettings).filter(CompanySettings.company_id == settings.default_company_id).count() > 0:
        return
    db.add(
        CompanySettings(
            company_id=settings.default_company_id,
            risk_threshold_green=settings.risk_threshold_green,
            risk_threshold_amber=settings.risk_threshold_amber,
            limit_days=settings.limit_days,
            window_size_days=settings.window_size_days,
            tracking_start_date=settings.tracking_start_date,
        )
    )
    db.commit()
