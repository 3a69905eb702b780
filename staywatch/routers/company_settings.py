"""Per-company risk thresholds, limit and window size."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from staywatch.config import Settings
from staywatch.database import get_db
from staywatch.dependencies import get_app_settings
from staywatch.schemas.company_settings import CompanySettingsResponse, CompanySettingsUpdate
from staywatch.services.company_settings import (
    defaults_response,
    get_company_settings,
    upsert_company_settings,
)

router = APIRouter(prefix="/companies", tags=["company-settings"])


@router.get("/{company_id}/settings", response_model=CompanySettingsResponse)
def read_settings(
    company_id: str,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """Stored settings, or the application defaults (stored=false) when the company has none."""
    row = get_company_settings(db, company_id)
    if row is None:
        return defaults_response(settings, company_id)
    return CompanySettingsResponse.model_validate(row)


@router.put("/{company_id}/settings", response_model=CompanySettingsResponse)
def write_settings(
    company_id: str,
    data: CompanySettingsUpdate,
    db: Session = Depends(get_db),
):
    row = upsert_company_settings(db, company_id, data)
    return CompanySettingsResponse.model_validate(row)
