"""Company settings schemas."""
from datetime import date, datetime
from pydantic import BaseModel, Field, model_validator
from staywatch.schemas.compliance import RiskThresholds


class CompanySettingsUpdate(BaseModel):
    risk_threshold_green: int = Field(ge=0)
    risk_threshold_amber: int = Field(ge=0)
    limit_days: int = Field(90, ge=0)
    window_size_days: int = Field(180, ge=1)
    tracking_start_date: date | None = None

    @model_validator(mode="after")
    def check_thresholds(self):
        # Reject gaps/overlaps before they reach the store
        RiskThresholds.model_construct(
            green_min=self.risk_threshold_green, amber_min=self.risk_threshold_amber
        ).ensure_valid()
        return self


class CompanySettingsResponse(BaseModel):
    company_id: str
    risk_threshold_green: int
    risk_threshold_amber: int
    limit_days: int
    window_size_days: int
    tracking_start_date: date | None
    stored: bool = True  # False when falling back to application defaults
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
