from staywatch.schemas.compliance import (
    ComplianceConfig,
    ComplianceRequest,
    ComplianceResult,
    ComplianceWarning,
    RiskLevel,
    RiskThresholds,
    Trip,
)
from staywatch.schemas.company_settings import CompanySettingsResponse, CompanySettingsUpdate
from staywatch.schemas.country import CountryResponse
