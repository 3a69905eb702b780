"""Compliance engine inputs and results.

Trips and configuration are validated here so the engine only ever sees typed dates.
The engine re-checks the invariants it depends on (see services/intervals.py, services/risk.py).
"""
from datetime import date, timedelta
import enum
from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator
from staywatch.services.errors import InvalidConfigError, InvalidDateRangeError

DEFAULT_WINDOW_SIZE_DAYS = 180
DEFAULT_LIMIT_DAYS = 90
DEFAULT_GREEN_MIN = 30
DEFAULT_AMBER_MIN = 10


class RiskLevel(str, enum.Enum):
    green = "green"
    amber = "amber"
    red = "red"


class Trip(BaseModel):
    """A stay in one country. Both entry and exit dates count as full days."""
    entry_date: date
    exit_date: date
    country: str
    is_private: bool = False  # display only, still counted
    ghosted: bool = Field(False, validation_alias=AliasChoices("ghosted", "excluded"))
    id: str | None = None

    class Config:
        frozen = True
        populate_by_name = True

    @field_validator("country", mode="before")
    @classmethod
    def normalize_country(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @model_validator(mode="after")
    def check_dates(self):
        if self.exit_date < self.entry_date:
            raise InvalidDateRangeError(self.entry_date, self.exit_date)
        return self

    @property
    def duration_days(self) -> int:
        return (self.exit_date - self.entry_date).days + 1

    def shifted(self, days: int) -> "Trip":
        return self.model_copy(
            update={
                "entry_date": self.entry_date + timedelta(days=days),
                "exit_date": self.exit_date + timedelta(days=days),
            }
        )


class RiskThresholds(BaseModel):
    """Days-remaining cut-offs: >= green_min is green, >= amber_min is amber, below is red."""
    green_min: int = DEFAULT_GREEN_MIN
    amber_min: int = DEFAULT_AMBER_MIN

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_order(self):
        self.ensure_valid()
        return self

    def ensure_valid(self) -> None:
        if self.green_min < 0:
            raise InvalidConfigError("risk_thresholds.green_min", "cannot be negative")
        if self.amber_min < 0:
            raise InvalidConfigError("risk_thresholds.amber_min", "cannot be negative")
        if self.amber_min >= self.green_min:
            raise InvalidConfigError(
                "risk_thresholds.amber_min",
                f"amber threshold ({self.amber_min}) must be less than green threshold ({self.green_min})",
            )


class ComplianceConfig(BaseModel):
    reference_date: date
    window_size_days: int = DEFAULT_WINDOW_SIZE_DAYS
    limit_days: int = DEFAULT_LIMIT_DAYS
    risk_thresholds: RiskThresholds = Field(default_factory=RiskThresholds)
    # Days before this date are never counted (tracking go-live).
    tracking_start_date: date | None = None

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_sizes(self):
        self.ensure_valid()
        return self

    def ensure_valid(self) -> None:
        if self.window_size_days < 1:
            raise InvalidConfigError("window_size_days", "must be at least 1")
        if self.limit_days < 0:
            raise InvalidConfigError("limit_days", "cannot be negative")
        self.risk_thresholds.ensure_valid()

    def at(self, reference_date: date) -> "ComplianceConfig":
        """Same configuration evaluated as of another date."""
        return self.model_copy(update={"reference_date": reference_date})


class ComplianceWarning(BaseModel):
    code: str  # unknown_country
    message: str
    trip_id: str | None = None
    country: str | None = None


class ComplianceResult(BaseModel):
    reference_date: date
    window_start: date
    window_end: date
    days_used: int
    days_remaining: int
    limit_days: int
    is_compliant: bool
    risk_level: RiskLevel
    warnings: list[ComplianceWarning] = []

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


class DailyCompliance(BaseModel):
    """One calendar day of the compliance vector."""
    day: date
    days_used: int
    days_remaining: int
    risk_level: RiskLevel


class ExpiryProjection(BaseModel):
    day: date
    expiring_days: int
    days_used: int
    days_remaining: int


class SafeEntryResult(BaseModel):
    can_enter_today: bool
    earliest_safe_date: date | None  # None: nothing safe within one window length
    days_until_compliant: int | None
    days_used_on_entry: int


class WhatIfResult(BaseModel):
    hypothetical_trip: Trip
    trip_days: int  # counted days the trip contributes on its own
    is_safe: bool
    first_breach_date: date | None = None
    result_at_exit: ComplianceResult
    peak_days_used: int
    peak_date: date
    earliest_safe_start: date | None = None
    warnings: list[ComplianceWarning] = []


# --- HTTP request bodies ---


class ComplianceRequest(BaseModel):
    trips: list[Trip] = []
    reference_date: date | None = None  # defaults to today
    company_id: str | None = None  # selects stored thresholds and limits


class ForecastRequest(ComplianceRequest):
    start_date: date | None = None  # defaults to reference_date
    end_date: date


class WhatIfRequest(ComplianceRequest):
    hypothetical_trip: Trip
    find_safe_start: bool = True


class CalendarRequest(ComplianceRequest):
    year: int = Field(ge=1900, le=2999)
    month: int | None = Field(None, ge=1, le=12)


class BatchComplianceRequest(BaseModel):
    people: dict[str, list[Trip]]  # person id -> trips
    reference_date: date | None = None
    company_id: str | None = None


class DatesComplianceRequest(ComplianceRequest):
    dates: list[date] = Field(min_length=1)
