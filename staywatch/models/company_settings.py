"""Per-company compliance settings (thresholds, limits). The engine never reads this table directly."""
from sqlalchemy import Column, Integer, String, Date, DateTime
from sqlalchemy.sql import func
from staywatch.database import Base


class CompanySettings(Base):
    __tablename__ = "company_settings"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(String(64), nullable=False, unique=True, index=True)

    # Days remaining >= green = green; >= amber = amber; below = red
    risk_threshold_green = Column(Integer, nullable=False, default=30)
    risk_threshold_amber = Column(Integer, nullable=False, default=10)

    limit_days = Column(Integer, nullable=False, default=90)
    window_size_days = Column(Integer, nullable=False, default=180)
    tracking_start_date = Column(Date, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
