"""Application configuration from environment."""
from datetime import date
from pathlib import Path

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

# Load .env from project root (parent of staywatch/) so env vars are available everywhere
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=_env_path)


class Settings(BaseSettings):
    app_name: str = "StayWatch"
    app_env: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    database_url: str = "sqlite:///./staywatch.db"

    @field_validator("database_url", "log_level", mode="before")
    @classmethod
    def strip_value(cls, v: str) -> str:
        return (v or "").strip()

    # Defaults for companies without stored settings
    default_company_id: str = "default"
    window_size_days: int = 180
    limit_days: int = 90
    risk_threshold_green: int = 30  # days remaining >= this = green
    risk_threshold_amber: int = 10  # days remaining >= this = amber, below = red
    tracking_start_date: date | None = None

    # HTTP layer cap on forecast / calendar ranges
    forecast_max_days: int = 730
    # HTTP layer cap on people per batch request
    batch_max_people: int = 500

    class Config:
        env_file = str(_env_path)
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
