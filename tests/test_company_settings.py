"""
Tests for the company settings store and config resolution.
"""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from staywatch.config import get_settings
from staywatch.schemas.company_settings import CompanySettingsUpdate
from staywatch.services.company_settings import (
    build_config,
    defaults_response,
    get_company_settings,
    upsert_company_settings,
)


def test_default_company_seeded(db):
    row = get_company_settings(db, "default")
    assert row is not None
    assert row.limit_days == 90
    assert row.window_size_days == 180
    assert row.risk_threshold_green == 30
    assert row.risk_threshold_amber == 10


def test_upsert_creates_then_updates(db):
    data = CompanySettingsUpdate(risk_threshold_green=20, risk_threshold_amber=5, limit_days=60)
    row = upsert_company_settings(db, "acme", data)
    assert row.id is not None
    assert row.limit_days == 60

    again = upsert_company_settings(
        db, "acme", CompanySettingsUpdate(risk_threshold_green=40, risk_threshold_amber=15)
    )
    assert again.id == row.id
    assert again.risk_threshold_green == 40
    assert again.limit_days == 90


def test_update_rejects_bad_thresholds():
    with pytest.raises(ValidationError):
        CompanySettingsUpdate(risk_threshold_green=10, risk_threshold_amber=10)
    with pytest.raises(ValidationError):
        CompanySettingsUpdate(risk_threshold_green=10, risk_threshold_amber=5, window_size_days=0)


def test_build_config_uses_company_row(db):
    upsert_company_settings(
        db,
        "acme",
        CompanySettingsUpdate(
            risk_threshold_green=20,
            risk_threshold_amber=5,
            limit_days=60,
            window_size_days=120,
            tracking_start_date=date(2025, 1, 1),
        ),
    )
    config = build_config(db, get_settings(), date(2025, 6, 1), "acme")
    assert config.reference_date == date(2025, 6, 1)
    assert config.limit_days == 60
    assert config.window_size_days == 120
    assert config.risk_thresholds.green_min == 20
    assert config.risk_thresholds.amber_min == 5
    assert config.tracking_start_date == date(2025, 1, 1)


def test_build_config_falls_back_to_default_company(db):
    config = build_config(db, get_settings(), date(2025, 6, 1), "unknown-co")
    assert config.limit_days == 90
    assert config.window_size_days == 180


def test_defaults_response_not_stored():
    response = defaults_response(get_settings(), "nobody")
    assert response.company_id == "nobody"
    assert response.stored is False
    assert response.limit_days == 90
