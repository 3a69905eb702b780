"""
Pytest fixtures for StayWatch tests. Uses a temporary SQLite DB for company settings.
"""

from __future__ import annotations

import os
import tempfile
from datetime import date
from pathlib import Path

import pytest

# The engine is created at import time, so point it at a scratch DB before any staywatch import.
_DB_DIR = tempfile.mkdtemp(prefix="staywatch-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_DB_DIR) / 'staywatch_test.db'}"

FIXED_TODAY = date(2026, 1, 15)


@pytest.fixture
def db():
    """Session on the test DB with tables created and the default company seeded.

    Rows written by a test (other than the seeded default) are removed afterwards.
    """
    from staywatch.config import get_settings
    from staywatch.database import Base, SessionLocal, engine
    from staywatch.models import CompanySettings
    from staywatch.seed import seed_default_company_settings

    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    settings = get_settings()
    seed_default_company_settings(session, settings)
    try:
        yield session
    finally:
        session.rollback()
        session.query(CompanySettings).filter(
            CompanySettings.company_id != settings.default_company_id
        ).delete()
        session.commit()
        session.close()


@pytest.fixture
def client(db):
    """FastAPI TestClient with today's date pinned to FIXED_TODAY."""
    from fastapi.testclient import TestClient

    from staywatch.dependencies import get_today
    from staywatch.main import app

    app.dependency_overrides[get_today] = lambda: FIXED_TODAY
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
