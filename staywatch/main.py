"""StayWatch – FastAPI application for 90/180-day stay compliance."""
# Load .env before any app code that might read config
from dotenv import load_dotenv
from pathlib import Path
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from staywatch.config import get_settings
from staywatch.database import Base, SessionLocal, engine
# Import models so Base.metadata has all tables before create_all
from staywatch.models import CompanySettings  # noqa: F401
from staywatch.routers import company_settings, compliance, countries
from staywatch.seed import seed_default_company_settings
from staywatch.services.countries import MEMBERSHIP_VERSION

settings = get_settings()
logging.basicConfig(level=settings.log_level or "INFO")
log = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.app_name, debug=settings.debug)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(compliance.router)
app.include_router(countries.router)
app.include_router(company_settings.router)


@app.on_event("startup")
def startup():
    try:
        Base.metadata.create_all(bind=engine)
        db = SessionLocal()
        try:
            seed_default_company_settings(db, settings)
        finally:
            db.close()
    except Exception as e:
        log.warning("Database startup failed (tables/seed skipped). Check DATABASE_URL. Error: %s", e)
    log.info("Country membership data version %s", MEMBERSHIP_VERSION)


@app.get("/")
def root():
    return {"app": settings.app_name, "status": "ok"}


@app.get("/health")
def health():
    return {"status": "healthy", "membership_version": MEMBERSHIP_VERSION}
