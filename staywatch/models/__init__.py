"""
All SQLAlchemy models. Base.metadata.create_all() creates every table on startup.
"""
from staywatch.models.company_settings import CompanySettings

__all__ = [
    "CompanySettings",
]
