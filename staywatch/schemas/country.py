"""Country lookup schemas."""
from pydantic import BaseModel
from staywatch.services.countries import CountryClass


class CountryResponse(BaseModel):
    code: str
    name: str
    country_class: CountryClass
    is_counted: bool
    is_microstate: bool = False
    member_since: str | None = None
    exclusion_reason: str | None = None

    class Config:
        from_attributes = True
