"""Module A: Country classification (read-only, static table)."""
from fastapi import APIRouter, HTTPException, Query
from staywatch.schemas.country import CountryResponse
from staywatch.services.countries import all_countries, counted_countries, lookup_country

router = APIRouter(prefix="/countries", tags=["countries"])


@router.get("/", response_model=list[CountryResponse])
def list_countries(
    counted_only: bool = Query(False, description="Only countries whose days count toward the limit"),
):
    infos = counted_countries() if counted_only else all_countries()
    return [CountryResponse.model_validate(info) for info in infos]


@router.get("/{code}", response_model=CountryResponse)
def get_country(code: str):
    """Look up by 2-letter code or by name (e.g. 'fr', 'Czechia')."""
    info = lookup_country(code)
    if not info:
        raise HTTPException(status_code=404, detail="Country not found")
    return CountryResponse.model_validate(info)
