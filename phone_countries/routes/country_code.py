from fastapi import APIRouter, HTTPException, Path, Query, status
from typing import List, Optional

from .. import schemas
from ..countries import COUNTRIES
from ..country import (
    filter_countries,
    get_countries_by_region,
    get_country_by_calling_code,
    get_country_by_iso_code,
    get_default_country,
    sort_preferred_countries,
)
from ..utils import logger, normalize_iso_code, normalize_iso_codes

router = APIRouter(
    prefix="/meta",
    tags=["metadata"],
    responses={404: {"model": schemas.MessageResponse, "description": "Not found"}},
)


@router.get("/countries", response_model=List[schemas.Country])
def list_countries(
    only: List[str] = Query([]),
    exclude: List[str] = Query([]),
    preferred: List[str] = Query([]),
    region: Optional[str] = Query(None, min_length=1),
):
    """Return the countries offered by the phone input, filtered and sorted"""
    countries = get_countries_by_region(region) if region else COUNTRIES

    try:
        options = schemas.FilterCountriesOptions(
            only_countries=normalize_iso_codes(only),
            exclude_countries=normalize_iso_codes(exclude),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    countries = filter_countries(countries, options)
    return list(sort_preferred_countries(countries, normalize_iso_codes(preferred)))


@router.get("/countries/default", response_model=schemas.Country)
def read_default_country():
    """Return the default country"""
    return get_default_country()


@router.get("/countries/calling-code/{calling_code}", response_model=schemas.Country)
def read_country_by_calling_code(calling_code: int = Path(..., ge=0)):
    """Return the first country using a calling code"""
    country = get_country_by_calling_code(calling_code)

    if not country:
        logger.info(f"[COUNTRY LOOKUP] Unknown calling code +{calling_code}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Country not found"
        )

    return country


@router.get("/countries/{iso_code}", response_model=schemas.Country)
def read_country_by_iso_code(iso_code: str):
    """Return a country by ISO code, or the default country when unknown"""
    return get_country_by_iso_code(normalize_iso_code(iso_code))
