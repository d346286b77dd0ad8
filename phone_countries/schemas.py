from pydantic import BaseModel, validator
from typing import List, Optional, Tuple
import re

ISO_CODE_PATTERN = r'^[A-Z]{2}$'


def _check_iso_code(v: str) -> str:
    if not re.match(ISO_CODE_PATTERN, v):
        raise ValueError(f'Invalid ISO 3166-1 alpha-2 code: {v!r}')
    return v


class Country(BaseModel):
    """A country entry as offered by a phone number input"""
    name: str
    iso_code: str
    calling_code: int
    format: str
    regions: Tuple[str, ...]

    class Config:
        frozen = True

    @validator('iso_code')
    def validate_iso_code(cls, v):
        return _check_iso_code(v)

    @validator('calling_code')
    def validate_calling_code(cls, v):
        if v <= 0:
            raise ValueError('Calling code must be a positive integer')
        return v

    @validator('regions')
    def validate_regions(cls, v):
        if not v:
            raise ValueError('A country must belong to at least one region')
        return v


class FilterCountriesOptions(BaseModel):
    only_countries: Optional[List[str]] = None
    exclude_countries: Optional[List[str]] = None

    class Config:
        extra = "forbid"

    @validator('only_countries', 'exclude_countries')
    def validate_iso_codes(cls, v):
        if v is None:
            return v
        for code in v:
            _check_iso_code(code)
        return v


class MessageResponse(BaseModel):
    detail: str
