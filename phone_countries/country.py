from typing import Iterable, List, Mapping, Optional, Sequence, Union

from .countries import COUNTRIES
from .iso import DEFAULT_ISO_CODE
from .schemas import Country, FilterCountriesOptions
from .utils import logger


class CountryNotFoundError(LookupError):
    """Raised when the requested default country is not in the table"""

    def __init__(self, iso_code: str):
        self.iso_code = iso_code
        super().__init__(f"Country not found for ISO code {iso_code!r}")


def get_default_country(
    default_iso_code: Optional[str] = None,
    countries: Sequence[Country] = COUNTRIES,
) -> Country:
    """Get the country used when no other one is known"""
    if default_iso_code is None:
        default_iso_code = DEFAULT_ISO_CODE

    for country in countries:
        if country.iso_code == default_iso_code:
            return country
    raise CountryNotFoundError(default_iso_code)


def get_country_by_iso_code(iso_code: str, countries: Sequence[Country] = COUNTRIES) -> Country:
    """Get a country by ISO code, falling back to the default country of the registry"""
    for country in countries:
        if country.iso_code == iso_code:
            return country

    logger.debug(f"No country for ISO code {iso_code!r}, using default {DEFAULT_ISO_CODE}")
    return get_default_country()


def get_country_by_calling_code(
    calling_code: int, countries: Sequence[Country] = COUNTRIES
) -> Optional[Country]:
    """Get the first country using this calling code, or None"""
    for country in countries:
        if country.calling_code == calling_code:
            return country
    return None


def filter_countries(
    countries: Sequence[Country],
    options: Union[FilterCountriesOptions, Mapping, None] = None,
) -> Sequence[Country]:
    """
    Restrict a country list with an inclusion or an exclusion list.

    ``only_countries`` wins over ``exclude_countries`` when both are given.
    Input order is kept, and the input itself is returned when there is
    nothing to filter.
    """
    if options is None:
        options = FilterCountriesOptions()
    elif not isinstance(options, FilterCountriesOptions):
        options = FilterCountriesOptions(**options)

    only_countries = options.only_countries
    if only_countries:
        return [country for country in countries if country.iso_code in only_countries]

    exclude_countries = options.exclude_countries
    if exclude_countries:
        return [country for country in countries if country.iso_code not in exclude_countries]

    return countries


def sort_preferred_countries(
    countries: Sequence[Country], preferred_countries: Optional[Iterable[str]] = None
) -> Sequence[Country]:
    """Move preferred countries to the top, in the order they were given"""
    preferred_countries = list(preferred_countries or [])
    if not preferred_countries:
        return countries

    by_iso_code = {country.iso_code: country for country in countries}
    preferred = []
    for iso_code in preferred_countries:
        country = by_iso_code.get(iso_code)
        if country is not None and country not in preferred:
            preferred.append(country)

    rest = [country for country in countries if country not in preferred]
    return preferred + rest


def get_countries_by_region(region: str, countries: Sequence[Country] = COUNTRIES) -> List[Country]:
    """Get all countries tagged with a region, e.g. 'european-union'"""
    return [country for country in countries if region in country.regions]
