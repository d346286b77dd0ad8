from .countries import COUNTRIES, InvalidRegistryError, validate_registry
from .country import (
    CountryNotFoundError,
    filter_countries,
    get_countries_by_region,
    get_country_by_calling_code,
    get_country_by_iso_code,
    get_default_country,
    sort_preferred_countries,
)
from .iso import DEFAULT_ISO_CODE, ISO_3166_ALPHA_2_MAPPINGS
from .schemas import Country, FilterCountriesOptions
