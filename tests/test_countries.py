import pytest
from pydantic import ValidationError

from phone_countries.countries import (
    COUNTRIES,
    InvalidRegistryError,
    build_countries,
    validate_registry,
)
from phone_countries.iso import DEFAULT_ISO_CODE, ISO_3166_ALPHA_2_MAPPINGS
from phone_countries.schemas import Country


def test_registry_is_immutable_tuple():
    assert isinstance(COUNTRIES, tuple)
    with pytest.raises(ValidationError):
        COUNTRIES[0].name = "Somewhere else"


def test_iso_codes_are_unique():
    iso_codes = [country.iso_code for country in COUNTRIES]
    assert len(iso_codes) == len(set(iso_codes))


def test_default_country_is_in_registry():
    assert DEFAULT_ISO_CODE == "FR"
    assert any(country.iso_code == DEFAULT_ISO_CODE for country in COUNTRIES)


def test_registry_sorted_by_name():
    names = [country.name for country in COUNTRIES]
    assert names == sorted(names)


def test_names_come_from_iso_mapping():
    for country in COUNTRIES:
        assert country.name == ISO_3166_ALPHA_2_MAPPINGS[country.iso_code]
        assert country.regions


def test_build_countries_from_custom_data():
    countries = build_countries({
        "FR": (33, "+.. ... .. .. ..", ("europe",)),
        "BE": (32, "+.. . .. .. .. ..", ("europe",)),
    })
    assert [country.iso_code for country in countries] == ["BE", "FR"]


def test_duplicate_iso_code_rejected():
    france = COUNTRIES[[c.iso_code for c in COUNTRIES].index("FR")]
    with pytest.raises(InvalidRegistryError, match="Duplicate"):
        validate_registry([france, france], "FR")


def test_missing_default_rejected():
    belgium = Country(name="Belgium", iso_code="BE", calling_code=32,
                      format="+.. . .. .. .. ..", regions=["europe"])
    with pytest.raises(InvalidRegistryError, match="Default ISO code"):
        validate_registry([belgium], "FR")


@pytest.mark.parametrize("field, value", [
    ("iso_code", "fra"),
    ("iso_code", "fr"),
    ("calling_code", 0),
    ("regions", []),
])
def test_country_validation(field, value):
    data = {
        "name": "France",
        "iso_code": "FR",
        "calling_code": 33,
        "format": "+.. ... .. .. ..",
        "regions": ["europe"],
    }
    data[field] = value
    with pytest.raises(ValidationError):
        Country(**data)
