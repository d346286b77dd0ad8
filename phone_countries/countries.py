from typing import Sequence, Tuple

from .iso import DEFAULT_ISO_CODE, ISO_3166_ALPHA_2_MAPPINGS
from .schemas import Country
from .utils import logger

EUROPE = "europe"
EUROPEAN_UNION = "european-union"
EX_USSR = "ex-ussr"
AMERICA = "america"
NORTH_AMERICA = "north-america"
CENTRAL_AMERICA = "central-america"
SOUTH_AMERICA = "south-america"
CARIBBEAN = "caribbean"
ASIA = "asia"
MIDDLE_EAST = "middle-east"
AFRICA = "africa"
NORTH_AFRICA = "north-africa"
OCEANIA = "oceania"


class InvalidRegistryError(ValueError):
    """Raised when the country table breaks one of its load-time rules"""


# Format: iso_code -> (calling_code, display format, regions)
# "." stands for one digit of the full international number.
COUNTRY_PHONE_DATA = {
    # Europe
    "AD": (376, "+... ... ...", (EUROPE,)),
    "AL": (355, "+... .. ... ....", (EUROPE,)),
    "AT": (43, "+.. ... ......", (EUROPE, EUROPEAN_UNION)),
    "BA": (387, "+... .. ......", (EUROPE,)),
    "BE": (32, "+.. . .. .. .. ..", (EUROPE, EUROPEAN_UNION)),
    "BG": (359, "+... ... ... ...", (EUROPE, EUROPEAN_UNION)),
    "BY": (375, "+... (..) ... .. ..", (EUROPE, EX_USSR)),
    "CH": (41, "+.. .. ... .. ..", (EUROPE,)),
    "CY": (357, "+... .. ......", (EUROPE, EUROPEAN_UNION)),
    "CZ": (420, "+... ... ... ...", (EUROPE, EUROPEAN_UNION)),
    "DE": (49, "+.. .... ........", (EUROPE, EUROPEAN_UNION)),
    "DK": (45, "+.. .. .. .. ..", (EUROPE, EUROPEAN_UNION)),
    "EE": (372, "+... .... ......", (EUROPE, EUROPEAN_UNION, EX_USSR)),
    "ES": (34, "+.. ... ... ...", (EUROPE, EUROPEAN_UNION)),
    "FI": (358, "+... .. ... .. ..", (EUROPE, EUROPEAN_UNION)),
    "FR": (33, "+.. ... .. .. ..", (EUROPE, EUROPEAN_UNION)),
    "GB": (44, "+.. .... ......", (EUROPE,)),
    "GR": (30, "+.. ... .......", (EUROPE, EUROPEAN_UNION)),
    "HR": (385, "+... .. ... ....", (EUROPE, EUROPEAN_UNION)),
    "HU": (36, "+.. .. ... ....", (EUROPE, EUROPEAN_UNION)),
    "IE": (353, "+... .. .......", (EUROPE, EUROPEAN_UNION)),
    "IS": (354, "+... ... ....", (EUROPE,)),
    "IT": (39, "+.. ... .......", (EUROPE, EUROPEAN_UNION)),
    "LI": (423, "+... ... ....", (EUROPE,)),
    "LT": (370, "+... ... .....", (EUROPE, EUROPEAN_UNION, EX_USSR)),
    "LU": (352, "+... ... ... ...", (EUROPE, EUROPEAN_UNION)),
    "LV": (371, "+... .. ... ...", (EUROPE, EUROPEAN_UNION, EX_USSR)),
    "MC": (377, "+... .. .. .. ..", (EUROPE,)),
    "MD": (373, "+... (..) ..-..-..", (EUROPE, EX_USSR)),
    "ME": (382, "+... .. ... ...", (EUROPE,)),
    "MK": (389, "+... .. ... ...", (EUROPE,)),
    "MT": (356, "+... .... ....", (EUROPE, EUROPEAN_UNION)),
    "NL": (31, "+.. .. ........", (EUROPE, EUROPEAN_UNION)),
    "NO": (47, "+.. ... .. ...", (EUROPE,)),
    "PL": (48, "+.. ...-...-...", (EUROPE, EUROPEAN_UNION)),
    "PT": (351, "+... ... ... ...", (EUROPE, EUROPEAN_UNION)),
    "RO": (40, "+.. ... ... ...", (EUROPE, EUROPEAN_UNION)),
    "RS": (381, "+... .. .......", (EUROPE,)),
    "RU": (7, "+. (...) ...-..-..", (EUROPE, ASIA, EX_USSR)),
    "SE": (46, "+.. (...) ...-...", (EUROPE, EUROPEAN_UNION)),
    "SI": (386, "+... .. ... ...", (EUROPE, EUROPEAN_UNION)),
    "SK": (421, "+... ... ... ...", (EUROPE, EUROPEAN_UNION)),
    "SM": (378, "+... .... ......", (EUROPE,)),
    "UA": (380, "+... (..) ... .. ..", (EUROPE, EX_USSR)),
    "VA": (39, "+.. .. .... ....", (EUROPE,)),

    # America
    "AR": (54, "+.. (..) ........", (AMERICA, SOUTH_AMERICA)),
    "BO": (591, "+... . ... ....", (AMERICA, SOUTH_AMERICA)),
    "BR": (55, "+.. (..) .........", (AMERICA, SOUTH_AMERICA)),
    "BS": (1, "+. (...) ...-....", (AMERICA, CARIBBEAN)),
    "CA": (1, "+. (...) ...-....", (AMERICA, NORTH_AMERICA)),
    "CL": (56, "+.. . .... ....", (AMERICA, SOUTH_AMERICA)),
    "CO": (57, "+.. ... ... ....", (AMERICA, SOUTH_AMERICA)),
    "CR": (506, "+... ....-....", (AMERICA, CENTRAL_AMERICA)),
    "CU": (53, "+.. . ... ....", (AMERICA, CARIBBEAN)),
    "DO": (1, "+. (...) ...-....", (AMERICA, CARIBBEAN)),
    "EC": (593, "+... .. ... ....", (AMERICA, SOUTH_AMERICA)),
    "GT": (502, "+... ....-....", (AMERICA, CENTRAL_AMERICA)),
    "HN": (504, "+... ....-....", (AMERICA, CENTRAL_AMERICA)),
    "HT": (509, "+... ....-....", (AMERICA, CARIBBEAN)),
    "JM": (1, "+. (...) ...-....", (AMERICA, CARIBBEAN)),
    "MX": (52, "+.. ... ... ....", (AMERICA, CENTRAL_AMERICA, NORTH_AMERICA)),
    "NI": (505, "+... ....-....", (AMERICA, CENTRAL_AMERICA)),
    "PA": (507, "+... ....-....", (AMERICA, CENTRAL_AMERICA)),
    "PE": (51, "+.. ... ... ...", (AMERICA, SOUTH_AMERICA)),
    "PR": (1, "+. (...) ...-....", (AMERICA, CARIBBEAN)),
    "PY": (595, "+... ... ......", (AMERICA, SOUTH_AMERICA)),
    "SV": (503, "+... ....-....", (AMERICA, CENTRAL_AMERICA)),
    "TT": (1, "+. (...) ...-....", (AMERICA, CARIBBEAN)),
    "US": (1, "+. (...) ...-....", (AMERICA, NORTH_AMERICA)),
    "UY": (598, "+... . ... .. ..", (AMERICA, SOUTH_AMERICA)),
    "VE": (58, "+.. ...-.......", (AMERICA, SOUTH_AMERICA)),

    # Asia
    "AM": (374, "+... .. ......", (ASIA, EX_USSR)),
    "AZ": (994, "+... (..) ... .. ..", (ASIA, EX_USSR)),
    "BD": (880, "+... ....-......", (ASIA,)),
    "CN": (86, "+.. ..-.........", (ASIA,)),
    "GE": (995, "+... ... .. .. ..", (ASIA, EX_USSR)),
    "HK": (852, "+... .... ....", (ASIA,)),
    "ID": (62, "+.. ..-...-..", (ASIA,)),
    "IN": (91, "+.. .....-.....", (ASIA,)),
    "JP": (81, "+.. .. .... ....", (ASIA,)),
    "KG": (996, "+... ... ... ...", (ASIA, EX_USSR)),
    "KH": (855, "+... .. ... ...", (ASIA,)),
    "KR": (82, "+.. ... .... ....", (ASIA,)),
    "KZ": (7, "+. ... ...-..-..", (ASIA, EX_USSR)),
    "LK": (94, "+.. .. ... ....", (ASIA,)),
    "MN": (976, "+... .. .. ....", (ASIA,)),
    "MY": (60, "+.. ..-....-....", (ASIA,)),
    "NP": (977, "+... ...-.......", (ASIA,)),
    "PH": (63, "+.. .... .......", (ASIA,)),
    "PK": (92, "+.. ...-.......", (ASIA,)),
    "SG": (65, "+.. ....-....", (ASIA,)),
    "TH": (66, "+.. . ... ....", (ASIA,)),
    "TJ": (992, "+... .. ... ....", (ASIA, EX_USSR)),
    "TW": (886, "+... .... ....", (ASIA,)),
    "UZ": (998, "+... .. ... .. ..", (ASIA, EX_USSR)),
    "VN": (84, "+.. .. .... ...", (ASIA,)),

    # Middle East
    "AE": (971, "+... .. ... ....", (MIDDLE_EAST,)),
    "BH": (973, "+... .... ....", (MIDDLE_EAST,)),
    "IL": (972, "+... ... ... ....", (MIDDLE_EAST,)),
    "IQ": (964, "+... ... ... ....", (MIDDLE_EAST,)),
    "IR": (98, "+.. ... ... ....", (MIDDLE_EAST,)),
    "JO": (962, "+... . .... ....", (MIDDLE_EAST,)),
    "KW": (965, "+... ... .....", (MIDDLE_EAST,)),
    "LB": (961, "+... .. ... ...", (MIDDLE_EAST,)),
    "OM": (968, "+... .... ....", (MIDDLE_EAST,)),
    "QA": (974, "+... .... ....", (MIDDLE_EAST,)),
    "SA": (966, "+... . ... ....", (MIDDLE_EAST,)),
    "TR": (90, "+.. ... ... .. ..", (EUROPE, ASIA, MIDDLE_EAST)),

    # Africa
    "CI": (225, "+... .. .. .. ..", (AFRICA,)),
    "CM": (237, "+... .... ....", (AFRICA,)),
    "DZ": (213, "+... ... .. .. ..", (AFRICA, NORTH_AFRICA)),
    "EG": (20, "+.. ... ... ....", (AFRICA, NORTH_AFRICA)),
    "ET": (251, "+... .. ... ....", (AFRICA,)),
    "GH": (233, "+... ... ... ...", (AFRICA,)),
    "KE": (254, "+... ... ......", (AFRICA,)),
    "MA": (212, "+... ..-....-...", (AFRICA, NORTH_AFRICA)),
    "MG": (261, "+... .. .. ... ..", (AFRICA,)),
    "NG": (234, "+... ... ... ....", (AFRICA,)),
    "RE": (262, "+... ... .. .. ..", (AFRICA,)),
    "SN": (221, "+... .. ... .. ..", (AFRICA,)),
    "TN": (216, "+... .. ... ...", (AFRICA, NORTH_AFRICA)),
    "TZ": (255, "+... ... ... ...", (AFRICA,)),
    "UG": (256, "+... ... ......", (AFRICA,)),
    "ZA": (27, "+.. .. ... ....", (AFRICA,)),
    "ZW": (263, "+... .. ... ....", (AFRICA,)),

    # Oceania
    "AU": (61, "+.. ... ... ...", (OCEANIA,)),
    "FJ": (679, "+... ... ....", (OCEANIA,)),
    "NC": (687, "+... .. .. ..", (OCEANIA,)),
    "NZ": (64, "+.. ...-...-....", (OCEANIA,)),
    "PF": (689, "+... .. .. .. ..", (OCEANIA,)),
    "PG": (675, "+... ... ....", (OCEANIA,)),
}


def build_countries(phone_data=COUNTRY_PHONE_DATA) -> Tuple[Country, ...]:
    """Build the country table from the phone data, sorted by display name"""
    countries = [
        Country(
            name=ISO_3166_ALPHA_2_MAPPINGS[iso_code],
            iso_code=iso_code,
            calling_code=calling_code,
            format=display_format,
            regions=regions,
        )
        for iso_code, (calling_code, display_format, regions) in phone_data.items()
    ]
    return tuple(sorted(countries, key=lambda country: country.name))


def validate_registry(countries: Sequence[Country], default_iso_code: str) -> None:
    """Check that ISO codes are unique and that the default country exists"""
    seen = set()
    for country in countries:
        if country.iso_code in seen:
            raise InvalidRegistryError(f"Duplicate ISO code in country table: {country.iso_code}")
        seen.add(country.iso_code)

    if default_iso_code not in seen:
        raise InvalidRegistryError(
            f"Default ISO code {default_iso_code!r} is not in the country table"
        )


COUNTRIES = build_countries()
validate_registry(COUNTRIES, DEFAULT_ISO_CODE)
logger.debug(f"Loaded {len(COUNTRIES)} countries, default is {DEFAULT_ISO_CODE}")
