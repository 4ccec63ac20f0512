from __future__ import annotations

from functools import lru_cache
from typing import Optional

import pycountry

from .utils import normalize_key, slugify


# IOC committee codes that differ from the ISO 3166 alpha-3 code.
IOC_TO_ISO3 = {
    "ALG": "DZA",
    "ANG": "AGO",
    "BAH": "BHS",
    "BUL": "BGR",
    "CHI": "CHL",
    "CRO": "HRV",
    "DEN": "DNK",
    "GER": "DEU",
    "GRE": "GRC",
    "HAI": "HTI",
    "INA": "IDN",
    "IRI": "IRN",
    "KSA": "SAU",
    "LAT": "LVA",
    "LIB": "LBN",
    "MAS": "MYS",
    "MGL": "MNG",
    "MON": "MCO",
    "NED": "NLD",
    "NGR": "NGA",
    "PHI": "PHL",
    "POR": "PRT",
    "PUR": "PRI",
    "RSA": "ZAF",
    "SLO": "SVN",
    "SUI": "CHE",
    "TPE": "TWN",
    "UAE": "ARE",
    "URU": "URY",
    "VIE": "VNM",
    "ZIM": "ZWE",
}

# Delegations with no ISO country behind them.
IOC_ONLY_NAMES = {
    "AIN": "Individual Neutral Athletes",
    "EOR": "Refugee Olympic Team",
    "KOS": "Kosovo",
}

# Shorter names than the ISO ones, as printed on the site.
NAME_OVERRIDES = {
    "GBR": "Great Britain",
    "KOR": "South Korea",
    "PRK": "North Korea",
    "TPE": "Chinese Taipei",
    "USA": "United States",
    "CZE": "Czechia",
}


def _iso_country(code: str):
    iso3 = IOC_TO_ISO3.get(code, code)
    return pycountry.countries.get(alpha_3=iso3)


def get_country_name(code: str) -> Optional[str]:
    """English display name for an IOC (or ISO alpha-3) code, ``None`` when unknown."""
    key = normalize_key(code).upper()
    if not key:
        return None
    if key in NAME_OVERRIDES:
        return NAME_OVERRIDES[key]
    if key in IOC_ONLY_NAMES:
        return IOC_ONLY_NAMES[key]
    country = _iso_country(key)
    if country is None:
        return None
    return getattr(country, "common_name", None) or country.name


def country_slug(code: str) -> str:
    name = get_country_name(code)
    return slugify(name) if name else normalize_key(code)


@lru_cache(maxsize=1)
def _slug_index() -> dict[str, str]:
    index: dict[str, str] = {}
    iso_to_ioc = {iso3: ioc for ioc, iso3 in IOC_TO_ISO3.items()}
    codes = set(IOC_ONLY_NAMES) | set(NAME_OVERRIDES) | set(IOC_TO_ISO3)
    for country in pycountry.countries:
        codes.add(iso_to_ioc.get(country.alpha_3, country.alpha_3))
    for code in sorted(codes):
        index.setdefault(country_slug(code), code)
    return index


def country_code_from_slug(slug: str) -> Optional[str]:
    """Resolve "norway" or "nor" to "NOR"; ``None`` when nothing matches."""
    key = normalize_key(slug)
    if not key:
        return None
    code = _slug_index().get(key)
    if code:
        return code
    iso_to_ioc = {iso3: ioc for ioc, iso3 in IOC_TO_ISO3.items()}
    candidate = iso_to_ioc.get(key.upper(), key.upper())
    if get_country_name(candidate):
        return candidate
    return None
