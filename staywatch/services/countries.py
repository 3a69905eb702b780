"""Module A: Country classification for the counted territory (Schengen area).

Membership data is static and built once at import time. Re-verify the member list against
https://home-affairs.ec.europa.eu/policies/schengen-borders-and-visa/schengen-area_en before each release.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType


MEMBERSHIP_VERSION = "2025-01-07"


class CountryClass(str, enum.Enum):
    counted = "counted"
    excluded_but_recorded = "excluded_but_recorded"
    unknown = "unknown"


@dataclass(frozen=True)
class CountryInfo:
    code: str
    name: str
    country_class: CountryClass
    is_microstate: bool = False
    member_since: str | None = None
    exclusion_reason: str | None = None

    @property
    def is_counted(self) -> bool:
        return self.country_class == CountryClass.counted


# code -> (name, member since)
_MEMBERS = {
    "AT": ("Austria", "1997-12-01"),
    "BE": ("Belgium", "1995-03-26"),
    "BG": ("Bulgaria", "2025-01-01"),  # land borders lifted Jan 2025
    "HR": ("Croatia", "2023-01-01"),
    "CZ": ("Czech Republic", "2007-12-21"),
    "DK": ("Denmark", "2001-03-25"),
    "EE": ("Estonia", "2007-12-21"),
    "FI": ("Finland", "2001-03-25"),
    "FR": ("France", "1995-03-26"),
    "DE": ("Germany", "1995-03-26"),
    "GR": ("Greece", "2000-01-01"),
    "HU": ("Hungary", "2007-12-21"),
    "IS": ("Iceland", "2001-03-25"),
    "IT": ("Italy", "1997-10-26"),
    "LV": ("Latvia", "2007-12-21"),
    "LI": ("Liechtenstein", "2011-12-19"),
    "LT": ("Lithuania", "2007-12-21"),
    "LU": ("Luxembourg", "1995-03-26"),
    "MT": ("Malta", "2007-12-21"),
    "NL": ("Netherlands", "1995-03-26"),
    "NO": ("Norway", "2001-03-25"),
    "PL": ("Poland", "2007-12-21"),
    "PT": ("Portugal", "1995-03-26"),
    "RO": ("Romania", "2025-01-01"),  # land borders lifted Jan 2025
    "SK": ("Slovakia", "2007-12-21"),
    "SI": ("Slovenia", "2007-12-21"),
    "ES": ("Spain", "1995-03-26"),
    "SE": ("Sweden", "2001-03-25"),
    "CH": ("Switzerland", "2008-12-12"),
}

# Open borders with a member state, no passport control: presence counts.
_MICROSTATES = {
    "MC": "Monaco",
    "VA": "Vatican City",
    "SM": "San Marino",
    "AD": "Andorra",
}

_EXCLUDED = {
    "IE": ("Ireland", "EU member, opted out of Schengen"),
    "CY": ("Cyprus", "EU member, not yet implemented Schengen"),
    "GB": ("United Kingdom", "Not EU, not Schengen"),
}

_ALIASES = {
    "CZECHIA": "CZ",
    "CZECH": "CZ",
    "HOLLAND": "NL",
    "THE NETHERLANDS": "NL",
    "HELLENIC REPUBLIC": "GR",
    "SWISS CONFEDERATION": "CH",
    "SLOVAK REPUBLIC": "SK",
    "FRENCH REPUBLIC": "FR",
    "FEDERAL REPUBLIC OF GERMANY": "DE",
    "ITALIAN REPUBLIC": "IT",
    "PORTUGUESE REPUBLIC": "PT",
    "KINGDOM OF SPAIN": "ES",
    "KINGDOM OF THE NETHERLANDS": "NL",
    "GRAND DUCHY OF LUXEMBOURG": "LU",
    "PRINCIPALITY OF LIECHTENSTEIN": "LI",
    "PRINCIPALITY OF MONACO": "MC",
    "PRINCIPALITY OF ANDORRA": "AD",
    "REPUBLIC OF SAN MARINO": "SM",
    "HOLY SEE": "VA",
    "VATICAN": "VA",
    "REPUBLIC OF IRELAND": "IE",
    "EIRE": "IE",
    "REPUBLIC OF CYPRUS": "CY",
    "UK": "GB",
    "GREAT BRITAIN": "GB",
    "ENGLAND": "GB",
    "SCOTLAND": "GB",
    "WALES": "GB",
    "NORTHERN IRELAND": "GB",
}


def _build_table() -> MappingProxyType:
    table: dict[str, CountryInfo] = {}
    for code, (name, since) in _MEMBERS.items():
        table[code] = CountryInfo(code, name, CountryClass.counted, member_since=since)
    for code, name in _MICROSTATES.items():
        table[code] = CountryInfo(code, name, CountryClass.counted, is_microstate=True)
    for code, (name, reason) in _EXCLUDED.items():
        table[code] = CountryInfo(code, name, CountryClass.excluded_but_recorded, exclusion_reason=reason)
    return MappingProxyType(table)


COUNTRY_TABLE = _build_table()

_NAME_TO_CODE = MappingProxyType(
    {**{info.name.upper(): code for code, info in COUNTRY_TABLE.items()}, **_ALIASES}
)

COUNTED_CODES = frozenset(code for code, info in COUNTRY_TABLE.items() if info.is_counted)
EXCLUDED_CODES = frozenset(_EXCLUDED)


def normalize_country_code(value: str | None) -> str | None:
    """Resolve a code or country name to its uppercase 2-letter code, or None if not recognized."""
    if not value or not isinstance(value, str):
        return None
    key = value.strip().upper()
    if key in COUNTRY_TABLE:
        return key
    return _NAME_TO_CODE.get(key)


def lookup_country(value: str | None) -> CountryInfo | None:
    code = normalize_country_code(value)
    return COUNTRY_TABLE[code] if code else None


def classify_country(value: str | None) -> CountryClass:
    """Counted / excluded-but-recorded / unknown. Never raises."""
    info = lookup_country(value)
    if info is None:
        return CountryClass.unknown
    return info.country_class


def is_counted_country(value: str | None) -> bool:
    return classify_country(value) == CountryClass.counted


def counted_countries() -> list[CountryInfo]:
    """Counted countries sorted by name (members and microstates)."""
    return sorted((COUNTRY_TABLE[c] for c in COUNTED_CODES), key=lambda info: info.name)


def all_countries() -> list[CountryInfo]:
    return sorted(COUNTRY_TABLE.values(), key=lambda info: info.name)
