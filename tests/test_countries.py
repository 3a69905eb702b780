"""
Tests for country classification: counted, excluded-but-recorded, unknown.
"""

from __future__ import annotations

from staywatch.services.countries import (
    COUNTED_CODES,
    EXCLUDED_CODES,
    CountryClass,
    classify_country,
    counted_countries,
    is_counted_country,
    lookup_country,
    normalize_country_code,
)


def test_normalize_codes_and_names():
    assert normalize_country_code("fr") == "FR"
    assert normalize_country_code(" France ") == "FR"
    assert normalize_country_code("Czechia") == "CZ"
    assert normalize_country_code("uk") == "GB"
    assert normalize_country_code("Holy See") == "VA"


def test_normalize_unrecognized_returns_none():
    assert normalize_country_code("XX") is None
    assert normalize_country_code("") is None
    assert normalize_country_code(None) is None


def test_classification():
    assert classify_country("DE") == CountryClass.counted
    assert classify_country("IE") == CountryClass.excluded_but_recorded
    assert classify_country("CY") == CountryClass.excluded_but_recorded
    assert classify_country("GB") == CountryClass.excluded_but_recorded
    assert classify_country("US") == CountryClass.unknown
    assert classify_country(None) == CountryClass.unknown


def test_microstates_are_counted():
    for code in ("MC", "VA", "SM", "AD"):
        info = lookup_country(code)
        assert info.is_microstate
        assert info.is_counted
        assert is_counted_country(code)


def test_excluded_countries_have_reason():
    info = lookup_country("Ireland")
    assert info.code == "IE"
    assert not info.is_counted
    assert info.exclusion_reason


def test_counted_countries_sorted_and_complete():
    infos = counted_countries()
    assert len(infos) == 33
    assert {i.code for i in infos} == COUNTED_CODES
    assert not COUNTED_CODES & EXCLUDED_CODES
    names = [i.name for i in infos]
    assert names == sorted(names)
