"""
Tests for locale key recognition and alias spellings.
"""

import pytest
from transcheck.locales import is_locale_key, locale_spellings


@pytest.mark.parametrize("key", ["default", "en", "es", "es-CO", "en-US", "fr-ca", "EN", "es_co"])
def test_recognized_locale_keys(key):
    assert is_locale_key(key)


@pytest.mark.parametrize("key", ["title", "name", "eng", "es-COL", "e", "", "value", "es_CO_x", "en\n", "default\n"])
def test_non_locale_keys(key):
    assert not is_locale_key(key)


def test_non_string_key_is_not_locale():
    assert not is_locale_key(1)


def test_custom_allow_list_adds_keys():
    assert not is_locale_key("pt_br")
    assert is_locale_key("pt_br", allow_list=["pt_br"])


def test_spellings_canonical_first():
    spellings = locale_spellings("es-CO")
    assert spellings[0] == "es-CO"
    assert "es_co" in spellings
    assert "es_CO" in spellings


def test_aliases_are_symmetric():
    assert "es-CO" in locale_spellings("es_co", {"es-CO": "es_co"})


def test_plain_locale_has_single_spelling():
    assert locale_spellings("en", {}) == ("en",)
