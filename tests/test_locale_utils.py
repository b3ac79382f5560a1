"""Tests for locale_utils: code normalization and system locale detection.

Python 3.13+.
"""

import os
from unittest.mock import patch

import pytest
from babel import Locale, UnknownLocaleError
from hypothesis import event, given
from hypothesis import strategies as st

from datetemplates.locale_utils import (
    clear_locale_cache,
    get_babel_locale,
    get_system_locale,
    normalize_locale,
    resolve_locale_code,
)


class TestNormalizeLocale:
    """normalize_locale converts BCP-47 codes to Babel's POSIX form."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("en-US", "en_US"),
            ("en_US", "en_US"),
            ("en", "en"),
            ("zh-Hans-CN", "zh_Hans_CN"),
            ("de_DE.UTF-8", "de_DE"),
        ],
    )
    def test_normalize(self, code: str, expected: str) -> None:
        assert normalize_locale(code) == expected


class TestResolveLocaleCode:
    def test_explicit_code_normalized(self) -> None:
        assert resolve_locale_code("es-ES") == "es_ES"

    def test_none_uses_system_locale(self) -> None:
        with patch("locale.getlocale", return_value=("fr_FR", "UTF-8")):
            assert resolve_locale_code(None) == "fr_FR"


class TestGetBabelLocale:
    def test_bcp47_format(self) -> None:
        locale = get_babel_locale("en-US")
        assert isinstance(locale, Locale)
        assert locale.language == "en"
        assert locale.territory == "US"

    def test_caching(self) -> None:
        clear_locale_cache()
        assert get_babel_locale("es_ES") is get_babel_locale("es_ES")
        assert get_babel_locale.cache_info().hits >= 1

    def test_clear_cache(self) -> None:
        get_babel_locale("en_US")
        clear_locale_cache()
        assert get_babel_locale.cache_info().currsize == 0

    def test_unknown_locale_raises(self) -> None:
        with pytest.raises((UnknownLocaleError, ValueError)):
            get_babel_locale("xx_XX")


class TestGetSystemLocale:
    """Detection order: getlocale(), LC_ALL, LC_MESSAGES, LANG, en_US."""

    def test_getlocale_first(self) -> None:
        with patch("locale.getlocale", return_value=("de_DE.UTF-8", "UTF-8")):
            assert get_system_locale() == "de_DE"

    @pytest.mark.parametrize("pseudo", ["C", "POSIX"])
    def test_pseudo_locales_skipped(self, pseudo: str) -> None:
        with (
            patch("locale.getlocale", return_value=(pseudo, None)),
            patch.dict(os.environ, {"LANG": "it_IT"}, clear=True),
        ):
            assert get_system_locale() == "it_IT"

    @pytest.mark.parametrize("error", [ValueError("bad"), AttributeError("missing")])
    def test_getlocale_errors_fall_through(self, error: Exception) -> None:
        with (
            patch("locale.getlocale", side_effect=error),
            patch.dict(os.environ, {"LANG": "pt-BR"}, clear=True),
        ):
            assert get_system_locale() == "pt_BR"

    @pytest.mark.parametrize(
        ("env", "expected"),
        [
            ({"LC_ALL": "de_DE", "LC_MESSAGES": "fr_FR", "LANG": "en_GB"}, "de_DE"),
            ({"LC_MESSAGES": "fr_FR", "LANG": "en_GB"}, "fr_FR"),
            ({"LANG": "ja_JP.UTF-8"}, "ja_JP"),
            ({"LC_ALL": "C.UTF-8", "LANG": "ko_KR"}, "ko_KR"),
            ({"LC_ALL": "", "LANG": "he_IL"}, "he_IL"),
        ],
    )
    def test_environment_priority(self, env: dict[str, str], expected: str) -> None:
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, env, clear=True),
        ):
            assert get_system_locale() == expected

    def test_default_fallback(self) -> None:
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {}, clear=True),
        ):
            assert get_system_locale() == "en_US"

    def test_raise_on_failure(self) -> None:
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {}, clear=True),
            pytest.raises(RuntimeError, match="Could not determine system locale"),
        ):
            get_system_locale(raise_on_failure=True)


@given(
    lang=st.from_regex(r"[a-z]{2,3}", fullmatch=True),
    region=st.from_regex(r"[A-Z]{2}", fullmatch=True),
)
def test_property_normalize_hyphen_to_underscore(lang: str, region: str) -> None:
    """Property: normalization is idempotent and maps '-' to '_'."""
    event("outcome=converted")
    normalized = normalize_locale(f"{lang}-{region}")
    assert normalized == f"{lang}_{region}"
    assert normalize_locale(normalized) == normalized
