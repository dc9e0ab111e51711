"""
Unit tests for Translator.

Tests verify:
- Catalog lookups for supported locales
- Fallback to the default locale and to the key itself
- Accept-Language negotiation
"""

import json
from pathlib import Path

import pytest

from src.i18n import get_translator
from src.i18n.translator import LOCALES_DIR, Translator


@pytest.fixture
def translator() -> Translator:
    return Translator(default_locale="en", supported_locales=["en", "ko"])


class TestTranslate:
    """Tests for translate()."""

    def test_english_message(self, translator: Translator) -> None:
        assert translator.translate("username_null", "en") == "Username cannot be null"

    def test_korean_message(self, translator: Translator) -> None:
        assert translator.translate("username_null", "ko") == "사용자명은 null이 될 수 없습니다."

    def test_default_locale_when_none(self, translator: Translator) -> None:
        assert translator.translate("user_create_success") == "User created"

    def test_unknown_locale_falls_back(self, translator: Translator) -> None:
        assert translator.translate("email_inuse", "fr") == "E-mail in use"

    def test_unknown_key_returned_verbatim(self, translator: Translator) -> None:
        """Missing keys never raise."""
        assert translator.translate("no_such_key", "ko") == "no_such_key"

    def test_key_missing_in_locale_uses_fallback(self, tmp_path: Path) -> None:
        """A key absent from a locale's catalog resolves from the fallback catalog."""
        (tmp_path / "en.json").write_text(json.dumps({"hello": "Hello"}), encoding="utf-8")
        (tmp_path / "ko.json").write_text(json.dumps({}), encoding="utf-8")
        translator = Translator("en", ["en", "ko"], locales_dir=tmp_path)

        assert translator.translate("hello", "ko") == "Hello"

    def test_translate_all_keeps_order(self, translator: Translator) -> None:
        result = translator.translate_all(
            {"username": "username_null", "email": "email_inuse"}, "ko"
        )
        assert list(result) == ["username", "email"]
        assert result["email"] == "이미 사용중인 email입니다."

    def test_catalogs_share_keys(self) -> None:
        """Every shipped catalog defines the same message keys."""
        en = json.loads((LOCALES_DIR / "en.json").read_text(encoding="utf-8"))
        ko = json.loads((LOCALES_DIR / "ko.json").read_text(encoding="utf-8"))
        assert set(en) == set(ko)


class TestNegotiate:
    """Tests for Accept-Language negotiation."""

    @pytest.mark.parametrize(
        "header,expected",
        [
            (None, "en"),
            ("", "en"),
            ("ko", "ko"),
            ("KO", "ko"),
            ("ko-KR", "ko"),
            ("fr", "en"),
            ("*", "en"),
            ("fr, ko;q=0.5", "ko"),
            ("en;q=0.3, ko;q=0.9", "ko"),
            ("ko;q=0, en", "en"),
            ("ko;q=abc, en", "en"),
        ],
    )
    def test_negotiate(self, translator: Translator, header: str | None, expected: str) -> None:
        assert translator.negotiate(header) == expected

    def test_supported_locales(self, translator: Translator) -> None:
        assert translator.supported_locales == ["en", "ko"]


class TestConstruction:
    """Tests for catalog loading."""

    def test_missing_default_catalog_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            Translator("en", ["en"], locales_dir=tmp_path)

    def test_missing_optional_catalog_is_skipped(self) -> None:
        translator = Translator("en", ["en", "xx"])
        assert translator.supported_locales == ["en"]

    def test_get_translator_is_cached(self) -> None:
        assert get_translator() is get_translator()
