"""
Message translation - JSON catalogs with fallback locale.

Catalogs live in ``locales/<locale>.json`` next to this module, one flat
key -> text mapping per locale. Lookups fall back to the default locale,
then to the key itself, so translation never raises.
"""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).parent / "locales"


class Translator:
    """
    Resolves message keys to localized text.

    Also negotiates the locale for a request from its Accept-Language
    header, restricted to the locales that have a catalog.
    """

    def __init__(
        self,
        default_locale: str = "en",
        supported_locales: list[str] | None = None,
        locales_dir: Path = LOCALES_DIR,
    ) -> None:
        self.default_locale = default_locale
        self._catalogs: dict[str, dict[str, str]] = {}

        for locale in supported_locales or [default_locale]:
            catalog_file = locales_dir / f"{locale}.json"
            if not catalog_file.exists():
                logger.warning("No message catalog for locale %s (%s)", locale, catalog_file)
                continue
            self._catalogs[locale] = json.loads(catalog_file.read_text(encoding="utf-8"))

        if default_locale not in self._catalogs:
            raise ValueError(f"Missing message catalog for default locale: {default_locale}")

    @property
    def supported_locales(self) -> list[str]:
        return list(self._catalogs)

    def negotiate(self, accept_language: str | None) -> str:
        """
        Pick the best supported locale for an Accept-Language header.

        Honors quality weights (``ko;q=0.9``) and matches region tags by
        their primary subtag (``ko-KR`` -> ``ko``). Falls back to the
        default locale when the header is absent or nothing matches.
        """
        if not accept_language:
            return self.default_locale

        ranked: list[tuple[float, int, str]] = []
        for position, part in enumerate(accept_language.split(",")):
            tag, _, params = part.strip().partition(";")
            tag = tag.strip().lower()
            if not tag:
                continue
            quality = 1.0
            params = params.strip()
            if params.startswith("q="):
                try:
                    quality = float(params[2:])
                except ValueError:
                    continue
            if quality <= 0:
                continue
            ranked.append((-quality, position, tag))

        for _, _, tag in sorted(ranked):
            if tag == "*":
                return self.default_locale
            if tag in self._catalogs:
                return tag
            primary = tag.split("-")[0]
            if primary in self._catalogs:
                return primary

        return self.default_locale

    def translate(self, key: str, locale: str | None = None) -> str:
        """Return the text for a message key in the given locale."""
        catalog = self._catalogs.get(locale or self.default_locale, {})
        if key in catalog:
            return catalog[key]
        return self._catalogs[self.default_locale].get(key, key)

    def translate_all(self, keys: dict[str, str], locale: str | None = None) -> dict[str, str]:
        """Translate the values of a field -> key mapping, keeping its order."""
        return {field: self.translate(key, locale) for field, key in keys.items()}
