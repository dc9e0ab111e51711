"""Localization - message catalogs and locale negotiation."""

from functools import lru_cache

from src.config.settings import get_settings

from .translator import Translator


@lru_cache
def get_translator() -> Translator:
    """Get cached translator built from settings."""
    settings = get_settings()
    return Translator(
        default_locale=settings.default_locale,
        supported_locales=settings.supported_locales,
    )


__all__ = ["Translator", "get_translator"]
