"""Domain entities module."""

from .entities import DEFAULT_LOCALE, EsportCategory, EsportDefinition, Locale

__all__ = ["DEFAULT_LOCALE", "EsportCategory", "EsportDefinition", "Locale"]
