"""
Locale Registry Service Module

Maps locales to their esport definitions. Lookup is total: any value that is
not a supported locale resolves to the default locale's definition.
"""

import logging
import threading
from typing import Any, Dict, Mapping, Optional, Tuple

from esport_faker.domain.entities.entities import DEFAULT_LOCALE, EsportDefinition, Locale
from esport_faker.domain.exceptions import EsportFakerException

logger = logging.getLogger(__name__)


class LocaleRegistry:
    """
    Read-only lookup of esport definitions by locale.
    """

    def __init__(
        self,
        definitions: Mapping[Locale, EsportDefinition],
        default_locale: Locale = DEFAULT_LOCALE,
    ):
        self._definitions: Dict[Locale, EsportDefinition] = dict(definitions)
        self._default_locale = Locale(default_locale)

        if self._default_locale not in self._definitions:
            raise EsportFakerException(
                f"No esport definition for default locale {self._default_locale.value}"
            )

    @property
    def default_locale(self) -> Locale:
        return self._default_locale

    @property
    def supported_locales(self) -> Tuple[Locale, ...]:
        """Locales that have their own data, in registration order."""
        return tuple(self._definitions)

    def is_supported(self, locale: Any) -> bool:
        return self._coerce(locale) in self._definitions

    def resolve_locale(self, locale: Any) -> Locale:
        """
        Get the locale whose data serves the requested locale.

        Args:
            locale: A Locale, its string value, or any other object

        Returns:
            The locale itself when supported, otherwise the default locale.
        """
        coerced = self._coerce(locale)
        if coerced in self._definitions:
            return coerced

        logger.debug(f"No esport data for locale {locale!r}, falling back to {self._default_locale.value}")
        return self._default_locale

    def get_definition(self, locale: Any) -> EsportDefinition:
        """Get the esport definition for a locale (default locale's if unsupported)."""
        return self._definitions[self.resolve_locale(locale)]

    @staticmethod
    def _coerce(locale: Any) -> Optional[Locale]:
        if isinstance(locale, Locale):
            return locale
        try:
            return Locale(locale)
        except (ValueError, TypeError):
            return None


# Singleton instance
_registry_instance: Optional[LocaleRegistry] = None
_instance_lock = threading.Lock()

def get_locale_registry() -> LocaleRegistry:
    """Get the singleton locale registry, built from the static data tables."""
    global _registry_instance
    if _registry_instance is None:
        with _instance_lock:
            if _registry_instance is None:
                from esport_faker.core.settings import get_settings
                from esport_faker.infrastructure.data_sources.esport_data import ESPORT_DEFINITIONS

                settings = get_settings()
                _registry_instance = LocaleRegistry(ESPORT_DEFINITIONS, settings.default_locale)
                logger.info(
                    f"LocaleRegistry initialized with {len(ESPORT_DEFINITIONS)} locales "
                    f"(default: {settings.default_locale.value})"
                )
    return _registry_instance
