"""Domain services module."""

from .esport_generator import EsportGenerator, get_esport_generator
from .locale_registry import LocaleRegistry, get_locale_registry

__all__ = ["EsportGenerator", "get_esport_generator", "LocaleRegistry", "get_locale_registry"]
