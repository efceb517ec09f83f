"""
Esport Module

Module-level generators backed by the shared EsportGenerator:

    >>> from esport_faker import esport, Locale
    >>> esport.player(Locale.KO_KR)  # doctest: +SKIP
    'Chovy'
"""

from typing import Any, Optional

from esport_faker.domain.entities.entities import DEFAULT_LOCALE, EsportCategory
from esport_faker.domain.services.esport_generator import get_esport_generator


def player(locale: Any = DEFAULT_LOCALE) -> str:
    """Random esport player handle."""
    return get_esport_generator().player(locale)


def team(locale: Any = DEFAULT_LOCALE) -> str:
    """Random esport team name."""
    return get_esport_generator().team(locale)


def league(locale: Any = DEFAULT_LOCALE) -> str:
    """Random esport league name."""
    return get_esport_generator().league(locale)


def event(locale: Any = DEFAULT_LOCALE) -> str:
    """Random esport event name."""
    return get_esport_generator().event(locale)


def game(locale: Any = DEFAULT_LOCALE) -> str:
    """Random esport game title."""
    return get_esport_generator().game(locale)


def generate(category: EsportCategory, locale: Any = DEFAULT_LOCALE) -> str:
    """Random value of the given category."""
    return get_esport_generator().generate(category, locale)


def seed(value: Optional[int] = None) -> None:
    """Reseed the shared random source."""
    get_esport_generator().seed(value)
