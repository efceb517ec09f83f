"""
Esport Generator Service Module

Draws random esport values (players, teams, leagues, events, games) for a
locale. Each draw is a uniform pick from the resolved locale's list.
"""

import logging
import random
import threading
from typing import Any, Dict, Optional

from esport_faker.domain.entities.entities import DEFAULT_LOCALE, EsportCategory
from esport_faker.domain.services.locale_registry import LocaleRegistry, get_locale_registry

logger = logging.getLogger(__name__)


class EsportGenerator:
    """
    Generates esport values from a locale registry.

    A caller-supplied random.Random makes the draws reproducible; without one
    the generator owns an unseeded instance.
    """

    def __init__(
        self,
        registry: Optional[LocaleRegistry] = None,
        rng: Optional[random.Random] = None,
    ):
        self.registry = registry or get_locale_registry()
        self.rng = rng or random.Random()

    def seed(self, value: Optional[int] = None) -> None:
        """Reseed the random source (None = non-deterministic)."""
        self.rng.seed(value)

    def generate(self, category: EsportCategory, locale: Any = DEFAULT_LOCALE) -> str:
        """
        Draw one value of a category.

        Args:
            category: EsportCategory or its string value
            locale: Requested locale; unsupported values use the default locale

        Raises:
            ValueError: If category is not a known category name
        """
        category = EsportCategory(category)
        values = self.registry.get_definition(locale).values_for(category)
        return self.rng.choice(values)

    def generate_bundle(self, locale: Any = DEFAULT_LOCALE) -> Dict[str, str]:
        """Draw one value of every category from the same locale."""
        definition = self.registry.get_definition(locale)
        return {
            category.value: self.rng.choice(definition.values_for(category))
            for category in EsportCategory
        }

    def player(self, locale: Any = DEFAULT_LOCALE) -> str:
        return self.generate(EsportCategory.PLAYER, locale)

    def team(self, locale: Any = DEFAULT_LOCALE) -> str:
        return self.generate(EsportCategory.TEAM, locale)

    def league(self, locale: Any = DEFAULT_LOCALE) -> str:
        return self.generate(EsportCategory.LEAGUE, locale)

    def event(self, locale: Any = DEFAULT_LOCALE) -> str:
        return self.generate(EsportCategory.EVENT, locale)

    def game(self, locale: Any = DEFAULT_LOCALE) -> str:
        return self.generate(EsportCategory.GAME, locale)


# Singleton instance
_generator_instance: Optional[EsportGenerator] = None
_instance_lock = threading.Lock()

def get_esport_generator() -> EsportGenerator:
    """Get the shared generator used by the module-level functions."""
    global _generator_instance
    if _generator_instance is None:
        with _instance_lock:
            if _generator_instance is None:
                from esport_faker.core.settings import get_settings

                seed = get_settings().seed
                _generator_instance = EsportGenerator(rng=random.Random(seed))
                if seed is not None:
                    logger.info(f"EsportGenerator seeded with {seed}")
    return _generator_instance
