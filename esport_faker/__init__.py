"""
esport_faker - locale-aware fake esport data.
"""

from esport_faker.domain.entities.entities import DEFAULT_LOCALE, EsportCategory, EsportDefinition, Locale
from esport_faker.esport import event, game, generate, league, player, seed, team

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_LOCALE",
    "EsportCategory",
    "EsportDefinition",
    "Locale",
    "event",
    "game",
    "generate",
    "league",
    "player",
    "seed",
    "team",
]
