"""
Domain Entities Module

This module contains the core domain entities for the esport data generator.
These entities describe locales, categories and the per-locale data tables
and are independent of any infrastructure.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from esport_faker.domain.exceptions import EmptyCategoryException


class Locale(str, Enum):
    """Language/region identifiers understood by the generator."""
    EN_US = "en_US"
    EN_GB = "en_GB"
    DE_DE = "de_DE"
    FR_FR = "fr_FR"
    ES_ES = "es_ES"
    IT_IT = "it_IT"
    PL_PL = "pl_PL"
    PT_BR = "pt_BR"
    RU_RU = "ru_RU"
    SV_SE = "sv_SE"
    DA_DK = "da_DK"
    UK_UA = "uk_UA"
    TR_TR = "tr_TR"
    KO_KR = "ko_KR"
    JA_JP = "ja_JP"
    ZH_CN = "zh_CN"

    def __str__(self) -> str:
        return self.value


DEFAULT_LOCALE = Locale.EN_US


class EsportCategory(str, Enum):
    """Kinds of values an esport definition holds."""
    PLAYER = "player"
    TEAM = "team"
    LEAGUE = "league"
    EVENT = "event"
    GAME = "game"


@dataclass(frozen=True)
class EsportDefinition:
    """
    Esport data table for a single locale.
    
    Attributes:
        players: Player handles (e.g., "Faker")
        teams: Organisation names (e.g., "Team Liquid")
        leagues: League names (e.g., "League of Legends Champions Korea")
        events: Tournament names (e.g., "The International")
        games: Competitive titles (e.g., "Dota 2")
    """
    players: Tuple[str, ...]
    teams: Tuple[str, ...]
    leagues: Tuple[str, ...]
    events: Tuple[str, ...]
    games: Tuple[str, ...]

    def __post_init__(self):
        for category in EsportCategory:
            attr = _CATEGORY_FIELDS[category]
            values = tuple(getattr(self, attr))
            if not values:
                raise EmptyCategoryException(f"Esport definition has no {attr}")
            if not all(values):
                raise EmptyCategoryException(f"Esport definition contains an empty value in {attr}")
            # Frozen dataclass: coerce lists passed by callers into tuples
            object.__setattr__(self, attr, values)

    def values_for(self, category: EsportCategory) -> Tuple[str, ...]:
        """Get the value list for a category."""
        return getattr(self, _CATEGORY_FIELDS[EsportCategory(category)])


_CATEGORY_FIELDS = {
    EsportCategory.PLAYER: "players",
    EsportCategory.TEAM: "teams",
    EsportCategory.LEAGUE: "leagues",
    EsportCategory.EVENT: "events",
    EsportCategory.GAME: "games",
}
