"""
Unit Tests for Domain Entities

Tests the esport definition record and the locale/category enums.
"""

import pytest

from esport_faker.domain.entities.entities import (
    DEFAULT_LOCALE,
    EsportCategory,
    EsportDefinition,
    Locale,
)
from esport_faker.domain.exceptions import EmptyCategoryException, EsportFakerException


def make_definition(**overrides):
    fields = dict(
        players=("Alpha", "Bravo"),
        teams=("Team A",),
        leagues=("League A",),
        events=("Event A",),
        games=("Game A",),
    )
    fields.update(overrides)
    return EsportDefinition(**fields)


class TestEsportDefinition:
    """Tests for EsportDefinition entity."""
    
    def test_create_definition_valid(self):
        definition = make_definition()
        assert definition.players == ("Alpha", "Bravo")
        assert definition.games == ("Game A",)
    
    def test_lists_are_stored_as_tuples(self):
        """Test that list input is frozen into tuples."""
        definition = make_definition(teams=["Team A", "Team B"])
        assert definition.teams == ("Team A", "Team B")
        assert isinstance(definition.teams, tuple)
    
    def test_definition_is_frozen(self):
        definition = make_definition()
        with pytest.raises(AttributeError):
            definition.players = ("Other",)
    
    @pytest.mark.parametrize("field", ["players", "teams", "leagues", "events", "games"])
    def test_empty_category_raises_error(self, field):
        with pytest.raises(EmptyCategoryException, match=f"no {field}"):
            make_definition(**{field: ()})
    
    def test_empty_value_raises_error(self):
        with pytest.raises(EmptyCategoryException, match="empty value in leagues"):
            make_definition(leagues=("League A", ""))
    
    def test_empty_category_is_value_error(self):
        """Test that data errors are catchable as both ValueError and domain errors."""
        with pytest.raises(ValueError):
            make_definition(players=())
        with pytest.raises(EsportFakerException):
            make_definition(players=())
    
    def test_values_for_category(self):
        definition = make_definition()
        assert definition.values_for(EsportCategory.PLAYER) == definition.players
        assert definition.values_for("event") == definition.events
    
    def test_values_for_unknown_category_raises(self):
        with pytest.raises(ValueError):
            make_definition().values_for("coach")


class TestLocale:
    """Tests for the Locale enum."""
    
    def test_default_locale(self):
        assert DEFAULT_LOCALE is Locale.EN_US
    
    def test_locale_from_value(self):
        assert Locale("ko_KR") is Locale.KO_KR
    
    def test_locale_str_is_value(self):
        assert str(Locale.PT_BR) == "pt_BR"
    
    def test_invalid_locale_value_raises(self):
        with pytest.raises(ValueError):
            Locale(999)
