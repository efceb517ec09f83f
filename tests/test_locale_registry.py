"""
Unit Tests for the Locale Registry

Tests lookup, fallback and singleton behaviour.
"""

import pytest
from unittest.mock import patch

from esport_faker.domain.entities.entities import EsportDefinition, Locale
from esport_faker.domain.exceptions import EsportFakerException
from esport_faker.domain.services import locale_registry
from esport_faker.domain.services.locale_registry import LocaleRegistry, get_locale_registry
from esport_faker.infrastructure.data_sources.esport_data import (
    ESPORT_DEFINITIONS,
    EN_US_ESPORT_DEFINITION,
    KO_KR_ESPORT_DEFINITION,
)


@pytest.fixture
def registry():
    """Registry over the bundled data tables."""
    return LocaleRegistry(ESPORT_DEFINITIONS, Locale.EN_US)


class TestLookup:
    """Tests for get_definition / resolve_locale."""
    
    def test_supported_locale_returns_its_definition(self, registry):
        assert registry.get_definition(Locale.KO_KR) is KO_KR_ESPORT_DEFINITION
    
    def test_locale_string_value_is_accepted(self, registry):
        assert registry.get_definition("ko_KR") is KO_KR_ESPORT_DEFINITION
    
    @pytest.mark.parametrize("invalid", [999, -1, None, "xx_XX", "EN_US", 3.5, ["en_US"]])
    def test_invalid_locale_falls_back_to_default(self, registry, invalid):
        assert registry.resolve_locale(invalid) is Locale.EN_US
        assert registry.get_definition(invalid) is EN_US_ESPORT_DEFINITION
    
    def test_locale_without_data_falls_back_to_default(self, registry):
        """Test that a valid enum member with no table uses the default."""
        assert not registry.is_supported(Locale.DE_DE)
        assert registry.get_definition(Locale.DE_DE) is EN_US_ESPORT_DEFINITION
    
    def test_lookup_is_stable(self, registry):
        """Test that resolving the same locale twice gives the identical definition."""
        for locale in registry.supported_locales:
            assert registry.get_definition(locale) is registry.get_definition(locale)
    
    def test_supported_locales_in_registration_order(self, registry):
        assert registry.supported_locales == tuple(ESPORT_DEFINITIONS)
        assert registry.supported_locales[0] is Locale.EN_US
    
    def test_custom_default_locale(self):
        registry = LocaleRegistry(ESPORT_DEFINITIONS, Locale.KO_KR)
        assert registry.default_locale is Locale.KO_KR
        assert registry.get_definition(999) is KO_KR_ESPORT_DEFINITION


class TestConstruction:
    """Tests for registry validation."""
    
    def test_missing_default_definition_raises(self):
        with pytest.raises(EsportFakerException, match="de_DE"):
            LocaleRegistry(ESPORT_DEFINITIONS, Locale.DE_DE)
    
    def test_registry_does_not_alias_input_mapping(self):
        definitions = {Locale.EN_US: EN_US_ESPORT_DEFINITION}
        registry = LocaleRegistry(definitions)
        definitions[Locale.KO_KR] = KO_KR_ESPORT_DEFINITION
        assert registry.supported_locales == (Locale.EN_US,)


class TestBundledData:
    """Tests for the static data tables."""
    
    def test_default_locale_has_data(self):
        assert Locale.EN_US in ESPORT_DEFINITIONS
    
    @pytest.mark.parametrize("locale", list(ESPORT_DEFINITIONS), ids=str)
    def test_every_table_is_a_definition(self, locale):
        definition = ESPORT_DEFINITIONS[locale]
        assert isinstance(definition, EsportDefinition)
        assert len(definition.players) > 1


class TestSingleton:
    """Tests for get_locale_registry."""
    
    def test_singleton_returns_same_instance(self):
        assert get_locale_registry() is get_locale_registry()
    
    def test_singleton_uses_configured_default_locale(self):
        with patch.object(locale_registry, "_registry_instance", None), \
                patch.dict("os.environ", {"ESPORT_FAKER_DEFAULT_LOCALE": "pt_BR"}):
            registry = get_locale_registry()
            assert registry.default_locale is Locale.PT_BR
