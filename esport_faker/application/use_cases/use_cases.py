"""
Application Use Cases Module

Use cases orchestrate the domain services for a single request.
They are called by the API routes and know nothing about HTTP.
"""

import logging
from typing import Any

from esport_faker.application.dtos.dtos import (
    EsportBundleDTO,
    EsportValuesResponseDTO,
    LocalesResponseDTO,
)
from esport_faker.domain.entities.entities import EsportCategory
from esport_faker.domain.services.esport_generator import EsportGenerator

logger = logging.getLogger(__name__)


class GenerateEsportValuesUseCase:
    """Draw one or more values of a category."""

    def __init__(self, generator: EsportGenerator):
        self.generator = generator

    def execute(self, category: EsportCategory, locale: Any, count: int = 1) -> EsportValuesResponseDTO:
        """
        Execute the use case.

        Args:
            category: Category to draw from
            locale: Requested locale (unsupported values fall back)
            count: Number of independent draws

        Returns:
            EsportValuesResponseDTO with the drawn values
        """
        category = EsportCategory(category)
        resolved = self.generator.registry.resolve_locale(locale)
        values = [self.generator.generate(category, resolved) for _ in range(count)]

        return EsportValuesResponseDTO(
            category=category,
            requested_locale=str(locale),
            resolved_locale=resolved.value,
            values=values,
        )


class GenerateEsportBundleUseCase:
    """Draw one value of every category."""

    def __init__(self, generator: EsportGenerator):
        self.generator = generator

    def execute(self, locale: Any) -> EsportBundleDTO:
        resolved = self.generator.registry.resolve_locale(locale)
        bundle = self.generator.generate_bundle(resolved)

        return EsportBundleDTO(
            requested_locale=str(locale),
            resolved_locale=resolved.value,
            **bundle,
        )


class GetLocalesUseCase:
    """List locales that have esport data."""

    def __init__(self, generator: EsportGenerator):
        self.registry = generator.registry

    def execute(self) -> LocalesResponseDTO:
        supported = [locale.value for locale in self.registry.supported_locales]
        return LocalesResponseDTO(
            default_locale=self.registry.default_locale.value,
            supported_locales=supported,
            total_locales=len(supported),
        )
