"""
API Dependencies Module

Provides dependency injection for FastAPI routes.
"""

from esport_faker.domain.services.esport_generator import EsportGenerator, get_esport_generator


def get_generator() -> EsportGenerator:
    """Get the shared esport generator (overridable in tests)."""
    return get_esport_generator()
