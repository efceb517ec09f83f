"""
Data Transfer Objects (DTOs) Module

DTOs are used to transfer data between layers and to/from the API.
They use Pydantic for validation and serialization.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from esport_faker.domain.entities.entities import EsportCategory


# ============================================================
# Response DTOs
# ============================================================

class EsportValuesResponseDTO(BaseModel):
    """Values drawn for a single category."""
    category: EsportCategory
    requested_locale: str = Field(..., description="Locale as sent by the caller")
    resolved_locale: str = Field(..., description="Locale whose data was used")
    values: List[str]


class EsportBundleDTO(BaseModel):
    """One value of every category from the same locale."""
    requested_locale: str
    resolved_locale: str
    player: str
    team: str
    league: str
    event: str
    game: str


class LocalesResponseDTO(BaseModel):
    """Locales with esport data."""
    default_locale: str
    supported_locales: List[str]
    total_locales: int


class HealthResponseDTO(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str
    timestamp: datetime


class ErrorResponseDTO(BaseModel):
    """Error response."""
    error: str
    message: str
    details: Optional[dict] = None
