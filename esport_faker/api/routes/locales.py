"""
Locales Router

API endpoints for listing supported locales.
"""

from fastapi import APIRouter, Depends

from esport_faker.api.dependencies import get_generator
from esport_faker.application.dtos.dtos import LocalesResponseDTO
from esport_faker.application.use_cases.use_cases import GetLocalesUseCase
from esport_faker.domain.services.esport_generator import EsportGenerator


router = APIRouter(prefix="/locales", tags=["Locales"])


@router.get(
    "",
    response_model=LocalesResponseDTO,
    summary="Get supported locales",
    description="Returns the locales that have esport data and the fallback locale.",
)
def get_locales(generator: EsportGenerator = Depends(get_generator)) -> LocalesResponseDTO:
    return GetLocalesUseCase(generator).execute()
