"""
Esport Router

API endpoints for generating esport values.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from esport_faker.api.dependencies import get_generator
from esport_faker.application.dtos.dtos import (
    EsportBundleDTO,
    EsportValuesResponseDTO,
    ErrorResponseDTO,
)
from esport_faker.application.use_cases.use_cases import (
    GenerateEsportBundleUseCase,
    GenerateEsportValuesUseCase,
)
from esport_faker.domain.entities.entities import DEFAULT_LOCALE, EsportCategory
from esport_faker.domain.services.esport_generator import EsportGenerator


router = APIRouter(prefix="/esport", tags=["Esport"])


@router.get(
    "/bundle",
    response_model=EsportBundleDTO,
    summary="Generate one value of every category",
    description="Returns a player, team, league, event and game from the same locale.",
)
def get_bundle(
    locale: str = Query(default=DEFAULT_LOCALE.value, description="Locale code, e.g. en_US"),
    generator: EsportGenerator = Depends(get_generator),
) -> EsportBundleDTO:
    """Generate a full esport bundle."""
    return GenerateEsportBundleUseCase(generator).execute(locale)


@router.get(
    "/{category}",
    response_model=EsportValuesResponseDTO,
    responses={
        404: {"model": ErrorResponseDTO, "description": "Unknown category"},
    },
    summary="Generate values of a category",
    description="Returns `count` random values of one category. Unsupported locales use the default locale.",
)
def get_values(
    category: str,
    locale: str = Query(default=DEFAULT_LOCALE.value, description="Locale code, e.g. en_US"),
    count: int = Query(default=1, ge=1, le=100, description="Number of values"),
    generator: EsportGenerator = Depends(get_generator),
) -> EsportValuesResponseDTO:
    """Generate values for one category."""
    try:
        category_enum = EsportCategory(category)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Category not found: {category}")

    return GenerateEsportValuesUseCase(generator).execute(category_enum, locale, count)
