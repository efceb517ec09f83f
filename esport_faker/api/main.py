"""
Esport Faker - FastAPI Application

HTTP surface over the esport generators.
This module configures the FastAPI app, middleware, and routes.
"""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from esport_faker import __version__
from esport_faker.api.routes import esport, locales
from esport_faker.application.dtos.dtos import HealthResponseDTO, ErrorResponseDTO
from esport_faker.core.settings import get_settings
from esport_faker.domain.services.esport_generator import get_esport_generator
from esport_faker.utils.logging_utils import configure_logging
from esport_faker.utils.time_utils import get_current_time

settings = get_settings()
configure_logging(settings.log_level, settings.log_timezone)
logger = logging.getLogger(__name__)


# Application metadata
APP_TITLE = "Esport Faker"
APP_DESCRIPTION = """
**Fake esport data API**

Random esport players, teams, leagues, events and games drawn from
per-locale data tables. Locales without data fall back to the default locale.
"""
APP_VERSION = __version__


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Starting {APP_TITLE} v{APP_VERSION}")

    # Build the registry and generator up front so bad data fails at startup
    generator = get_esport_generator()
    logger.info(
        f"✓ {len(generator.registry.supported_locales)} locales loaded "
        f"(default: {generator.registry.default_locale.value})"
    )

    yield

    logger.info(f"Shutting down {APP_TITLE}")


app = FastAPI(
    title=APP_TITLE,
    description=APP_DESCRIPTION,
    version=APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

cors_origins = [o for o in os.getenv("CORS_ORIGINS", "*").split(",") if o]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.error(f"Unhandled error: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=ErrorResponseDTO(
            error="internal_server_error",
            message="An unexpected error occurred",
            details={"path": str(request.url)},
        ).model_dump(),
    )


@app.get(
    "/health",
    response_model=HealthResponseDTO,
    tags=["Health"],
    summary="Health check",
    description="Check if the API is running and healthy.",
)
async def health_check() -> HealthResponseDTO:
    """Health check endpoint."""
    return HealthResponseDTO(
        status="healthy",
        version=APP_VERSION,
        timestamp=get_current_time(settings.log_timezone),
    )


@app.get(
    "/",
    tags=["Root"],
    summary="API Information",
    description="Get basic API information and links.",
)
async def root():
    """Root endpoint with API info."""
    return {
        "name": APP_TITLE,
        "version": APP_VERSION,
        "documentation": "/docs",
        "health": "/health",
        "endpoints": {
            "locales": "/api/v1/locales",
            "bundle": "/api/v1/esport/bundle",
            "values": "/api/v1/esport/{category}",
        },
    }


app.include_router(locales.router, prefix="/api/v1")
app.include_router(esport.router, prefix="/api/v1")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "esport_faker.api.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=True,
    )
