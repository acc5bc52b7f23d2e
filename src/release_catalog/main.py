"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from release_catalog import __version__
from release_catalog.api import api_router
from release_catalog.config import get_settings
from release_catalog.database import init_db
from release_catalog.services.errors import CatalogError
from release_catalog.services.serializer import render_error

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan - runs on startup and shutdown."""
    # Startup
    logger.info("Starting %s v%s", settings.app_name, __version__)
    logger.info("Debug mode: %s", settings.debug)
    logger.info("Database: %s", settings.database_url.split("///")[-1])  # Hide path details
    logger.info(
        "Pagination: %s per page by default, at most %s",
        settings.default_per_page,
        settings.max_per_page,
    )

    # Validate and log warnings
    warnings = settings.validate_runtime_config()
    if warnings:
        logger.warning("Configuration warnings:")
        for warning in warnings:
            logger.warning("  - %s", warning)
    else:
        logger.info("Configuration validation passed - no warnings")

    await init_db()
    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Application shutting down")


app = FastAPI(
    title=settings.app_name,
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)


@app.exception_handler(CatalogError)
async def catalog_error_handler(_request: Request, exc: CatalogError) -> JSONResponse:
    """Handle CatalogError exceptions globally, in the shape the endpoint uses."""
    return JSONResponse(
        status_code=exc.status_code,
        content=render_error(exc.shape, exc.status_code, exc.title, str(exc) or exc.title),
        headers=exc.headers,
    )


# Include API router
app.include_router(api_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the API is running."""
    return {"status": "healthy", "version": __version__}
