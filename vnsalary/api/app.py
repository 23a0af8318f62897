"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from vnsalary.api.routes import router
from vnsalary.calculators.errors import InvalidArgumentError
from vnsalary.calculators.tax_data import load_regimes, register_regimes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup: configure logging, register extra regimes from settings."""
    logging.basicConfig(level=settings.log_level)
    logger.info("Starting up...")

    if settings.extra_regimes_file:
        register_regimes(load_regimes(settings.extra_regimes_file))

    yield

    logger.info("Shutting down...")


async def invalid_argument_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map calculator argument errors to 400 responses."""
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse({"error": str(exc)}, status_code=400)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="VN Net Salary Calculator", lifespan=lifespan)
    app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)
    app.include_router(router)
    return app
