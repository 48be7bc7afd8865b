"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from nutritrack.api.assistant import router as assistant_router
from nutritrack.api.logs import router as logs_router
from nutritrack.api.profile import router as profile_router
from nutritrack.api.stats import router as stats_router
from nutritrack.app_logging import configure_logging
from nutritrack.containers import AppContainer
from nutritrack.services.classification import ClassificationError
from nutritrack.services.export import ExportError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Starting in %s environment", container.settings.environment)
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="NutriTrack", lifespan=lifespan)
    app.state.container = container

    app.include_router(profile_router)
    app.include_router(logs_router)
    app.include_router(stats_router)
    app.include_router(assistant_router)

    @app.exception_handler(RequestValidationError)
    async def invalid_request(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Rejected inputs may be NaN or Infinity, which JSON cannot carry.
        errors = [
            {key: value for key, value in error.items() if key != "input"}
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=422, content={"detail": jsonable_encoder(errors)}
        )

    @app.exception_handler(ValueError)
    async def invalid_input(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.exception_handler(ClassificationError)
    @app.exception_handler(ExportError)
    async def upstream_failure(request: Request, exc: RuntimeError) -> JSONResponse:
        logger.warning("Upstream failure on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
