"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from fitai.api.routes import router
from fitai.app_logging import configure_logging
from fitai.containers import AppContainer
from fitai.domain.profiles import InvalidProfile


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(router)

    @app.exception_handler(InvalidProfile)
    async def invalid_profile_handler(
        request: Request, exc: InvalidProfile
    ) -> JSONResponse:
        logger.info("Invalid profile on %s: %s", request.url.path, exc.fields)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc), "fields": exc.fields},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
