"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from diet_planner.api.wizard import router as wizard_router
from diet_planner.app_logging import configure_logging
from diet_planner.containers import AppContainer
from diet_planner.domain.errors import (
    MealNotFoundError,
    PlannerError,
    SessionNotFoundError,
    WizardStepError,
)

_INVALID_INPUT_STATUS = 422

_STATUS_BY_ERROR: tuple[tuple[type[PlannerError], int], ...] = (
    (SessionNotFoundError, status.HTTP_404_NOT_FOUND),
    (MealNotFoundError, status.HTTP_404_NOT_FOUND),
    (WizardStepError, status.HTTP_409_CONFLICT),
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.debug)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(wizard_router)

    @app.exception_handler(PlannerError)
    async def planner_error_handler(
        request: Request, exc: PlannerError
    ) -> JSONResponse:
        status_code = _status_for(exc)
        logger.info(
            "Rejected %s %s: %s", request.method, request.url.path, exc
        )
        return JSONResponse(
            status_code=status_code,
            content={"error": type(exc).__name__, "detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _status_for(exc: PlannerError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return _INVALID_INPUT_STATUS
