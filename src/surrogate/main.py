"""FastAPI application that serves one subject over HTTP."""

from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from surrogate.api.routers import calls_router
from surrogate.api.schemas import ErrorResponse
from surrogate.config.logging_config import setup_logging
from surrogate.config.settings import Settings, get_settings
from surrogate.core.exceptions import AppError

ERROR_STATUS_CODES = {
    "ACCESS_DENIED": 403,
    "UNSUPPORTED_OPERATION": 404,
    "RESOURCE_CLOSED": 409,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    yield


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors raised by the subject."""
    operation = getattr(exc, "operation", None) or request.path_params.get("operation")
    error = ErrorResponse(error=exc.code, message=exc.message, operation=operation)
    return JSONResponse(
        status_code=ERROR_STATUS_CODES.get(exc.code, 400),
        content=error.model_dump(),
    )


def create_app(subject: Any, settings: Optional[Settings] = None) -> FastAPI:
    """Build an app whose /calls endpoints dispatch to `subject`."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Remote access to a single subject",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.subject = subject
    app.include_router(calls_router)
    app.add_exception_handler(AppError, app_error_handler)

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
