"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from adages.config import Settings
from adages.interface.api.response import ApiResponse
from adages.interface.api.routes import health, users
from adages.util.di.container import create_container, setup_di
from adages.util.observability import instrument_fastapi


def _error_response(status_code: int, error: str, message: str | None = None):
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse.fail(error, message).model_dump(mode="json"),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors in the response envelope."""
    return _error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Render request validation errors in the response envelope."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return _error_response(422, "Invalid request", details)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use (built from settings when omitted)
    """
    settings = Settings()

    app_instance = FastAPI(
        title="American Adages Society API",
        description="Profile and contributor statistics for the American Adages Society community",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container(settings))

    app_instance.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app_instance.add_exception_handler(
        RequestValidationError, validation_exception_handler
    )

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)

    logfire.info(
        "Application created",
        environment=settings.environment,
        persistence=settings.persistence.backend,
    )
    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
