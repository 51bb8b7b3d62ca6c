"""
FastAPI application entry point for Device Hub.

This is the backend for:
- Device registration and management
- Telemetry ingestion and threshold alerts
- Per-device activity logs
- System status and the HTML dashboard
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .application.state import HubState
from .config import AppSettings, get_settings

logger = logging.getLogger(__name__)


def configure_logging(settings: AppSettings) -> None:
    """Configure the root logger from settings."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the failure envelope."""
    return JSONResponse(
        status_code=status_code,
        content={'success': False, 'error': message},
    )


def create_app(
    settings: Optional[AppSettings] = None,
    state: Optional[HubState] = None,
) -> FastAPI:
    """
    Application factory.

    Creates and configures the FastAPI application together with the hub
    state it serves. Pass ``state`` to share or pre-seed it (tests do).
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        configure_logging(settings)
        logger.info(f"Starting {settings.app_name} v{settings.app_version}")
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"Dashboard: http://{settings.host}:{settings.port}/dashboard")
        logger.info(f"API Base URL: http://{settings.host}:{settings.port}{settings.api_prefix}")

        yield

        logger.info("Shutting down application...")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Device registry, telemetry ingestion and alerting API",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.hub = state or HubState(settings.hub)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allowed_methods,
        allow_headers=settings.cors.allowed_headers,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"{request.method} {request.url.path}")
        return await call_next(request)

    # Register exception handlers
    register_exception_handlers(app, settings)

    # Register routes
    register_routes(app, settings)

    return app


def register_exception_handlers(app: FastAPI, settings: AppSettings) -> None:
    """Register global exception handlers."""

    from .domain.exceptions import DomainException, EntityNotFoundException

    @app.exception_handler(EntityNotFoundException)
    async def not_found_handler(request: Request, exc: EntityNotFoundException):
        return error_response(status.HTTP_404_NOT_FOUND, exc.message)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException):
        return error_response(status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError):
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        return error_response(status.HTTP_400_BAD_REQUEST, f"Invalid request: {problems}")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return error_response(exc.status_code, "Endpoint not found")
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")

        if settings.debug:
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                f"{type(exc).__name__}: {exc}",
            )

        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An internal error occurred",
        )


def register_routes(app: FastAPI, settings: AppSettings) -> None:
    """Register API routes."""

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Check application health."""
        return {
            'status': 'healthy',
            'version': settings.app_version,
            'environment': settings.environment,
        }

    from .api.views import dashboard_router
    app.include_router(dashboard_router)

    # Mount API under /api prefix
    from fastapi import APIRouter
    from .api.v1 import api_router

    main_router = APIRouter(prefix=settings.api_prefix)
    main_router.include_router(api_router)

    app.include_router(main_router)


# Create application instance
app = create_app()


def run() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "device_hub.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    run()
