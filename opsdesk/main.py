"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
import logging
from typing import Dict, Any, Optional

from opsdesk.config import Settings, get_settings
from opsdesk.application.dto.base_dto import ErrorResponseDTO, HealthCheckResponseDTO
from opsdesk.domain.models.base import DomainException
from opsdesk.infrastructure.supabase_client import create_supabase_client
from opsdesk.infrastructure.web.middleware.error_handler import (
    ErrorHandlerMiddleware,
    domain_exception_handler,
)
from opsdesk.infrastructure.web.routers import clients, credentials, ledger, dashboard

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    404: {"model": ErrorResponseDTO},
    422: {"model": ErrorResponseDTO},
    502: {"model": ErrorResponseDTO},
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    Creates the shared Supabase client unless one was installed already.
    """
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}")

    if getattr(app.state, "supabase", None) is None:
        app.state.supabase = await create_supabase_client(settings)

    yield

    logger.info("Shutting down application")


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=f"{settings.api_prefix}/docs" if settings.debug else None,
        redoc_url=f"{settings.api_prefix}/redoc" if settings.debug else None,
        openapi_url=f"{settings.api_prefix}/openapi.json" if settings.debug else None,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.supabase = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.is_production:
        app.add_middleware(
            TrustedHostMiddleware,
            allowed_hosts=["*"]
        )

    # Domain errors carry their own status; anything else becomes a 500
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_middleware(ErrorHandlerMiddleware)

    app.include_router(
        clients.router,
        prefix=f"{settings.api_prefix}/clients",
        tags=["Clients"],
        responses=ERROR_RESPONSES
    )
    app.include_router(
        credentials.router,
        prefix=f"{settings.api_prefix}/credentials",
        tags=["Credentials"],
        responses=ERROR_RESPONSES
    )
    app.include_router(
        ledger.incomes_router,
        prefix=f"{settings.api_prefix}/incomes",
        tags=["Incomes"],
        responses=ERROR_RESPONSES
    )
    app.include_router(
        ledger.expenses_router,
        prefix=f"{settings.api_prefix}/expenses",
        tags=["Expenses"],
        responses=ERROR_RESPONSES
    )
    app.include_router(
        dashboard.renewals_router,
        prefix=f"{settings.api_prefix}/renewals",
        tags=["Renewals"],
        responses=ERROR_RESPONSES
    )
    app.include_router(
        dashboard.dashboard_router,
        prefix=f"{settings.api_prefix}/dashboard",
        tags=["Dashboard"],
        responses=ERROR_RESPONSES
    )

    @app.get("/")
    async def root() -> Dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "environment": settings.environment,
            "docs": f"{settings.api_prefix}/docs" if settings.debug else None,
            "health": f"{settings.api_prefix}/health"
        }

    @app.get(f"{settings.api_prefix}/health", response_model=HealthCheckResponseDTO)
    async def health_check() -> HealthCheckResponseDTO:
        """Health check endpoint for monitoring."""
        return HealthCheckResponseDTO(
            status="healthy",
            environment=settings.environment,
            version=settings.api_version
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc):
        """Custom 404 error handler."""
        return JSONResponse(
            status_code=404,
            content={
                "error": "Not Found",
                "message": f"The path {request.url.path} was not found",
                "path": request.url.path
            }
        )

    return app


app = create_application()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "opsdesk.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )
