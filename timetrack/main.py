"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
from typing import Dict, Any

from timetrack.config import settings
from timetrack.infrastructure.db.database import init_db
from timetrack.infrastructure.events.event_setup import initialize_event_system
from timetrack.infrastructure.web.middleware.error_handler import (
    ErrorHandlerMiddleware,
    register_exception_handlers,
)
from timetrack.infrastructure.web.routers import timer, time_logs, timesheets

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    Setup and teardown operations.
    """
    # Startup
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}")

    init_db()
    logger.info("Database tables ready")

    # Initialize event system for notifications
    try:
        initialize_event_system()
        logger.info("Event system initialized")
    except Exception as e:
        logger.error(f"Failed to initialize event system: {str(e)}")

    yield

    # Shutdown
    logger.info("Shutting down application")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=f"{settings.api_prefix}/docs" if settings.debug else None,
        redoc_url=f"{settings.api_prefix}/redoc" if settings.debug else None,
        openapi_url=f"{settings.api_prefix}/openapi.json" if settings.debug else None,
        lifespan=lifespan
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Add custom error handler middleware
    app.add_middleware(ErrorHandlerMiddleware)
    register_exception_handlers(app)

    # Include routers
    app.include_router(
        timer.router,
        prefix=f"{settings.api_prefix}/timer",
        tags=["Timer"]
    )
    app.include_router(
        time_logs.router,
        prefix=f"{settings.api_prefix}/timelogs",
        tags=["Time Logs"]
    )
    app.include_router(
        timesheets.router,
        prefix=f"{settings.api_prefix}/timesheets",
        tags=["Timesheets"]
    )

    # Root endpoint
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

    # Health check endpoint
    @app.get(f"{settings.api_prefix}/health")
    async def health_check() -> Dict[str, Any]:
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "environment": settings.environment,
            "version": settings.api_version
        }

    # Custom 404 handler
    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc):
        """Unknown paths and routes raising a plain 404."""
        return JSONResponse(
            status_code=404,
            content={
                "error": "NOT_FOUND",
                "message": getattr(exc, "detail", None) or f"The path {request.url.path} was not found",
                "status_code": 404,
                "path": request.url.path
            }
        )

    return app


# Create the FastAPI app instance
app = create_application()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "timetrack.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )
