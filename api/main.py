"""
FastAPI application entry point.

This is the main entry point for the user-info service.
"""

import argparse
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from api.middleware import setup_exception_handlers
from api.routers import (
    alerts_router,
    bags_router,
    health_router,
    preferences_router,
    searches_router,
    sessions_router,
)
from core.config import get_settings
from database import close_database, init_database

# Configure logging
_settings = get_settings()
logging.basicConfig(
    level=_settings.log_level.upper(),
    format=_settings.log_format,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()

    # ============ Startup ============
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    # Initialize PostgreSQL Database
    if settings.is_database_configured:
        try:
            await init_database()
            logger.info("Database initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize database: {e}")
            raise
    else:
        logger.warning("Database not configured, resource endpoints will fail")

    logger.info("Application startup complete")

    yield

    # ============ Shutdown ============
    logger.info("Shutting down application...")

    # Close Database
    await close_database()

    logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Per-user preferences, sessions, saved searches, bags and global alerts",
        version=settings.app_version,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
        lifespan=lifespan,
    )

    # ============ Middleware ============

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # ============ Exception Handlers ============
    setup_exception_handlers(app)

    # ============ Routers ============
    # Paths carry no prefix; existing clients call them as-is.

    app.include_router(health_router)
    app.include_router(preferences_router)
    app.include_router(sessions_router)
    app.include_router(searches_router)
    app.include_router(bags_router)
    app.include_router(alerts_router)

    # ============ Root Endpoint ============

    @app.get("/", tags=["root"], response_class=PlainTextResponse)
    async def root() -> str:
        """Greeting, used as a trivial liveness probe."""
        return "Hello from user-info.\n"

    return app


# Create application instance
app = create_app()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="user-info", description=app.description)
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help="Port number to listen on (default: %(default)s)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {settings.app_version}",
    )
    return parser.parse_args(argv)


def run(argv: list[str] | None = None):
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    args = parse_args(argv)

    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=args.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
