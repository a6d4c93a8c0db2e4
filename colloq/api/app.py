"""FastAPI application configuration module."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Internal imports
from ..config.environment import IS_PRODUCTION_ENVIRONMENT # Environment must be imported first
from ..config.auth import AuthConfig
from ..config.cors import CORS_CONFIG
from ..utils.logging_config import setup_logging
from ..db import Database, DatabaseError, db
from ..errors import ColloqError, CollaboratorError
from .. import __version__
from .routes import (
    accounts,
    events,
    registrations,
    health
)

# Set up logging
setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    try:
        app.state.auth_config.validate()
        app.state.database.ensure_tables_exist()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Startup failed: {e}")
        raise
    yield
    # Shutdown
    app.state.database.dispose()

async def handle_app_error(request: Request, exc: ColloqError) -> JSONResponse:
    """Render an application error as a single user-facing message."""
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

async def handle_database_error(request: Request, exc: DatabaseError) -> JSONResponse:
    """Surface a storage failure with the backend's own message."""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return await handle_app_error(request, CollaboratorError(str(exc)))

def create_application(
    database: Optional[Database] = None,
    auth_config: Optional[AuthConfig] = None
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database: Storage to use, defaults to the global database
        auth_config: Session settings, defaults to values from the environment
    """
    app = FastAPI(
        title="Colloq Events API",
        description="API for creating, browsing and registering for events",
        version=__version__,
        docs_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/docs',
        redoc_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/redoc',
        lifespan=lifespan
    )
    app.state.database = database or db
    app.state.auth_config = auth_config or AuthConfig()

    # Configure CORS
    app.add_middleware(CORSMiddleware, **CORS_CONFIG)

    # Render errors as {"message": ...}
    app.add_exception_handler(ColloqError, handle_app_error)
    app.add_exception_handler(DatabaseError, handle_database_error)

    # Include health check router without prefix
    app.include_router(health.router)

    # Include routers with prefix
    app.include_router(accounts.router, prefix="/api")
    app.include_router(events.router, prefix="/api")
    app.include_router(registrations.router, prefix="/api")

    return app

# Create the application instance
app = create_application()
