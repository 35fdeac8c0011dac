"""
Main FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, settings as default_settings
from app.database.database import build_engine, get_db_health, init_db
from app.database.store import TodoStore
from app.routers import auth, todos
from app.services.errors import StorageError, ValidationError


API_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def configure_logging(app_settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=getattr(logging, app_settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API application.

    The database engine is created when the application starts, handed to
    a TodoStore kept on ``app.state`` and disposed on shutdown.
    """
    app_settings = app_settings or default_settings
    configure_logging(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan context manager.
        Owns the store's engine for the lifetime of the process.
        """
        logger.info(f"Starting {app_settings.app_name}...")

        engine = build_engine(
            app_settings.database_connection_url,
            echo=app_settings.log_level.upper() == "DEBUG",
        )
        try:
            init_db(engine)
        except Exception as e:
            logger.error(f"Failed to initialize database: {e}")
            engine.dispose()
            raise

        app.state.store = TodoStore(engine)
        logger.info(f"{app_settings.app_name} startup complete")

        try:
            yield
        finally:
            logger.info(f"Shutting down {app_settings.app_name}...")
            engine.dispose()

    app = FastAPI(
        title=app_settings.app_name,
        description="A minimal multi-user task board API",
        version=API_VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        """Rejected input is a 400 with a short message."""
        return JSONResponse(status_code=400, content={"message": exc.message})

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        """Storage failures are a 500; the cause was already logged."""
        return JSONResponse(status_code=500, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Malformed bodies and path parameters are a 400."""
        logger.debug(f"Request validation failed: {exc.errors()}")
        return JSONResponse(status_code=400, content={"message": "Invalid request"})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Global HTTP exception handler."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled exceptions."""
        logger.exception(f"Unhandled exception: {exc!r}", exc_info=exc)
        return JSONResponse(
            status_code=500, content={"message": "Internal server error"}
        )

    # Include routers
    app.include_router(auth.router, prefix="/api")
    app.include_router(todos.router, prefix="/api")

    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint."""
        return {
            "message": f"Welcome to {app_settings.app_name}",
            "version": API_VERSION,
            "docs": "/docs",
            "health": "/healthz",
        }

    @app.get("/healthz", tags=["health"])
    def healthz(request: Request):
        """Health check including database connectivity."""
        database_ok = get_db_health(request.app.state.store.engine)
        return {
            "status": "ok" if database_ok else "degraded",
            "service": "task-board-api",
            "database": database_ok,
        }

    return app


app = create_app()
