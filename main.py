"""
Menufy FastAPI Application
Main entry point: configuration, middleware, exception handlers and routers
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio

from api.routes import restaurants, categories, items, menu, carts, health

from domain.models import engine, init_database

from app.config import settings

from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    service_validation_exception_handler,
    unauthorized_exception_handler,
    forbidden_exception_handler,
    not_found_exception_handler,
    conflict_exception_handler,
    general_exception_handler,
)
from app.exceptions import (
    ServiceValidationError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    ConflictError,
)

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("menufy.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Creates backend tables with retries; a backend that never comes up is not
    fatal because every request can still be served from local storage.
    """
    _logger.info(f"Starting Menufy in {settings.environment.value} mode")

    if not settings.backend_configured():
        _logger.info("No hosted backend configured; all data goes to local storage")
    else:
        for attempt in range(1, settings.db_init_attempts + 1):
            try:
                # Run blocking init in a thread to avoid blocking the event loop
                await anyio.to_thread.run_sync(init_database)
                _logger.info("Database initialization succeeded")
                break
            except Exception as exc:
                _logger.warning(
                    "Database init attempt %d/%d failed: %s",
                    attempt,
                    settings.db_init_attempts,
                    exc,
                )
                if attempt < settings.db_init_attempts:
                    await anyio.sleep(settings.db_init_delay_sec)
                else:
                    _logger.error(
                        "Database initialization failed after %d attempts; "
                        "requests will fall back to local storage",
                        attempt,
                    )

    try:
        yield
    finally:
        _logger.info("Shutting down Menufy")
        if engine is not None:
            engine.dispose()
            _logger.info("Database engine disposed")


# Create FastAPI application with enhanced configuration
app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=(
        f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
    ),
    docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
    redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

# Register exception handlers
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(ServiceValidationError, service_validation_exception_handler)
app.add_exception_handler(UnauthorizedError, unauthorized_exception_handler)
app.add_exception_handler(ForbiddenError, forbidden_exception_handler)
app.add_exception_handler(NotFoundError, not_found_exception_handler)
app.add_exception_handler(ConflictError, conflict_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(restaurants.router, prefix=settings.api_prefix)
app.include_router(categories.router, prefix=settings.api_prefix)
app.include_router(items.router, prefix=settings.api_prefix)
app.include_router(menu.router, prefix=settings.api_prefix)
app.include_router(carts.router, prefix=settings.api_prefix)
app.include_router(health.router, prefix=settings.api_prefix)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
