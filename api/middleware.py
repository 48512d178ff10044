"""
Consolidated middleware for the Menufy API
"""

import time
import logging
from datetime import datetime
from uuid import uuid4

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServiceValidationError,
    UnauthorizedError,
)
from core.utils.helpers import make_serializable

logger = logging.getLogger("menufy.middleware")


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        # Generate unique request ID
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            "Request started %s %s",
            request.method,
            request.url.path,
            extra={
                "request_id": request_id,
                "client": request.client.host if request.client else None,
            },
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "Request completed %s %s -> %d in %.4fs",
                request.method,
                request.url.path,
                response.status_code,
                process_time,
                extra={"request_id": request_id},
            )

            # Add custom headers
            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"

            return response

        except Exception as exc:
            process_time = time.time() - start_time
            logger.error(
                "Request failed %s %s after %.4fs: %s",
                request.method,
                request.url.path,
                process_time,
                exc,
                extra={"request_id": request_id},
                exc_info=True,
            )
            raise


# ============================================================================
# Error Handlers
# ============================================================================


def _error_body(message, code: str, details=None) -> dict:
    body = {
        "success": False,
        "error": message,
        "code": code,
        "timestamp": datetime.utcnow().isoformat(),
    }
    if details is not None:
        body["details"] = details
    return body


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")

    # Convert errors to JSON-serializable format (handles Decimal, etc.)
    serializable_errors = make_serializable(jsonable_encoder(exc.errors()))

    return JSONResponse(
        status_code=422,
        content=_error_body(
            "Request validation failed", "VALIDATION_ERROR", serializable_errors
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.detail, f"HTTP_{exc.status_code}"),
    )


async def service_validation_exception_handler(
    request: Request, exc: ServiceValidationError
):
    """Handle service validation errors"""
    logger.warning(f"Service validation error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(str(exc), exc.code or "SERVICE_VALIDATION_ERROR", exc.details),
    )


async def unauthorized_exception_handler(request: Request, exc: UnauthorizedError):
    """Handle missing or invalid credentials"""
    logger.warning(f"Unauthorized request on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=_error_body(str(exc), exc.code or "UNAUTHORIZED"),
        headers={"WWW-Authenticate": "Bearer"},
    )


async def forbidden_exception_handler(request: Request, exc: ForbiddenError):
    """Handle writes to restaurants the caller does not own"""
    logger.warning(f"Forbidden request on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content=_error_body(str(exc), exc.code or "FORBIDDEN"),
    )


async def not_found_exception_handler(request: Request, exc: NotFoundError):
    """Handle not found errors"""
    logger.warning(f"Resource not found on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=_error_body(str(exc), exc.code or "NOT_FOUND"),
    )


async def conflict_exception_handler(request: Request, exc: ConflictError):
    """Handle duplicate slugs and similar conflicts"""
    logger.warning(f"Conflict on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=_error_body(str(exc), exc.code or "CONFLICT"),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("An unexpected error occurred", "INTERNAL_SERVER_ERROR"),
    )
