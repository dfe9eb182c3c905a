"""
FastAPI Application Setup

Main entry point for the SheetGuard API application.

Responsibility:
    - FastAPI app initialization
    - Router registration (files)
    - CORS middleware configuration
    - Global exception handlers
    - Request logging middleware
    - Health check endpoint

Architecture Notes:
    - Part of API Layer (Presentation)
    - Entry point for HTTP server (uvicorn)
    - Centralizes cross-cutting concerns (logging, CORS, error handling)
    - No business logic - pure HTTP orchestration
"""

import logging
import time
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

# Import routers
from src.api.routers import files

# Import shared schemas
from src.api.schemas.common import ErrorResponse

# Import domain exceptions for global handling
from src.domain.shared.exceptions import (
    DomainException,
    FileSizeExceededError,
    HeaderValidationError,
    InvalidFileExtensionError,
    MissingHeaderRowError,
    MissingRequiredHeadersError,
)

# Configure logger
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


# ============================================================================
# RESPONSE MODELS
# ============================================================================


class HealthCheckResponse(BaseModel):
    """
    Health check response model.

    Attributes:
        status: Health status (always "ok" if endpoint responds)
        version: API version
        timestamp: Unix timestamp of health check
    """

    status: str = "ok"
    version: str = API_VERSION
    timestamp: float


# ============================================================================
# MIDDLEWARE
# ============================================================================


async def request_logging_middleware(request: Request, call_next):
    """
    Request logging middleware.

    Logs all incoming requests with method, path, status code, and duration.

    Logging Format:
        INFO: "Incoming request: POST /api/files/validate-headers"
        INFO: "Request completed: POST /api/files/validate-headers - 200 - 0.123s"
    """
    logger.info(f"Incoming request: {request.method} {request.url.path}")

    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time

    logger.info(
        f"Request completed: {request.method} {request.url.path} - "
        f"{response.status_code} - {duration:.3f}s"
    )

    return response


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================


def _header_error_details(exc: HeaderValidationError) -> Dict[str, Any]:
    """Structured details for each header validation error kind."""
    details: Dict[str, Any] = {"exception_type": exc.__class__.__name__}

    if isinstance(exc, MissingRequiredHeadersError):
        details["missing_headers"] = exc.missing_headers
        details["found_headers"] = exc.found_headers
    elif isinstance(exc, MissingHeaderRowError):
        details["header_row_number"] = exc.header_row_number

    return details


async def header_validation_exception_handler(
    request: Request, exc: HeaderValidationError
):
    """
    Global exception handler for header validation failures.

    Every kind maps to 422 Unprocessable Entity: the upload was accepted but
    its content does not satisfy the request. The error code is the kind tag.

    Mapping:
        - WorkbookDecodeError -> DECODE_FAILURE
        - MissingSheetError -> MISSING_SHEET
        - MissingHeaderRowError -> MISSING_HEADER_ROW (+ header_row_number)
        - MissingRequiredHeadersError -> MISSING_REQUIRED_HEADERS
          (+ missing_headers, found_headers)

    Examples:
        >>> raise MissingRequiredHeadersError(["Phone"], ["ID", "Name"])
        >>> # Returns: 422 {"code": "MISSING_REQUIRED_HEADERS", "message": "...",
        >>> #               "details": {"missing_headers": ["Phone"], ...}}
    """
    error_response = ErrorResponse(
        code=exc.kind.value,
        message=str(exc),
        details=_header_error_details(exc),
    )

    logger.warning(
        f"Header validation failed: {exc.kind.value} - {exc.message} - "
        f"Request: {request.method} {request.url.path}"
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_response.model_dump(),
    )


async def domain_exception_handler(request: Request, exc: DomainException):
    """
    Global exception handler for remaining domain layer exceptions.

    Mapping:
        - FileSizeExceededError -> 413 Payload Too Large
        - InvalidFileExtensionError -> 400 Bad Request
        - Other DomainException -> 400 Bad Request
    """
    details: Dict[str, Any] = {"exception_type": exc.__class__.__name__}

    if isinstance(exc, FileSizeExceededError):
        status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
        error_code = "FILE_TOO_LARGE"
        details["max_size_bytes"] = exc.max_size_bytes
    elif isinstance(exc, InvalidFileExtensionError):
        status_code = status.HTTP_400_BAD_REQUEST
        error_code = "INVALID_FILE_EXTENSION"
        details["filename"] = exc.filename
        details["allowed_extensions"] = exc.allowed_extensions
    else:
        status_code = status.HTTP_400_BAD_REQUEST
        error_code = exc.__class__.__name__.replace("Error", "").upper()

    error_response = ErrorResponse(
        code=error_code,
        message=str(exc),
        details=details,
    )

    logger.warning(
        f"Domain exception: {exc.__class__.__name__} - {str(exc)} - "
        f"Request: {request.method} {request.url.path}"
    )

    return JSONResponse(
        status_code=status_code,
        content=error_response.model_dump(),
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unexpected exceptions.

    Catches all unhandled exceptions and converts to 500 Internal Server Error.
    Logs full stack trace for debugging.
    """
    error_response = ErrorResponse(
        code="INTERNAL_SERVER_ERROR",
        message="An unexpected error occurred",
        details={"error": str(exc), "type": exc.__class__.__name__},
    )

    logger.error(
        f"Unexpected error: {exc.__class__.__name__} - {str(exc)} - "
        f"Request: {request.method} {request.url.path}",
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response.model_dump(),
    )


# ============================================================================
# APP FACTORY
# ============================================================================


def create_app() -> FastAPI:
    """
    FastAPI application factory.

    Creates and configures FastAPI app with all middleware, routers,
    and exception handlers.

    Returns:
        Configured FastAPI application instance

    Usage:
        >>> app = create_app()
        >>> # Run with uvicorn:
        >>> # uvicorn src.api.main:app --reload
    """
    app = FastAPI(
        title="SheetGuard API",
        version=API_VERSION,
        description=(
            "Checks that uploaded Excel files carry the columns downstream "
            "processing depends on and reports where each one is."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Add CORS middleware (allow all origins for development)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add request logging middleware
    app.middleware("http")(request_logging_middleware)

    # Register global exception handlers (most specific class wins)
    app.add_exception_handler(
        HeaderValidationError, header_validation_exception_handler
    )
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Register routers with /api prefix
    app.include_router(files.router, prefix="/api")

    @app.get(
        "/health",
        response_model=HealthCheckResponse,
        status_code=status.HTTP_200_OK,
        summary="Health check endpoint",
        tags=["health"],
    )
    async def health_check() -> HealthCheckResponse:
        """Health check endpoint."""
        return HealthCheckResponse(
            status="ok",
            version=API_VERSION,
            timestamp=time.time(),
        )

    logger.info("FastAPI application created successfully")
    logger.info("Registered routers: /api/files")

    return app


# ============================================================================
# APP INSTANCE (for uvicorn)
# ============================================================================

# Usage: uvicorn src.api.main:app --reload
app = create_app()
