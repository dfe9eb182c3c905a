"""
Common API Schemas

Shared Pydantic models used across all API routers.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standard error response model for all API errors.

    Provides consistent error structure across all endpoints.

    Attributes:
        code: Machine-readable error code (e.g., "MISSING_REQUIRED_HEADERS", "FILE_TOO_LARGE")
        message: Human-readable error message
        details: Optional additional error details (missing/found headers, debug info)
    """

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(
        default=None, description="Additional error context"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "code": "MISSING_REQUIRED_HEADERS",
                "message": (
                    "MissingRequiredHeadersError: Missing required headers: Phone. "
                    "Found headers: ID, Name"
                ),
                "details": {
                    "missing_headers": ["Phone"],
                    "found_headers": ["ID", "Name"],
                },
            }
        }
    }
