"""
API Router for Workbook Header Validation

Responsibility:
    HTTP interface for checking that an uploaded Excel file carries the
    columns a client depends on.
    Thin layer that delegates to Application Layer use case via dependency injection.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Depends on Application Layer (HeaderValidationUseCase)
    - No business logic - pure HTTP concerns
    - Validation failures are converted to ErrorResponse by the global
      exception handlers registered in src/api/main.py

Contains:
    - POST /files/validate-headers - Validate header row of uploaded workbook
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from pydantic import BaseModel, Field

from src.api.schemas.common import ErrorResponse
from src.application.commands.validate_headers import ValidateHeadersCommand
from src.application.services.header_validation_use_case import (
    HeaderValidationUseCase,
)
from src.domain.workbook.validation_config import DEFAULT_HEADER_ROW_NUMBER
from src.infrastructure.file_storage.workbook_header_validator import (
    WorkbookHeaderValidator,
)

# Configure logger
logger = logging.getLogger(__name__)


# ============================================================================
# RESPONSE MODELS
# ============================================================================


class ValidateHeadersResponse(BaseModel):
    """
    Response model for a successful header validation.

    Attributes:
        filename: Original filename from user
        header_row_number: Row that was validated (1-based)
        header_positions: Required header -> 1-based column position
        column_letters: Required header -> spreadsheet column letter
        message: Human-readable success message
    """

    filename: str = Field(description="Original filename from user")

    header_row_number: int = Field(description="Validated header row (1-based)")

    header_positions: dict[str, int] = Field(
        default_factory=dict,
        description="Required header name -> 1-based column position",
    )

    column_letters: dict[str, str] = Field(
        default_factory=dict,
        description="Required header name -> column letter (A, B, ..., AA)",
    )

    message: str = Field(
        default="All required headers found.",
        description="Human-readable success message",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "filename": "contacts.xlsx",
                "header_row_number": 1,
                "header_positions": {"Name": 2, "Email": 4},
                "column_letters": {"Name": "B", "Email": "D"},
                "message": "All required headers found.",
            }
        }
    }


# ============================================================================
# ROUTER CONFIGURATION
# ============================================================================


router = APIRouter(
    prefix="/files",
    tags=["files"],
    responses={
        400: {
            "model": ErrorResponse,
            "description": "Bad Request - Invalid file extension",
        },
        413: {
            "model": ErrorResponse,
            "description": "Payload Too Large - File size exceeds limit",
        },
        422: {
            "model": ErrorResponse,
            "description": (
                "Unprocessable Entity - File cannot be decoded, has no worksheet, "
                "no header row, or lacks required headers"
            ),
        },
        500: {"model": ErrorResponse, "description": "Internal Server Error"},
    },
)


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================


async def get_header_validation_use_case() -> HeaderValidationUseCase:
    """
    Dependency injection for HeaderValidationUseCase.

    Returns:
        HeaderValidationUseCase wired with WorkbookHeaderValidator and
        upload limits read from the environment
    """
    return HeaderValidationUseCase(header_validator=WorkbookHeaderValidator())


# ============================================================================
# ENDPOINTS
# ============================================================================


@router.post(
    "/validate-headers",
    status_code=status.HTTP_200_OK,
    response_model=ValidateHeadersResponse,
    summary="Validate header row of an Excel file",
    description=(
        "Upload an Excel file (.xlsx) together with the column names you depend on. "
        "Returns the 1-based column position of each required header in the "
        "first worksheet, or 422 listing missing and found headers."
    ),
)
async def validate_headers(
    file: UploadFile = File(..., description="Excel file to validate (.xlsx)"),
    required_headers: Optional[list[str]] = Form(
        default=None,
        description="Required header name (repeat the field for several names)",
    ),
    header_row_number: int = Form(
        default=DEFAULT_HEADER_ROW_NUMBER,
        description="Row containing the headers (1-based)",
    ),
    use_case: HeaderValidationUseCase = Depends(get_header_validation_use_case),
) -> ValidateHeadersResponse:
    """
    Validate the header row of an uploaded workbook.

    Process Flow:
        1. Read uploaded file into memory
        2. Build ValidateHeadersCommand from form fields
        3. Delegate to HeaderValidationUseCase
        4. Return positions and column letters

    Examples:
        >>> curl -X POST "http://localhost:8000/api/files/validate-headers" \\
        ...      -F "file=@contacts.xlsx" \\
        ...      -F "required_headers=Name" \\
        ...      -F "required_headers=Email"
        {
            "filename": "contacts.xlsx",
            "header_row_number": 1,
            "header_positions": {"Name": 2, "Email": 4},
            "column_letters": {"Name": "B", "Email": "D"},
            "message": "All required headers found."
        }
    """
    file_data = await file.read()
    filename = file.filename or ""

    command = ValidateHeadersCommand(
        required_headers=required_headers or [],
        header_row_number=header_row_number,
    )

    result = await use_case.execute(
        file_data=file_data,
        filename=filename,
        command=command,
    )

    return ValidateHeadersResponse(
        filename=result.filename,
        header_row_number=result.header_row_number,
        header_positions=result.header_positions,
        column_letters=result.column_letters(),
    )
