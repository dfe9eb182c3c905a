"""
Infrastructure Layer - External Dependencies

Implements technical capabilities that support the Domain Layer.
Handles all external dependencies (spreadsheet decoding with openpyxl).

Architecture:
    - Implements Application Layer protocols (HeaderValidatorProtocol)
    - Depends on external libraries (openpyxl)
    - No Domain business logic (only technical implementations)

Modules:
    - file_storage: Excel workbook operations (openpyxl)

Usage:
    >>> from src.infrastructure import WorkbookHeaderValidator
    >>> from src.infrastructure.file_storage import validate_xlsx_headers
"""

# File Storage
from .file_storage import (
    WorkbookHeaderValidator,
    validate_worksheet_headers,
    validate_xlsx_headers,
)

__all__ = [
    # File Storage
    "WorkbookHeaderValidator",
    "validate_xlsx_headers",
    "validate_worksheet_headers",
]
