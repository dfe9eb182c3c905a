"""
File Storage Infrastructure Module

Excel workbook processing with openpyxl.

Exports:
    - WorkbookHeaderValidator: Validate worksheet header rows
    - validate_xlsx_headers: Validate headers of the first worksheet in .xlsx bytes
    - validate_worksheet_headers: Validate headers of a loaded worksheet
"""

from .workbook_header_validator import (
    WorkbookHeaderValidator,
    validate_worksheet_headers,
    validate_xlsx_headers,
)

__all__ = [
    "WorkbookHeaderValidator",
    "validate_xlsx_headers",
    "validate_worksheet_headers",
]
