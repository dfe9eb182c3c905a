"""
Domain Layer Exceptions

This module defines the exception hierarchy for the Domain Layer.
All domain-specific exceptions inherit from DomainException.

Responsibility:
    - Base exception class for domain errors
    - Tagged header validation errors (one class per failure kind)
    - Upload guard errors used by the Application Layer

Architecture Notes:
    - Part of Shared Domain (used across all subdomains)
    - Header validation errors carry a `kind` tag so callers can branch on
      the failure type instead of inspecting message text
"""

from enum import Enum
from typing import Sequence


class DomainException(Exception):
    """
    Base exception for all domain layer errors.

    This exception serves as the root of the domain exception hierarchy.
    All domain-specific exceptions inherit from this class to enable
    type-safe error handling in Application and API layers.

    Usage:
        - Catch this in Application Layer to handle all domain errors
        - API Layer converts to appropriate HTTP status codes

    Examples:
        >>> raise DomainException("Business rule violation")
    """

    def __init__(self, message: str) -> None:
        """
        Initialize domain exception with error message.

        Args:
            message: Human-readable error description
        """
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.__class__.__name__}: {self.message}"

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"{self.__class__.__name__}(message={self.message!r})"


# ============================================================================
# HEADER VALIDATION ERRORS
# ============================================================================


class HeaderValidationErrorKind(str, Enum):
    """
    Tag identifying which header validation step failed.

    Values double as machine-readable error codes in API responses.
    """

    DECODE_FAILURE = "DECODE_FAILURE"
    MISSING_SHEET = "MISSING_SHEET"
    MISSING_HEADER_ROW = "MISSING_HEADER_ROW"
    MISSING_REQUIRED_HEADERS = "MISSING_REQUIRED_HEADERS"


class HeaderValidationError(DomainException):
    """
    Base class for every failure produced while validating workbook headers.

    Subclasses set `kind`. The workbook adapter re-raises instances of this
    class untouched and wraps anything else in WorkbookDecodeError, so an
    error never gets wrapped twice on its way to the caller.

    Examples:
        >>> try:
        ...     validate_xlsx_headers(buffer, ["ID", "Email"])
        ... except HeaderValidationError as e:
        ...     if e.kind is HeaderValidationErrorKind.MISSING_REQUIRED_HEADERS:
        ...         print(e.missing_headers)
    """

    kind: HeaderValidationErrorKind


class WorkbookDecodeError(HeaderValidationError):
    """
    Raised when a byte buffer cannot be decoded into a workbook.

    This exception is raised when:
    - Buffer is not a zip/xlsx container
    - openpyxl fails while reading workbook parts
    - Any other unexpected failure happens before header validation starts

    Attributes:
        original_error: Exception raised by the decoder (optional)

    Examples:
        >>> raise WorkbookDecodeError(
        ...     "Failed to validate XLSX file",
        ...     original_error=BadZipFile("File is not a zip file"),
        ... )
    """

    kind = HeaderValidationErrorKind.DECODE_FAILURE

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
    ) -> None:
        """
        Initialize workbook decode error.

        Args:
            message: Error description
            original_error: Original exception from openpyxl (optional)
        """
        self.original_error = original_error

        # Build detailed message with the decoder's own diagnostic
        if original_error is not None:
            detailed_message = (
                f"{message}: {type(original_error).__name__}: {original_error}"
            )
            super().__init__(detailed_message)
        else:
            super().__init__(message)


class MissingSheetError(HeaderValidationError):
    """
    Raised when a decoded workbook contains no worksheets.

    Examples:
        >>> raise MissingSheetError("XLSX file must contain at least one worksheet")
    """

    kind = HeaderValidationErrorKind.MISSING_SHEET


class MissingHeaderRowError(HeaderValidationError):
    """
    Raised when the requested header row is absent or blank.

    This exception is raised when:
    - Row number is beyond the last row of the worksheet
    - Row number does not address any row (0 or negative)
    - Row exists but every cell is empty or whitespace

    Attributes:
        header_row_number: Requested 1-based row number

    Examples:
        >>> raise MissingHeaderRowError(header_row_number=3)
    """

    kind = HeaderValidationErrorKind.MISSING_HEADER_ROW

    def __init__(self, header_row_number: int, message: str | None = None) -> None:
        """
        Initialize missing header row error.

        Args:
            header_row_number: Requested 1-based row number
            message: Error description (default built from row number)
        """
        self.header_row_number = header_row_number
        super().__init__(
            message
            or f"Worksheet must contain a header row at line {header_row_number}"
        )


class MissingRequiredHeadersError(HeaderValidationError):
    """
    Raised when one or more required column names are absent from the header row.

    Carries both lists so the caller can spot typos or schema drift without
    opening the file again.

    Attributes:
        missing_headers: Required names not found, in the order they were required
        found_headers: Distinct non-empty header texts, in column order

    Examples:
        >>> raise MissingRequiredHeadersError(
        ...     missing_headers=["Phone"],
        ...     found_headers=["ID", "Name"],
        ... )
        >>> # str(e) == "MissingRequiredHeadersError: Missing required headers: Phone. Found headers: ID, Name"
    """

    kind = HeaderValidationErrorKind.MISSING_REQUIRED_HEADERS

    def __init__(
        self,
        missing_headers: Sequence[str],
        found_headers: Sequence[str],
    ) -> None:
        """
        Initialize missing required headers error.

        Args:
            missing_headers: Required names not present in the header row
            found_headers: Header texts actually present in the header row
        """
        self.missing_headers = list(missing_headers)
        self.found_headers = list(found_headers)
        super().__init__(
            f"Missing required headers: {', '.join(self.missing_headers)}. "
            f"Found headers: {', '.join(self.found_headers)}"
        )


# ============================================================================
# UPLOAD GUARD ERRORS
# ============================================================================


class FileSizeExceededError(DomainException):
    """
    Raised when file size exceeds allowed limit.

    Used by:
    - HeaderValidationUseCase before decoding an uploaded buffer

    Attributes:
        file_size_bytes: Actual file size in bytes
        max_size_bytes: Maximum allowed size in bytes

    Examples:
        >>> raise FileSizeExceededError(
        ...     "File size 15MB exceeds maximum 10MB",
        ...     file_size_bytes=15 * 1024 * 1024,
        ...     max_size_bytes=10 * 1024 * 1024
        ... )
    """

    def __init__(
        self,
        message: str,
        file_size_bytes: int | None = None,
        max_size_bytes: int | None = None,
    ) -> None:
        """
        Initialize file size exceeded error.

        Args:
            message: Error description
            file_size_bytes: Actual file size in bytes (optional)
            max_size_bytes: Maximum allowed size in bytes (optional)
        """
        self.file_size_bytes = file_size_bytes
        self.max_size_bytes = max_size_bytes

        # Build detailed message with human-readable sizes
        if file_size_bytes and max_size_bytes:
            file_mb = file_size_bytes / (1024 * 1024)
            max_mb = max_size_bytes / (1024 * 1024)
            detailed_message = (
                f"{message} "
                f"(File: {file_mb:.2f}MB, Max: {max_mb:.2f}MB)"
            )
            super().__init__(detailed_message)
        else:
            super().__init__(message)


class InvalidFileExtensionError(DomainException):
    """
    Raised when an uploaded filename has an extension that cannot hold a workbook.

    Attributes:
        filename: Filename as sent by the client
        allowed_extensions: Extensions accepted by the service

    Examples:
        >>> raise InvalidFileExtensionError("notes.txt", [".xlsx", ".xlsm"])
    """

    def __init__(self, filename: str, allowed_extensions: Sequence[str]) -> None:
        """
        Initialize invalid file extension error.

        Args:
            filename: Rejected filename
            allowed_extensions: Accepted extensions (with leading dot)
        """
        self.filename = filename
        self.allowed_extensions = list(allowed_extensions)
        super().__init__(
            f"Unsupported file extension for '{filename}'. "
            f"Allowed: {', '.join(self.allowed_extensions)}"
        )
