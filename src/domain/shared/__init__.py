"""
Shared Domain Module

Shared domain concepts used across all subdomains.
Contains the domain exception hierarchy.

This module exports:
    - DomainException: Base exception for all domain errors
    - HeaderValidationError and its tagged subclasses
    - Upload guard errors (file size, file extension)
"""

from .exceptions import (
    DomainException,
    FileSizeExceededError,
    HeaderValidationError,
    HeaderValidationErrorKind,
    InvalidFileExtensionError,
    MissingHeaderRowError,
    MissingRequiredHeadersError,
    MissingSheetError,
    WorkbookDecodeError,
)

__all__ = [
    "DomainException",
    "HeaderValidationError",
    "HeaderValidationErrorKind",
    "WorkbookDecodeError",
    "MissingSheetError",
    "MissingHeaderRowError",
    "MissingRequiredHeadersError",
    "FileSizeExceededError",
    "InvalidFileExtensionError",
]
