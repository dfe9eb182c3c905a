"""
Domain Layer - Core Business Logic

Contains business rules, value objects, and domain services for header
validation. Framework-independent and highly testable.

Architecture:
    - Clean Architecture: Domain Layer is the center, no external dependencies
    - Dependency Inversion: Infrastructure feeds plain values into domain services

Subdomains:
    - workbook: Header row reconciliation
    - shared: Cross-subdomain concepts (exceptions)

Usage:
    >>> from src.domain import HeaderMatcher, MissingRequiredHeadersError
"""

# Workbook Subdomain
from .workbook import HeaderCell, HeaderIndex, HeaderMatcher

# Shared Domain
from .shared import (
    DomainException,
    HeaderValidationError,
    HeaderValidationErrorKind,
    MissingHeaderRowError,
    MissingRequiredHeadersError,
    MissingSheetError,
    WorkbookDecodeError,
)

__all__ = [
    # Workbook Subdomain
    "HeaderCell",
    "HeaderIndex",
    "HeaderMatcher",
    # Shared Domain
    "DomainException",
    "HeaderValidationError",
    "HeaderValidationErrorKind",
    "WorkbookDecodeError",
    "MissingSheetError",
    "MissingHeaderRowError",
    "MissingRequiredHeadersError",
]
