"""
Workbook Subdomain Module

Core business logic for checking that spreadsheet header rows carry the
columns a caller depends on.

Exports:
    Value Objects:
        - HeaderCell: Non-empty header cell with its 1-based column

    Services:
        - HeaderMatcher: Header row reconciliation
        - HeaderIndex: Scan result of one header row

Usage:
    >>> from src.domain.workbook import HeaderCell, HeaderMatcher
    >>> HeaderMatcher().resolve([HeaderCell(1, "ID")], ["ID"], header_row_number=1)
    {'ID': 1}
"""

from .value_objects import HeaderCell
from .services import HeaderIndex, HeaderMatcher

from . import validation_config

__all__ = [
    "HeaderCell",
    "HeaderMatcher",
    "HeaderIndex",
    "validation_config",
]
