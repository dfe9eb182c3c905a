"""
Workbook Value Objects.

Available Value Objects:
    - HeaderCell: Non-empty header cell text with its 1-based column
"""

from src.domain.workbook.value_objects.header_cell import HeaderCell

__all__ = [
    "HeaderCell",
]
