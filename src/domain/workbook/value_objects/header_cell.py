"""
HeaderCell Value Object

Represents one non-empty cell of a worksheet header row: its trimmed text
and its 1-based column position.

Responsibility:
    - Normalize raw cell values to comparable header text
    - Reject empty and whitespace-only cells
    - Keep the 1-based column position used by the spreadsheet library

Architecture Notes:
    - Value Object (immutable, defined by values)
    - Part of Workbook subdomain
    - No external dependencies (raw values come from Infrastructure Layer)
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class HeaderCell:
    """
    Immutable header cell (text + 1-based column).

    Column positions follow spreadsheet addressing: column A is 1.
    Position 0 is never produced, so a HeaderCell.column can be passed
    straight back to `worksheet.cell(row=..., column=...)`.

    Attributes:
        column: 1-based column position within the header row
        text: Cell text with leading/trailing whitespace removed (never empty)

    Examples:
        >>> HeaderCell.from_value(2, "  Name ")
        HeaderCell(column=2, text='Name')
        >>> HeaderCell.from_value(3, "   ") is None
        True
    """

    column: int
    text: str

    def __post_init__(self) -> None:
        """Validate column position and text."""
        if self.column < 1:
            raise ValueError(f"Column position must be >= 1, got {self.column}")
        if not self.text or self.text != self.text.strip():
            raise ValueError(
                f"Header text must be non-empty and trimmed, got {self.text!r}"
            )

    @classmethod
    def from_value(cls, column: int, value: Any) -> Optional["HeaderCell"]:
        """
        Build a HeaderCell from a raw cell value.

        Text is the plain string form of the value; numbers and dates are
        not reformatted.

        Args:
            column: 1-based column position
            value: Raw cell value (str, number, date, None, ...)

        Returns:
            HeaderCell, or None when the cell is empty after trimming
        """
        if value is None:
            return None

        text = str(value).strip()
        if not text:
            return None

        return cls(column=column, text=text)
