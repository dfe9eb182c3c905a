"""
Header Validator Port

Protocol the Application Layer depends on for workbook header validation.
WorkbookHeaderValidator (Infrastructure Layer) implements it.
"""

from typing import Protocol, Sequence


class HeaderValidatorProtocol(Protocol):
    """
    Validates the header row of the first worksheet in an encoded workbook.

    Implementations raise HeaderValidationError subclasses on failure.
    """

    def validate_xlsx_headers(
        self,
        buffer: bytes,
        required_headers: Sequence[str],
        header_row_number: int = 1,
    ) -> dict[str, int]:
        """Return required name -> 1-based column position."""
        ...
