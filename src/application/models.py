"""
Shared Application Models

Responsibility:
    Contains shared DTOs used across Application Layer.
    Prevents circular dependencies and code duplication.

Architecture Notes:
    - Part of Application Layer (Shared)
    - Used by Services and API Layer

Contains:
    - HeaderValidationResult: Outcome of a successful header validation

Does NOT contain:
    - Business logic (belongs to Domain Layer)
    - HTTP models (belongs to API Layer)
    - Infrastructure details (belongs to Infrastructure Layer)
"""

from openpyxl.utils import get_column_letter
from pydantic import BaseModel, Field


class HeaderValidationResult(BaseModel):
    """
    Result of validating the header row of an uploaded workbook.

    Returned by HeaderValidationUseCase.execute() and used by API Layer
    to construct HTTP response.

    Attributes:
        filename: Original filename from user
        header_row_number: 1-based row that was validated
        header_positions: Required name -> 1-based column position

    Examples:
        >>> result = HeaderValidationResult(
        ...     filename="contacts.xlsx",
        ...     header_row_number=1,
        ...     header_positions={"Name": 2, "Email": 4},
        ... )
        >>> result.column_letters()
        {'Name': 'B', 'Email': 'D'}
    """

    filename: str = Field(description="Original filename from user")

    header_row_number: int = Field(description="Validated header row (1-based)")

    header_positions: dict[str, int] = Field(
        default_factory=dict,
        description="Required header name -> 1-based column position",
    )

    def column_letters(self) -> dict[str, str]:
        """Spreadsheet column letter of every matched header."""
        return {
            name: get_column_letter(position)
            for name, position in self.header_positions.items()
        }
