"""
ValidateHeadersCommand - Header validation request

Encapsulates what a caller wants checked in an uploaded workbook: the column
names it depends on and the row holding them.

Architecture Notes:
    - Part of Application Layer (orchestration)
    - Built by API Layer from form fields, consumed by HeaderValidationUseCase
    - Immutable data structure (Command pattern)
"""

from pydantic import BaseModel, Field

from src.domain.workbook.validation_config import DEFAULT_HEADER_ROW_NUMBER


class ValidateHeadersCommand(BaseModel):
    """
    Command to validate the header row of an uploaded workbook.

    Attributes:
        required_headers: Column names the caller depends on (exact, case-sensitive)
        header_row_number: 1-based row holding the column names

    Validation:
        - No bounds on header_row_number: a row that does not exist is
          reported by the validator as MissingHeaderRowError
        - Duplicate required names are accepted

    Examples:
        >>> command = ValidateHeadersCommand(
        ...     required_headers=["Name", "Email"],
        ...     header_row_number=1,
        ... )
        >>> command.normalized_required_headers()
        ['Name', 'Email']
    """

    required_headers: list[str] = Field(
        default_factory=list,
        description="Column names that must be present in the header row",
    )
    header_row_number: int = Field(
        default=DEFAULT_HEADER_ROW_NUMBER,
        description="Row containing the headers (Excel notation, 1-based)",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "required_headers": ["ID", "Name", "Email"],
                    "header_row_number": 1,
                }
            ]
        },
    }

    def normalized_required_headers(self) -> list[str]:
        """
        Required names with surrounding whitespace removed and blanks dropped.

        Form inputs often carry stray spaces or empty entries. Header cells
        are trimmed before matching, so an untrimmed required name could
        never match anything.

        Returns:
            Cleaned list, caller order preserved
        """
        cleaned: list[str] = []
        for header in self.required_headers:
            header = header.strip()
            if header:
                cleaned.append(header)
        return cleaned
