"""
Workbook Header Validator

Checks that an Excel workbook carries the columns a caller depends on, using
the openpyxl library to decode the workbook.

Responsibility:
    - Decode .xlsx bytes into an openpyxl Workbook
    - Select the first worksheet
    - Read one header row into HeaderCell value objects
    - Delegate reconciliation to HeaderMatcher (Domain Layer)
    - Wrap decoder failures in WorkbookDecodeError (never double-wrap)

Architecture Notes:
    - Infrastructure Layer (depends on openpyxl library)
    - Used by Application Layer (HeaderValidationUseCase)
    - validate_worksheet_headers() is usable on its own by callers that
      already hold a Worksheet
    - Returned positions are 1-based, compatible with worksheet.cell(row, column)
"""

import logging
from io import BytesIO
from typing import Sequence

from openpyxl import load_workbook
from openpyxl.utils import column_index_from_string
from openpyxl.worksheet.worksheet import Worksheet

from src.domain.shared.exceptions import (
    HeaderValidationError,
    MissingHeaderRowError,
    MissingSheetError,
    WorkbookDecodeError,
)
from src.domain.workbook.services.header_matcher import HeaderMatcher
from src.domain.workbook.validation_config import DEFAULT_HEADER_ROW_NUMBER
from src.domain.workbook.value_objects.header_cell import HeaderCell

logger = logging.getLogger(__name__)

# Last column of an Excel sheet (XFD = 16384)
SHEET_MAX_COLUMN = column_index_from_string("XFD")


class WorkbookHeaderValidator:
    """
    Service validating worksheet header rows with openpyxl.

    Usage Patterns:
    1. Raw upload: validate_xlsx_headers(buffer, required_headers)
    2. Worksheet already loaded: validate_worksheet_headers(worksheet, required_headers)

    Examples:
        >>> validator = WorkbookHeaderValidator()
        >>>
        >>> with open("contacts.xlsx", "rb") as f:
        ...     positions = validator.validate_xlsx_headers(
        ...         f.read(), required_headers=["Name", "Email"]
        ...     )
        >>> positions
        {'Name': 2, 'Email': 4}
        >>>
        >>> # Positions are valid openpyxl column indices
        >>> worksheet.cell(row=2, column=positions["Email"]).value
        'jane@example.com'
    """

    def __init__(self, header_matcher: HeaderMatcher | None = None) -> None:
        """
        Initialize workbook header validator.

        Args:
            header_matcher: Domain service doing the reconciliation
                (default: new HeaderMatcher)
        """
        self.header_matcher = header_matcher or HeaderMatcher()

    def validate_xlsx_headers(
        self,
        buffer: bytes,
        required_headers: Sequence[str],
        header_row_number: int = DEFAULT_HEADER_ROW_NUMBER,
    ) -> dict[str, int]:
        """
        Decode an .xlsx buffer and validate the header row of its first worksheet.

        Process Flow:
            1. Load workbook from bytes with openpyxl (cell values, not formulas)
            2. Select first worksheet (workbook order, not the active sheet)
            3. Delegate to validate_worksheet_headers()
            4. Close workbook

        Args:
            buffer: Raw .xlsx file content
            required_headers: Column names the caller depends on
            header_row_number: 1-based header row (default: 1)

        Returns:
            Required name -> 1-based column position

        Raises:
            WorkbookDecodeError: If buffer cannot be decoded, or any other
                unexpected failure happens before a validation error is produced
            MissingSheetError: If workbook has no worksheets
            MissingHeaderRowError: If header row is absent or blank
            MissingRequiredHeadersError: If any required name is absent
        """
        try:
            workbook = load_workbook(filename=BytesIO(buffer), data_only=True)
            try:
                if not workbook.worksheets:
                    raise MissingSheetError(
                        "XLSX file must contain at least one worksheet"
                    )

                worksheet = workbook.worksheets[0]

                return self.validate_worksheet_headers(
                    worksheet,
                    required_headers,
                    header_row_number,
                )
            finally:
                workbook.close()

        except HeaderValidationError:
            # Already classified - pass through untouched
            raise

        except Exception as e:
            raise WorkbookDecodeError(
                "Failed to validate XLSX file",
                original_error=e,
            ) from e

    def validate_worksheet_headers(
        self,
        worksheet: Worksheet,
        required_headers: Sequence[str],
        header_row_number: int = DEFAULT_HEADER_ROW_NUMBER,
    ) -> dict[str, int]:
        """
        Validate the header row of an already loaded worksheet.

        Args:
            worksheet: openpyxl Worksheet
            required_headers: Column names the caller depends on
                - Exact, case-sensitive match
                - May be empty (returns {} if the header row is valid)
                - May contain duplicates
            header_row_number: 1-based header row (default: 1)

        Returns:
            Required name -> 1-based column position (required names only)

        Raises:
            MissingHeaderRowError: If header row is absent or blank
            MissingRequiredHeadersError: If any required name is absent

        Examples:
            >>> validator = WorkbookHeaderValidator()
            >>> # Header row: ["ID", "Name", "", "Email"]
            >>> validator.validate_worksheet_headers(ws, ["Name", "Email"])
            {'Name': 2, 'Email': 4}
        """
        header_cells = self.read_header_cells(worksheet, header_row_number)

        header_positions = self.header_matcher.resolve(
            header_cells=header_cells,
            required_headers=required_headers,
            header_row_number=header_row_number,
        )

        logger.info(
            f"Validated header row {header_row_number} of worksheet "
            f"'{worksheet.title}': {len(header_positions)} required headers matched"
        )

        return header_positions

    def read_header_cells(
        self, worksheet: Worksheet, header_row_number: int
    ) -> list[HeaderCell]:
        """
        Read the non-empty cells of one row, in column order.

        Args:
            worksheet: openpyxl Worksheet
            header_row_number: 1-based row number

        Returns:
            List of HeaderCell (empty and whitespace-only cells skipped)

        Raises:
            MissingHeaderRowError: If row number does not address an existing row

        Row Addressing:
            - openpyxl rows are 1-based, like Excel
            - Row numbers below 1 do not address any row
            - In-memory worksheets: rows beyond worksheet.max_row do not exist
            - Read-only worksheets (load_workbook(..., read_only=True)): the
              stored <dimension> may be missing or stale, so max_row and
              max_column are not consulted. The row is streamed from the
              sheet XML and an absent row reads as empty.

        Side Effects:
            On an in-memory worksheet openpyxl's iter_rows() goes through
            worksheet.cell(), which registers empty Cell objects for gaps
            between max_column and the populated cells of the header row.
            Cell values and the worksheet dimension are left unchanged.
            Read-only worksheets are never modified.
        """
        if header_row_number < 1:
            raise MissingHeaderRowError(header_row_number=header_row_number)

        if getattr(worksheet.parent, "read_only", False):
            # Explicit column bound so a stale dimension cannot truncate the row
            rows = worksheet.iter_rows(
                min_row=header_row_number,
                max_row=header_row_number,
                max_col=SHEET_MAX_COLUMN,
                values_only=True,
            )
        else:
            # Bounds check first: iter_rows() would otherwise add cells to new rows
            if header_row_number > worksheet.max_row:
                raise MissingHeaderRowError(header_row_number=header_row_number)

            rows = worksheet.iter_rows(
                min_row=header_row_number,
                max_row=header_row_number,
                values_only=True,
            )

        # Absent rows yield nothing; HeaderMatcher reports them as missing
        row_values = next(rows, ())

        header_cells: list[HeaderCell] = []
        for column, value in enumerate(row_values, start=1):
            header_cell = HeaderCell.from_value(column, value)
            if header_cell is not None:
                header_cells.append(header_cell)

        return header_cells


# ============================================================================
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ============================================================================

# Stateless, safe to share between callers and threads
_default_validator = WorkbookHeaderValidator()


def validate_xlsx_headers(
    buffer: bytes,
    required_headers: Sequence[str],
    header_row_number: int = DEFAULT_HEADER_ROW_NUMBER,
) -> dict[str, int]:
    """Validate headers of the first worksheet in an .xlsx buffer."""
    return _default_validator.validate_xlsx_headers(
        buffer, required_headers, header_row_number
    )


def validate_worksheet_headers(
    worksheet: Worksheet,
    required_headers: Sequence[str],
    header_row_number: int = DEFAULT_HEADER_ROW_NUMBER,
) -> dict[str, int]:
    """Validate headers of an already loaded openpyxl worksheet."""
    return _default_validator.validate_worksheet_headers(
        worksheet, required_headers, header_row_number
    )
