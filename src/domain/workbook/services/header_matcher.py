"""
HeaderMatcher Domain Service

Reconciles the cells of a worksheet header row against the column names a
caller depends on. This is the decision-making core of header validation;
reading the row out of a workbook is left to the Infrastructure Layer.

Responsibility:
    - Build a name -> column index from header cells (last occurrence wins)
    - Track distinct header texts in column order for diagnostics
    - Pick the required names out of the index
    - Fail with MissingHeaderRowError / MissingRequiredHeadersError

Architecture Notes:
    - Domain Service (stateless, pure)
    - No spreadsheet library imports: works on HeaderCell value objects
    - Used by WorkbookHeaderValidator (Infrastructure Layer)
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from src.domain.shared.exceptions import (
    MissingHeaderRowError,
    MissingRequiredHeadersError,
)
from src.domain.workbook.value_objects.header_cell import HeaderCell

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeaderIndex:
    """
    Result of scanning one header row.

    Attributes:
        positions: Header text -> 1-based column. When a text repeats, the
            rightmost column is kept.
        found_headers: Distinct header texts in the column order in which
            they first appear.
    """

    positions: dict[str, int] = field(default_factory=dict)
    found_headers: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when the row had no non-empty cells."""
        return not self.positions


class HeaderMatcher:
    """
    Domain service mapping required column names to header positions.

    The matcher holds no state and can be shared between threads and calls.

    Process Flow:
        1. build_index(): scan cells in column order into a HeaderIndex
        2. match(): copy required names from the index, collect the missing
        3. resolve(): both steps plus the empty-row and missing-name checks

    Examples:
        >>> matcher = HeaderMatcher()
        >>> cells = [HeaderCell(1, "ID"), HeaderCell(2, "Name"), HeaderCell(4, "Email")]
        >>> matcher.resolve(cells, ["Name", "Email"], header_row_number=1)
        {'Name': 2, 'Email': 4}

        >>> matcher.resolve(cells[:2], ["Name", "Phone"], header_row_number=1)
        Traceback (most recent call last):
        ...
        MissingRequiredHeadersError: Missing required headers: Phone. Found headers: ID, Name
    """

    def build_index(self, header_cells: Iterable[HeaderCell]) -> HeaderIndex:
        """
        Build the name -> position index for one header row.

        Cells are sorted by column before scanning, so the last-write-wins
        rule always resolves to the rightmost occurrence regardless of the
        order the caller produced them in.

        Args:
            header_cells: Non-empty header cells of one row

        Returns:
            HeaderIndex with positions and distinct found headers
        """
        positions: dict[str, int] = {}
        found_headers: list[str] = []

        for cell in sorted(header_cells, key=lambda c: c.column):
            if cell.text not in positions:
                found_headers.append(cell.text)
            # Duplicate header text: later column overwrites earlier one
            positions[cell.text] = cell.column

        return HeaderIndex(positions=positions, found_headers=found_headers)

    def match(
        self, index: HeaderIndex, required_headers: Sequence[str]
    ) -> tuple[dict[str, int], list[str]]:
        """
        Split required names into matched positions and missing names.

        Matching is exact and case-sensitive. Repeated required names are
        allowed and simply resolve to the same position.

        Args:
            index: HeaderIndex built from the header row
            required_headers: Names the caller depends on, in caller order

        Returns:
            Tuple (header_positions, missing_headers)
            - header_positions: Required name -> 1-based column (required names only)
            - missing_headers: Required names not in the row, in caller order
        """
        header_positions: dict[str, int] = {}
        missing_headers: list[str] = []

        for required_header in required_headers:
            if required_header in index.positions:
                header_positions[required_header] = index.positions[required_header]
            else:
                missing_headers.append(required_header)

        return header_positions, missing_headers

    def resolve(
        self,
        header_cells: Iterable[HeaderCell],
        required_headers: Sequence[str],
        header_row_number: int,
    ) -> dict[str, int]:
        """
        Validate a header row and return positions of the required names.

        Args:
            header_cells: Non-empty header cells of the row
            required_headers: Names the caller depends on
            header_row_number: 1-based row number (used in error messages)

        Returns:
            Required name -> 1-based column. Empty dict when nothing is required.

        Raises:
            MissingHeaderRowError: If the row has no non-empty cells
            MissingRequiredHeadersError: If any required name is absent
        """
        index = self.build_index(header_cells)

        if index.is_empty:
            raise MissingHeaderRowError(header_row_number=header_row_number)

        logger.debug(
            f"Header row {header_row_number}: found {len(index.found_headers)} headers"
        )

        header_positions, missing_headers = self.match(index, required_headers)

        if missing_headers:
            raise MissingRequiredHeadersError(
                missing_headers=missing_headers,
                found_headers=index.found_headers,
            )

        return header_positions
