"""
Tests for HeaderMatcher domain service.

Covers index construction (last-write-wins, found order), reconciliation
against required names, and the failure diagnostics.
"""

import pytest

from src.domain.shared.exceptions import (
    HeaderValidationErrorKind,
    MissingHeaderRowError,
    MissingRequiredHeadersError,
)
from src.domain.workbook.services.header_matcher import HeaderIndex, HeaderMatcher
from src.domain.workbook.value_objects.header_cell import HeaderCell


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def matcher():
    """Fixture for HeaderMatcher instance."""
    return HeaderMatcher()


def cells_from_row(values):
    """Build HeaderCells the way the worksheet reader does (1-based, skip empty)."""
    cells = []
    for column, value in enumerate(values, start=1):
        cell = HeaderCell.from_value(column, value)
        if cell is not None:
            cells.append(cell)
    return cells


# ============================================================================
# TESTS - build_index()
# ============================================================================


def test_build_index_records_positions(matcher):
    """Test that build_index() maps text to 1-based column."""
    index = matcher.build_index(cells_from_row(["ID", "Name", "", "Email"]))

    assert index.positions == {"ID": 1, "Name": 2, "Email": 4}
    assert index.found_headers == ["ID", "Name", "Email"]
    assert not index.is_empty


def test_build_index_last_occurrence_wins(matcher):
    """Test duplicate header names resolve to the rightmost column."""
    index = matcher.build_index(
        cells_from_row(["ID", "Name", "City", "Zip", "Name"])
    )

    assert index.positions["Name"] == 5
    # Found headers stay distinct, in column order of first appearance
    assert index.found_headers == ["ID", "Name", "City", "Zip"]


def test_build_index_sorts_cells_by_column(matcher):
    """Test that unordered input still resolves duplicates by column."""
    cells = [HeaderCell(5, "Name"), HeaderCell(1, "ID"), HeaderCell(2, "Name")]

    index = matcher.build_index(cells)

    assert index.positions == {"ID": 1, "Name": 5}
    assert index.found_headers == ["ID", "Name"]


def test_build_index_empty(matcher):
    """Test that no cells produce an empty index."""
    index = matcher.build_index([])
    assert index == HeaderIndex()
    assert index.is_empty


# ============================================================================
# TESTS - match()
# ============================================================================


def test_match_splits_found_and_missing(matcher):
    """Test match() returns positions for found names and lists the rest."""
    index = matcher.build_index(cells_from_row(["ID", "Name"]))

    positions, missing = matcher.match(index, ["Phone", "Name", "Fax"])

    assert positions == {"Name": 2}
    assert missing == ["Phone", "Fax"]


def test_match_is_case_sensitive(matcher):
    """Test that header names must match exactly."""
    index = matcher.build_index(cells_from_row(["Email"]))

    positions, missing = matcher.match(index, ["email", "EMAIL"])

    assert positions == {}
    assert missing == ["email", "EMAIL"]


def test_match_duplicate_required_names(matcher):
    """Test repeated required names resolve to the same position."""
    index = matcher.build_index(cells_from_row(["ID", "Name"]))

    positions, missing = matcher.match(index, ["Name", "Name"])

    assert positions == {"Name": 2}
    assert missing == []


# ============================================================================
# TESTS - resolve()
# ============================================================================


def test_resolve_returns_only_required_headers(matcher):
    """Test scenario: row [ID, Name, "", Email], required [Name, Email]."""
    cells = cells_from_row(["ID", "Name", "", "Email"])

    result = matcher.resolve(cells, ["Name", "Email"], header_row_number=1)

    assert result == {"Name": 2, "Email": 4}
    assert "ID" not in result


def test_resolve_preserves_required_order(matcher):
    """Test that result keys follow the required list order."""
    cells = cells_from_row(["A", "B", "C"])

    result = matcher.resolve(cells, ["C", "A"], header_row_number=1)

    assert list(result) == ["C", "A"]


def test_resolve_empty_required_returns_empty_map(matcher):
    """Test that no required headers trivially succeeds."""
    result = matcher.resolve(cells_from_row(["ID"]), [], header_row_number=1)
    assert result == {}


def test_resolve_missing_headers_error(matcher):
    """Test scenario: row [ID, Name], required [Name, Phone]."""
    cells = cells_from_row(["ID", "Name"])

    with pytest.raises(MissingRequiredHeadersError) as exc_info:
        matcher.resolve(cells, ["Name", "Phone"], header_row_number=1)

    error = exc_info.value
    assert error.kind is HeaderValidationErrorKind.MISSING_REQUIRED_HEADERS
    assert error.missing_headers == ["Phone"]
    assert error.found_headers == ["ID", "Name"]
    assert "Missing required headers: Phone. Found headers: ID, Name" in str(error)


def test_resolve_missing_headers_keep_required_order(matcher):
    """Test that missing names are reported in the order they were required."""
    cells = cells_from_row(["ID"])

    with pytest.raises(MissingRequiredHeadersError) as exc_info:
        matcher.resolve(cells, ["Zip", "City", "ID", "Address"], header_row_number=1)

    assert exc_info.value.missing_headers == ["Zip", "City", "Address"]


def test_resolve_empty_row_raises_missing_header_row(matcher):
    """Test that a row without non-empty cells is rejected."""
    with pytest.raises(MissingHeaderRowError) as exc_info:
        matcher.resolve(cells_from_row(["  ", "", None]), [], header_row_number=4)

    assert exc_info.value.header_row_number == 4
    assert "header row at line 4" in str(exc_info.value)


def test_resolve_is_idempotent(matcher):
    """Test identical inputs yield identical outputs."""
    cells = cells_from_row(["ID", "Name", "Email", "Name"])
    required = ["Email", "Name"]

    first = matcher.resolve(cells, required, header_row_number=1)
    second = matcher.resolve(cells, required, header_row_number=1)

    assert first == second == {"Email": 3, "Name": 4}
