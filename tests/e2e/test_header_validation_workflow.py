"""
End-to-End Tests for Header Validation Workflow

Tests the complete workflow with real .xlsx files written to disk:
1. Build workbook with openpyxl and save to a temp directory
2. Upload it to /api/files/validate-headers
3. Use returned positions to read data rows from the same file

Run:
    $ pytest tests/e2e/ -v

Architecture Notes:
    - Uses FastAPI TestClient (no need for running server)
    - No external services required
    - Tests integration of all layers: API → Application → Domain → Infrastructure
"""

import logging
from pathlib import Path

import openpyxl
import pytest

# ============================================================================
# TEST CONFIGURATION
# ============================================================================

URL = "/api/files/validate-headers"
XLSX_CONTENT_TYPE = (
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
)

# Configure logger
logger = logging.getLogger(__name__)


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================


def write_workbook(path: Path, sheets: dict) -> Path:
    """
    Save workbook with given sheets (insertion order = workbook order).

    Args:
        path: Target .xlsx path
        sheets: {sheet title: list of rows}

    Returns:
        Path to saved file
    """
    workbook = openpyxl.Workbook()
    workbook.remove(workbook.active)
    for title, rows in sheets.items():
        worksheet = workbook.create_sheet(title=title)
        for row in rows:
            worksheet.append(row)
    workbook.save(path)
    return path


def validate_file(test_client, file_path: Path, required_headers, header_row_number=1):
    """
    Upload Excel file to the header validation endpoint.

    Returns:
        httpx Response
    """
    with open(file_path, "rb") as f:
        response = test_client.post(
            URL,
            files={"file": (file_path.name, f, XLSX_CONTENT_TYPE)},
            data={
                "required_headers": list(required_headers),
                "header_row_number": str(header_row_number),
            },
        )

    logger.info(f"Validated {file_path.name}: {response.status_code}")
    return response


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def orders_file(tmp_path) -> Path:
    """
    Orders workbook with a title block above the header row.

    Structure (sheet "Orders"):
    - Row 1: report title
    - Row 2: empty
    - Row 3: Order | Customer | (empty) | Amount | Customer
    - Rows 4-5: data
    Second sheet "Notes" has unrelated headers.
    """
    return write_workbook(
        tmp_path / "orders.xlsx",
        {
            "Orders": [
                ["Quarterly orders"],
                [],
                ["Order", "Customer", None, "Amount", "Customer"],
                ["A-1", "old", None, 120.5, "ACME"],
                ["A-2", "old", None, 99.0, "Globex"],
            ],
            "Notes": [["Phone", "Comment"]],
        },
    )


# ============================================================================
# TESTS
# ============================================================================


def test_positions_read_data_rows(test_client, orders_file):
    """
    Happy path: positions from the API address the right data cells.

    Duplicate "Customer" resolves to the rightmost column (5).
    """
    response = validate_file(
        test_client, orders_file, ["Customer", "Amount"], header_row_number=3
    )

    assert response.status_code == 200, response.text
    data = response.json()
    assert data["header_positions"] == {"Customer": 5, "Amount": 4}
    assert data["column_letters"] == {"Customer": "E", "Amount": "D"}

    worksheet = openpyxl.load_workbook(orders_file).worksheets[0]
    customers = [
        worksheet.cell(row=row, column=data["header_positions"]["Customer"]).value
        for row in (4, 5)
    ]
    assert customers == ["ACME", "Globex"]


def test_second_sheet_is_ignored(test_client, orders_file):
    """Headers of the second worksheet are not considered."""
    response = validate_file(
        test_client, orders_file, ["Phone"], header_row_number=3
    )

    assert response.status_code == 422
    details = response.json()["details"]
    assert details["missing_headers"] == ["Phone"]
    assert details["found_headers"] == ["Order", "Customer", "Amount"]


def test_blank_row_as_header_row(test_client, orders_file):
    """Row 2 exists but is empty: reported as missing header row."""
    response = validate_file(test_client, orders_file, [], header_row_number=2)

    assert response.status_code == 422
    assert response.json()["code"] == "MISSING_HEADER_ROW"


def test_same_request_same_answer(test_client, orders_file):
    """Repeated validation of the same file gives identical responses."""
    first = validate_file(test_client, orders_file, ["Order"], header_row_number=3)
    second = validate_file(test_client, orders_file, ["Order"], header_row_number=3)

    assert first.status_code == second.status_code == 200
    assert first.json() == second.json()


def test_renamed_file_with_wrong_extension(test_client, tmp_path):
    """Valid workbook uploaded with a non-Excel name is rejected before decoding."""
    source = write_workbook(tmp_path / "contacts.xlsx", {"Sheet1": [["ID"]]})
    renamed = source.rename(tmp_path / "contacts.txt")

    response = validate_file(test_client, renamed, ["ID"])

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_FILE_EXTENSION"
