"""
Pytest Configuration and Shared Fixtures

This module contains pytest configuration and shared fixtures used across
all test suites (unit, e2e).

Fixtures:
    - make_worksheet: Build an in-memory openpyxl worksheet from row lists
    - make_xlsx_bytes: Build .xlsx file content from row lists
    - contacts_xlsx_bytes: Ready-made contacts workbook
    - test_client: FastAPI TestClient for API testing

Architecture Notes:
    - Workbooks are generated in memory with openpyxl (no binary fixtures)
    - TestClient doesn't require running server

Usage:
    def test_something(make_worksheet):
        worksheet = make_worksheet([["ID", "Name"], [1, "Jane"]])
"""

import logging
from io import BytesIO
from typing import Any, Callable, Generator, Optional, Sequence

import pytest
from fastapi.testclient import TestClient
from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from src.api.main import create_app

# Configure logger for tests
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


Rows = Sequence[Sequence[Any]]


def _build_workbook(rows: Rows, sheet_title: str = "Sheet1") -> Workbook:
    """Create a workbook whose first worksheet holds `rows` (row 1 first)."""
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = sheet_title
    for row in rows:
        worksheet.append(list(row))
    return workbook


# ============================================================================
# WORKBOOK FIXTURES
# ============================================================================


@pytest.fixture
def make_worksheet() -> Callable[..., Worksheet]:
    """
    Factory building an in-memory worksheet.

    Examples:
        >>> def test_x(make_worksheet):
        ...     ws = make_worksheet([["ID", "Name", "", "Email"]])
        ...     assert ws.max_row == 1
    """

    def _make(rows: Rows, sheet_title: str = "Sheet1") -> Worksheet:
        return _build_workbook(rows, sheet_title).active

    return _make


@pytest.fixture
def make_xlsx_bytes() -> Callable[..., bytes]:
    """
    Factory building .xlsx file content.

    Args (of returned callable):
        rows: Rows of the first worksheet
        extra_sheets: Optional {title: rows} appended after the first worksheet
    """

    def _make(
        rows: Rows,
        extra_sheets: Optional[dict[str, Rows]] = None,
    ) -> bytes:
        workbook = _build_workbook(rows)
        for title, sheet_rows in (extra_sheets or {}).items():
            worksheet = workbook.create_sheet(title=title)
            for row in sheet_rows:
                worksheet.append(list(row))

        buffer = BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()

    return _make


@pytest.fixture
def contacts_xlsx_bytes(make_xlsx_bytes) -> bytes:
    """
    Contacts workbook.

    Structure:
    - Row 1: ID | Name | (empty) | Email
    - Rows 2-3: data
    """
    return make_xlsx_bytes(
        [
            ["ID", "Name", None, "Email"],
            [1, "Jane Doe", None, "jane@example.com"],
            [2, "John Roe", None, "john@example.com"],
        ]
    )


# ============================================================================
# API FIXTURES
# ============================================================================


@pytest.fixture(scope="session")
def test_client() -> Generator[TestClient, None, None]:
    """
    Provide FastAPI TestClient for API tests.

    Scope: session (one app instance for all tests)
    """
    app = create_app()
    with TestClient(app) as client:
        yield client
