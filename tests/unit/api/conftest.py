"""
Common fixtures for API unit tests.

Provides shared test utilities:
- FastAPI TestClient
- Mock HeaderValidationUseCase
- Excel upload helpers
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from src.api.main import app
from src.application.models import HeaderValidationResult

XLSX_CONTENT_TYPE = (
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
)


@pytest.fixture
def client():
    """
    FastAPI TestClient for testing endpoints.

    Returns TestClient configured with the FastAPI app.
    """
    return TestClient(app)


@pytest.fixture
def lenient_client():
    """
    TestClient that returns 500 responses instead of re-raising.

    Needed to observe the generic exception handler output.
    """
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def xlsx_upload():
    """
    Build the `files=` argument for a multipart Excel upload.

    Examples:
        >>> client.post(url, files=xlsx_upload(content, "contacts.xlsx"))
    """

    def _make(content: bytes, filename: str = "contacts.xlsx", content_type=None):
        return {"file": (filename, content, content_type or XLSX_CONTENT_TYPE)}

    return _make


@pytest.fixture
def mock_header_validation_use_case():
    """Mock for HeaderValidationUseCase returning a successful result."""
    mock = MagicMock()
    mock.execute = AsyncMock(
        return_value=HeaderValidationResult(
            filename="contacts.xlsx",
            header_row_number=1,
            header_positions={"Name": 2, "Email": 4},
        )
    )
    return mock
