"""
Header Validation Use Case

Responsibility:
    Orchestrates header validation of an uploaded workbook: upload guards,
    decoding and header reconciliation.
    Coordinates between API Layer and Infrastructure Layer.

Architecture Notes:
    - Part of Application Layer (Services)
    - Uses HeaderValidatorProtocol (implemented by WorkbookHeaderValidator)
    - Called by API Layer (files.py router)
    - Returns HeaderValidationResult DTO

Does NOT contain:
    - HTTP concerns (belongs to API Layer)
    - Workbook decoding (delegated to Infrastructure Layer)
    - Header matching rules (delegated to Domain Layer)
"""

import asyncio
import logging

from src.application.commands.validate_headers import ValidateHeadersCommand
from src.application.models import HeaderValidationResult
from src.application.ports.header_validator import HeaderValidatorProtocol
from src.domain.shared.exceptions import (
    FileSizeExceededError,
    InvalidFileExtensionError,
)
from src.domain.workbook.validation_config import HeaderValidationLimits

logger = logging.getLogger(__name__)


class HeaderValidationUseCase:
    """
    Use case for validating the header row of an uploaded Excel file.

    Process Flow:
        User uploads file (multipart/form-data)
        → API Layer builds ValidateHeadersCommand
        → HeaderValidationUseCase.execute(file_data, filename, command)
        → Check extension and size against HeaderValidationLimits
        → HeaderValidator.validate_xlsx_headers() in a worker thread
        → Return HeaderValidationResult
        → API Layer converts to HTTP 200 response

    Attributes:
        header_validator: Header validator (injected)
        limits: Upload guards (injected, default from environment)

    Examples:
        >>> from src.infrastructure.file_storage import WorkbookHeaderValidator
        >>> use_case = HeaderValidationUseCase(
        ...     header_validator=WorkbookHeaderValidator()
        ... )
        >>> result = await use_case.execute(
        ...     file_data=file_data,
        ...     filename="contacts.xlsx",
        ...     command=ValidateHeadersCommand(required_headers=["Name", "Email"]),
        ... )
        >>> result.header_positions
        {'Name': 2, 'Email': 4}
    """

    def __init__(
        self,
        header_validator: HeaderValidatorProtocol,
        limits: HeaderValidationLimits | None = None,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            header_validator: Validator decoding and checking workbooks
            limits: Upload guards (default: HeaderValidationLimits.from_env())
        """
        self.header_validator = header_validator
        self.limits = limits or HeaderValidationLimits.from_env()

    async def execute(
        self,
        file_data: bytes,
        filename: str,
        command: ValidateHeadersCommand,
    ) -> HeaderValidationResult:
        """
        Validate the header row of an uploaded workbook.

        Args:
            file_data: Raw file content
            filename: Original filename (used for extension check and reporting)
            command: Required headers and header row number

        Returns:
            HeaderValidationResult with positions of all required headers

        Raises:
            InvalidFileExtensionError: If filename extension is not allowed
            FileSizeExceededError: If file_data exceeds limits.max_size_bytes
            HeaderValidationError: Any validation failure from the validator
                (WorkbookDecodeError, MissingSheetError, MissingHeaderRowError,
                MissingRequiredHeadersError)
        """
        # Step 1: Upload guards
        self._validate_upload(file_data, filename)

        required_headers = command.normalized_required_headers()

        # Step 2: Decode + validate off the event loop (openpyxl is blocking)
        header_positions = await asyncio.to_thread(
            self.header_validator.validate_xlsx_headers,
            file_data,
            required_headers,
            command.header_row_number,
        )

        logger.info(
            f"Header validation passed for '{filename}': "
            f"{len(header_positions)}/{len(required_headers)} headers located "
            f"in row {command.header_row_number}"
        )

        # Step 3: Build result DTO
        return HeaderValidationResult(
            filename=filename,
            header_row_number=command.header_row_number,
            header_positions=header_positions,
        )

    def _validate_upload(self, file_data: bytes, filename: str) -> None:
        """
        Apply extension and size guards before any decoding.

        Raises:
            InvalidFileExtensionError: If extension is not allowed
            FileSizeExceededError: If file is too large
        """
        if not self.limits.is_allowed_filename(filename):
            raise InvalidFileExtensionError(
                filename=filename,
                allowed_extensions=self.limits.allowed_extensions,
            )

        file_size_bytes = len(file_data)
        if file_size_bytes > self.limits.max_size_bytes:
            raise FileSizeExceededError(
                message="Excel file exceeds maximum allowed size",
                file_size_bytes=file_size_bytes,
                max_size_bytes=self.limits.max_size_bytes,
            )
