"""
Header Validation Configuration

Configuration constants for workbook header validation and for the upload
guards applied before a buffer is decoded.

Design Principles:
    - Configuration as code (not database)
    - Type-safe constants
    - Environment overrides for deployment-specific limits
"""

import os
from dataclasses import dataclass
from typing import Final


# ============================================================================
# HEADER ROW
# ============================================================================

# Header row used when the caller does not pass one (1-based, like Excel)
DEFAULT_HEADER_ROW_NUMBER: Final[int] = 1


# ============================================================================
# UPLOAD LIMITS
# ============================================================================

# Maximum accepted workbook size
MAX_FILE_SIZE_MB: Final[int] = 10

# Extensions openpyxl can load (legacy .xls is not supported by openpyxl)
ALLOWED_EXTENSIONS: Final[tuple[str, ...]] = (".xlsx", ".xlsm")


@dataclass(frozen=True)
class HeaderValidationLimits:
    """
    Upload guards applied by HeaderValidationUseCase.

    Attributes:
        max_size_bytes: Largest buffer accepted for decoding
        allowed_extensions: Lowercase filename extensions, with leading dot

    Usage:
        limits = HeaderValidationLimits.from_env()
        use_case = HeaderValidationUseCase(validator, limits=limits)
    """

    max_size_bytes: int = MAX_FILE_SIZE_MB * 1024 * 1024
    allowed_extensions: tuple[str, ...] = ALLOWED_EXTENSIONS

    def __post_init__(self) -> None:
        """Validate limits and store extensions lowercase."""
        object.__setattr__(
            self,
            "allowed_extensions",
            tuple(extension.lower() for extension in self.allowed_extensions),
        )

        if self.max_size_bytes <= 0:
            raise ValueError(
                f"max_size_bytes must be positive, got {self.max_size_bytes}"
            )
        if not self.allowed_extensions:
            raise ValueError("allowed_extensions cannot be empty")
        for extension in self.allowed_extensions:
            if not extension.startswith("."):
                raise ValueError(
                    f"Extensions must start with '.', got {extension!r}"
                )

    @classmethod
    def from_env(cls) -> "HeaderValidationLimits":
        """
        Build limits from environment variables.

        Reads:
            MAX_FILE_SIZE_MB: Integer megabytes (default 10)
            ALLOWED_EXTENSIONS: Comma-separated list (default ".xlsx,.xlsm")
        """
        max_size_mb = int(os.getenv("MAX_FILE_SIZE_MB", str(MAX_FILE_SIZE_MB)))
        extensions_str = os.getenv("ALLOWED_EXTENSIONS", ",".join(ALLOWED_EXTENSIONS))
        extensions = tuple(
            ext.strip().lower() for ext in extensions_str.split(",") if ext.strip()
        )
        return cls(
            max_size_bytes=max_size_mb * 1024 * 1024,
            allowed_extensions=extensions,
        )

    def is_allowed_filename(self, filename: str) -> bool:
        """Check whether filename ends with one of the allowed extensions."""
        return filename.lower().endswith(self.allowed_extensions)
