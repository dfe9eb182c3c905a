"""
Application Services

Responsibility:
    Orchestration services that coordinate domain services
    and infrastructure components.

Contains:
    - HeaderValidationUseCase: Validate header row of an uploaded workbook

Does NOT contain:
    - Domain business logic (use Domain services)
    - Direct infrastructure calls (use dependency injection)
"""

from src.application.services.header_validation_use_case import (
    HeaderValidationUseCase,
)

__all__ = ["HeaderValidationUseCase"]
