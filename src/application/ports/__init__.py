"""
Application Layer Ports (Interfaces)

Contains Protocol definitions for dependency inversion.
Infrastructure Layer implements these protocols.
"""

from src.application.ports.header_validator import HeaderValidatorProtocol

__all__ = ["HeaderValidatorProtocol"]
