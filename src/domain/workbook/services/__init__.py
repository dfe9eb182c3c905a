"""
Workbook Domain Services Module

This module exports:
    - HeaderMatcher: Reconciles header rows against required column names
    - HeaderIndex: Scan result of one header row
"""

from .header_matcher import HeaderIndex, HeaderMatcher

__all__ = [
    "HeaderMatcher",
    "HeaderIndex",
]
