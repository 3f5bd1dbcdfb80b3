"""Test fixtures for Confluence integration tests.

This module provides test fixtures for:
- Confluence credentials (from .env.test)
"""

from .confluence_credentials import get_test_credentials

__all__ = [
    "get_test_credentials",
]
