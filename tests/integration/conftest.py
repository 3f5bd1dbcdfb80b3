"""Pytest configuration and fixtures for integration tests.

Provides shared fixtures for integration tests that talk to a real
Confluence site. Tests are skipped when .env.test is not available.
"""

from typing import Dict

import pytest

from src.confluence_client.api_wrapper import APIWrapper
from src.confluence_client.auth import Credentials
from tests.fixtures.confluence_credentials import get_test_credentials


@pytest.fixture(scope="session")
def test_credentials() -> Dict[str, str]:
    """Load test Confluence credentials from .env.test, or skip."""
    try:
        return get_test_credentials()
    except (FileNotFoundError, ValueError) as e:
        pytest.skip(f"Integration credentials unavailable: {e}")


@pytest.fixture(scope="session")
def api_wrapper(test_credentials: Dict[str, str]) -> APIWrapper:
    """Create an API wrapper authenticated against the test site."""
    return APIWrapper(Credentials(
        url=test_credentials['confluence_url'],
        email=test_credentials['confluence_email'],
        api_token=test_credentials['confluence_api_token'],
    ))
