"""Integration tests for read-only Confluence operations.

Requires .env.test with CONFLUENCE_URL, CONFLUENCE_EMAIL,
CONFLUENCE_API_TOKEN and CONFLUENCE_TEST_SPACE.
"""

import pytest

from src.confluence_client.api_wrapper import APIWrapper
from src.confluence_client.auth import Credentials
from src.confluence_client.errors import AdapterError


@pytest.mark.integration
class TestReadOperations:
    """Read spaces and pages from the test site."""

    def test_get_spaces_filtered_by_key(self, api_wrapper, test_credentials):
        """Filtering by the test space key returns that space."""
        spaces = api_wrapper.get_spaces([test_credentials['test_space_key']])

        assert [space['key'] for space in spaces] == [test_credentials['test_space_key']]

    def test_pages_in_space_and_page_content(self, api_wrapper, test_credentials):
        """Pages listed in the test space can be fetched by id."""
        space = api_wrapper.get_spaces([test_credentials['test_space_key']])[0]
        pages = api_wrapper.get_pages_in_space(str(space['id']))

        if not pages:
            pytest.skip("Test space has no pages")

        content = api_wrapper.get_page(str(pages[0]['id']))
        assert isinstance(content, str)

    def test_bad_token_fails_with_operation_name(self, test_credentials):
        """A wrong token surfaces as an AdapterError on first use."""
        api = APIWrapper(Credentials(
            url=test_credentials['confluence_url'],
            email=test_credentials['confluence_email'],
            api_token='not-a-real-token',
        ))

        with pytest.raises(AdapterError) as exc_info:
            api.get_spaces()

        assert 'Failed to get spaces:' in str(exc_info.value)
