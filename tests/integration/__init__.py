"""Integration tests against a real Confluence site.

Requirements:
- Test credentials in .env.test file (CONFLUENCE_URL, CONFLUENCE_EMAIL,
  CONFLUENCE_API_TOKEN, CONFLUENCE_TEST_SPACE)
- Read access to the test space

Tests skip when .env.test is missing. Run only these with:
    pytest tests/integration -m integration
"""
