"""Root pytest configuration for all tests.

This conftest applies to all test types (unit, integration).
"""

import logging

# atlassian-python-api logs every failed request at ERROR; tests trigger
# failures on purpose, so only show its warnings.
logging.getLogger("atlassian").setLevel(logging.WARNING)
