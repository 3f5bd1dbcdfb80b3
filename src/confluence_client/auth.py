"""Authentication module for loading Confluence credentials.

This module handles loading Confluence Cloud credentials from environment variables
using python-dotenv. Missing values are not an error at this stage: they default
to an empty string and surface as an authentication failure on the first API call.
"""

import base64
import logging
import os
from typing import NamedTuple, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

URL_VAR = 'CONFLUENCE_URL'
EMAIL_VAR = 'CONFLUENCE_EMAIL'
API_TOKEN_VAR = 'CONFLUENCE_API_TOKEN'


class Credentials(NamedTuple):
    """Confluence API credentials."""
    url: str
    email: str
    api_token: str

    def basic_auth_header(self) -> str:
        """Return the HTTP Basic Authorization header value for these credentials."""
        raw = f"{self.email}:{self.api_token}".encode('utf-8')
        return f"Basic {base64.b64encode(raw).decode('ascii')}"


class Authenticator:
    """Loads Confluence credentials from environment variables.

    Credentials are loaded from a .env file using python-dotenv and are never
    logged. Values already present in the environment take precedence over
    the .env file.

    Environment variables:
        CONFLUENCE_URL: Confluence REST API v2 base URL
            (e.g., https://yourinstance.atlassian.net/wiki/api/v2)
        CONFLUENCE_EMAIL: Confluence account email address
        CONFLUENCE_API_TOKEN: Confluence API token

    Example:
        >>> auth = Authenticator()
        >>> creds = auth.get_credentials()
        >>> print(f"Connecting to {creds.url}")
    """

    def __init__(self, env_file: Optional[str] = None):
        """Initialize the authenticator by loading environment variables from .env file.

        Args:
            env_file: Optional path to a dotenv file (defaults to .env lookup)
        """
        load_dotenv(dotenv_path=env_file)

    def get_credentials(self) -> Credentials:
        """Get Confluence credentials from environment variables.

        Returns:
            Credentials: A named tuple containing url, email, and api_token.
            Any missing value is an empty string.
        """
        values = {}
        for name in (URL_VAR, EMAIL_VAR, API_TOKEN_VAR):
            value = os.getenv(name)
            if not value:
                logger.warning(f"{name} is not set; Confluence calls will fail until it is")
                value = ''
            values[name] = value

        return Credentials(
            url=values[URL_VAR],
            email=values[EMAIL_VAR],
            api_token=values[API_TOKEN_VAR],
        )
