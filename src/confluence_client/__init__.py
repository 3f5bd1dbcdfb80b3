"""Confluence client library for the MCP server.

This package provides a Python adapter over the Confluence Cloud REST API v2
used by the tool layer to read and create pages.
"""

from .api_wrapper import APIWrapper
from .auth import Authenticator, Credentials
from .errors import (
    ConfluenceMCPError,
    ConfluenceError,
    AdapterError,
)

__all__ = [
    "APIWrapper",
    "Authenticator",
    "Credentials",
    "ConfluenceMCPError",
    "ConfluenceError",
    "AdapterError",
]
