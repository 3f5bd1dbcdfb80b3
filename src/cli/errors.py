"""Typed exception hierarchy for CLI-related errors.

This module defines the exceptions raised while bootstrapping the server
process. All exceptions inherit from CLIError.
"""

from src.confluence_client.errors import ConfluenceMCPError


class CLIError(ConfluenceMCPError):
    """Base exception for all CLI-related errors."""
    pass


class FatalStartupError(CLIError):
    """Raised when the server cannot be built or its transport cannot start."""

    def __init__(self, message: str):
        super().__init__(message)
