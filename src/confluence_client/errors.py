"""Typed exception hierarchy for Confluence-related errors.

This module defines the base exception for the whole project and the errors
raised by the Confluence API adapter. Messages carry enough context (the
failed operation and the service's own error text) to be shown to an agent
as-is.
"""


class ConfluenceMCPError(Exception):
    """Base exception for all confluence-mcp errors.

    Use this to catch any application-level error from the server.
    """
    pass


class ConfluenceError(ConfluenceMCPError):
    """Base exception for all Confluence-related errors."""
    pass


class AdapterError(ConfluenceError):
    """Raised when a Confluence API operation fails.

    Attributes:
        operation: Human-readable name of the failed operation (e.g. "get page")
        detail: Error detail reported by the HTTP layer or the service
    """

    def __init__(self, operation: str, detail: str):
        super().__init__(f"Failed to {operation}: {detail}")
        self.operation = operation
        self.detail = detail
