"""Typed exception hierarchy for tool dispatch errors.

All exceptions inherit from ToolError so the protocol boundary can tell a
rejected invocation apart from a failed Confluence call.
"""

from typing import Any, Dict, List

from src.confluence_client.errors import ConfluenceMCPError


class ToolError(ConfluenceMCPError):
    """Base exception for all tool dispatch errors."""
    pass


class UnknownToolError(ToolError):
    """Raised when an invocation names a tool that is not in the catalog."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ToolValidationError(ToolError):
    """Raised when invocation arguments do not match the tool's contract.

    Attributes:
        tool: Name of the tool that rejected the arguments
        errors: Per-field error records from the validator
    """

    def __init__(self, tool: str, errors: List[Dict[str, Any]]):
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ())) or 'arguments'}: {error.get('msg', 'invalid')}"
            for error in errors
        )
        super().__init__(f"Invalid arguments for {tool}: {problems}")
        self.tool = tool
        self.errors = errors
