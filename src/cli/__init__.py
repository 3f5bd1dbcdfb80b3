"""Command-line interface for the Confluence MCP server.

This package provides the `confluence-mcp` command that loads credentials,
builds the Confluence adapter and tool catalog, and serves them over stdio.
"""

from .models import ExitCode
from .errors import CLIError, FatalStartupError

__all__ = [
    'ExitCode',
    'CLIError',
    'FatalStartupError',
]
