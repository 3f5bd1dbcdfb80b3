"""Data models for CLI operations."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for the confluence-mcp process.

    - SUCCESS (0): Server shut down cleanly (client disconnected)
    - GENERAL_ERROR (1): Startup or transport failure

    Example:
        >>> sys.exit(ExitCode.GENERAL_ERROR)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
