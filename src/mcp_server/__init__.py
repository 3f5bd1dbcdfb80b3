"""MCP tool layer exposing Confluence operations to agents."""

from .errors import ToolError, UnknownToolError, ToolValidationError
from .models import ToolSpec
from .registry import Dispatcher, build_catalog
from .server import create_server, run_stdio

__all__ = [
    "ToolError",
    "UnknownToolError",
    "ToolValidationError",
    "ToolSpec",
    "Dispatcher",
    "build_catalog",
    "create_server",
    "run_stdio",
]
