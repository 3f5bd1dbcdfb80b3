"""MCP server wiring for the tool dispatcher.

Registers the dispatcher's tool listing and invocation with the MCP SDK's
low-level Server. The SDK owns framing, the handshake and the transport loop,
and turns exceptions raised by a tool call into an error result.
"""

import logging
from typing import Any, Dict, List

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .registry import Dispatcher

logger = logging.getLogger(__name__)

SERVER_NAME = "confluence-mcp"


def create_server(dispatcher: Dispatcher, name: str = SERVER_NAME) -> Server:
    """Create an MCP server whose tools are served by ``dispatcher``."""
    server: Server = Server(name)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return dispatcher.list_tools()

    @server.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        return await dispatcher.dispatch(name, arguments)

    return server


async def run_stdio(server: Server) -> None:
    """Run the MCP server over stdio until the client disconnects."""
    logger.info(f"Starting {server.name} on stdio")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
