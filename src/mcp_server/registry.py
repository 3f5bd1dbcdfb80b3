"""Tool catalog and dispatcher.

The catalog maps each tool name to its argument contract and handler. It is
built once at startup from an APIWrapper and handed to the Dispatcher, which
is the only place adapter results are turned into MCP content blocks.
"""

import functools
import json
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from anyio import to_thread
from mcp.types import TextContent, Tool
from pydantic import ValidationError

from src.confluence_client.api_wrapper import APIWrapper, _field

from .errors import ToolValidationError, UnknownToolError
from .models import (
    CreatePageArgs,
    GetPageArgs,
    GetPagesArgs,
    GetPagesInSpaceArgs,
    GetSpacesArgs,
    ToolSpec,
)

logger = logging.getLogger(__name__)


def _summaries(pages: Iterable[Any]) -> List[Dict[str, Any]]:
    """Project page records to their id and title.

    Entries that are not objects are skipped; a missing or null id or title
    becomes "".
    """
    return [
        {"id": _field(page, ("id",), ""), "title": _field(page, ("title",), "")}
        for page in pages
        if isinstance(page, dict)
    ]


def build_catalog(api: APIWrapper) -> Dict[str, ToolSpec]:
    """Build the tool catalog bound to one Confluence adapter.

    Args:
        api: Adapter every tool delegates to

    Returns:
        Dict mapping tool name to its ToolSpec, in listing order
    """
    specs = [
        ToolSpec(
            name="get-pages-in-space",
            description="List the pages in a Confluence space (id and title of each)",
            arguments=GetPagesInSpaceArgs,
            handler=lambda args: _summaries(api.get_pages_in_space(args.spaceId)),
        ),
        ToolSpec(
            name="get-spaces",
            description="List Confluence spaces, optionally filtered by space key",
            arguments=GetSpacesArgs,
            handler=lambda args: api.get_spaces(args.spaceKeys),
        ),
        ToolSpec(
            name="get-page",
            description="Get the rendered HTML content of a Confluence page",
            arguments=GetPageArgs,
            handler=lambda args: api.get_page(args.pageId),
            raw_text=True,
        ),
        ToolSpec(
            name="get-pages",
            description="List Confluence pages (id and title of each)",
            arguments=GetPagesArgs,
            handler=lambda args: _summaries(api.get_pages()),
        ),
        ToolSpec(
            name="create-page",
            description="Create a Confluence page from storage-format content and return its id",
            arguments=CreatePageArgs,
            handler=lambda args: api.create_page(
                title=args.title,
                content=args.content,
                parent_id=args.parentId,
                space_id=args.spaceId,
            ),
            raw_text=True,
        ),
    ]
    return {spec.name: spec for spec in specs}


class Dispatcher:
    """Validates tool invocations, calls the catalog handler and wraps the result.

    The dispatcher holds no per-call state. Adapter errors are not caught
    here; they propagate to the MCP server, which reports them as error
    results.

    Example:
        >>> dispatcher = Dispatcher(build_catalog(api))
        >>> content = await dispatcher.dispatch("get-page", {"pageId": "123"})
    """

    def __init__(self, catalog: Mapping[str, ToolSpec]):
        self._catalog = dict(catalog)

    @property
    def tool_names(self) -> List[str]:
        return list(self._catalog)

    def list_tools(self) -> List[Tool]:
        """Describe every catalog entry as an MCP Tool."""
        return [
            Tool(
                name=spec.name,
                description=spec.description,
                inputSchema=spec.input_schema(),
            )
            for spec in self._catalog.values()
        ]

    def validate(self, name: str, arguments: Optional[Mapping[str, Any]]) -> Any:
        """Look up a tool and validate arguments against its contract.

        Returns:
            The validated argument model instance

        Raises:
            UnknownToolError: If the tool is not in the catalog
            ToolValidationError: If the arguments do not match the contract
        """
        spec = self._catalog.get(name)
        if spec is None:
            raise UnknownToolError(name)

        try:
            return spec.arguments.model_validate(dict(arguments or {}))
        except ValidationError as e:
            logger.warning(f"Rejected {name} invocation: {e.error_count()} invalid argument(s)")
            raise ToolValidationError(name, e.errors()) from e

    async def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]]) -> List[TextContent]:
        """Run one tool invocation to completion.

        Args:
            name: Tool name
            arguments: Decoded argument mapping from the client

        Returns:
            A single text content block

        Raises:
            UnknownToolError: If the tool is not in the catalog
            ToolValidationError: If the arguments do not match the contract
            AdapterError: If the Confluence call fails
        """
        args = self.validate(name, arguments)
        spec = self._catalog[name]

        logger.info(f"Calling tool {name}")
        result = await to_thread.run_sync(functools.partial(spec.handler, args))

        if spec.raw_text:
            text = str(result)
        else:
            text = json.dumps(result, separators=(",", ":"))
        return [TextContent(type="text", text=text)]
