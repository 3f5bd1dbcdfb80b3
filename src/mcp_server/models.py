"""Data models for the tool catalog.

Each tool declares its arguments as a pydantic model; the same model is the
source of the tool's JSON input schema and the validator for incoming
arguments. Field names follow the camelCase names agents send on the wire.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Type

from pydantic import BaseModel, Field


class GetPagesInSpaceArgs(BaseModel):
    """Arguments for get-pages-in-space."""
    spaceId: str = Field(description="ID of the space to list pages from")


class GetSpacesArgs(BaseModel):
    """Arguments for get-spaces."""
    spaceKeys: Optional[List[str]] = Field(
        default=None,
        description="Space keys to filter on; omit to list all spaces",
    )


class GetPageArgs(BaseModel):
    """Arguments for get-page."""
    pageId: str = Field(description="ID of the page to fetch")


class GetPagesArgs(BaseModel):
    """get-pages takes no arguments."""


class CreatePageArgs(BaseModel):
    """Arguments for create-page."""
    title: str = Field(description="Title of the new page")
    content: str = Field(description="Page body in Confluence storage format (XHTML)")
    parentId: str = Field(description="ID of the parent page")
    spaceId: str = Field(description="ID of the space to create the page in")


@dataclass(frozen=True)
class ToolSpec:
    """One entry of the tool catalog.

    Attributes:
        name: Tool name exposed to agents (e.g., "get-page")
        description: Human-readable description shown in tools/list
        arguments: pydantic model validating the invocation arguments
        handler: Callable taking the validated model and returning the result
        raw_text: If True the result is a string returned verbatim;
            otherwise it is encoded as compact JSON
    """
    name: str
    description: str
    arguments: Type[BaseModel]
    handler: Callable[[Any], Any]
    raw_text: bool = False

    def input_schema(self) -> dict:
        """JSON schema for the tool's arguments."""
        return self.arguments.model_json_schema()
