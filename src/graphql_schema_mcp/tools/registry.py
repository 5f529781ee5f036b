"""Tool registry for the GraphQL Schema MCP Server.

This module keeps track of the tools registered for one loaded schema and
builds the tool definitions that apply to it.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from graphql import GraphQLSchema

from .descriptions import TOOL_DESCRIPTIONS
from .handlers import build_tool_handlers

logger = logging.getLogger(__name__)


@dataclass
class ToolMetadata:
    """Metadata for a registered tool."""

    name: str
    version: str
    handler: Callable[..., str]
    description: str = ""
    tags: list[str] = field(default_factory=list)


class ToolRegistry:
    """Registry of the tools exposed for a schema.

    One registry belongs to one server; tools are registered once at
    startup and never change afterwards.
    """

    def __init__(self):
        """Initialize empty tool registry."""
        self._tools: dict[str, ToolMetadata] = {}
        logger.debug("Tool registry initialized")

    def register(
        self,
        name: str,
        handler: Callable[..., str],
        version: str = "1.0.0",
        description: str | None = None,
        tags: list[str] | None = None,
    ) -> None:
        """Register a tool in the registry.

        Args:
            name: Tool name (must be unique)
            handler: Function that implements the tool
            version: Tool version (default: "1.0.0")
            description: Tool description, defaults to the known one for
                         the tool name
            tags: List of tags for categorization

        Raises:
            ValueError: If the name is already registered with another version
        """
        if name in self._tools:
            existing = self._tools[name]
            if existing.version == version:
                logger.warning(
                    f"Tool '{name}' v{version} already registered. "
                    "Skipping duplicate registration."
                )
                return
            raise ValueError(
                f"Tool '{name}' already registered with version "
                f"{existing.version}. Cannot register version {version}."
            )

        self._tools[name] = ToolMetadata(
            name=name,
            version=version,
            handler=handler,
            description=description or TOOL_DESCRIPTIONS.get(name, ""),
            tags=tags or [],
        )
        logger.debug(f"Registered tool: {name} v{version}")

    def get(self, name: str) -> ToolMetadata | None:
        """Get tool metadata by name, None if not registered."""
        return self._tools.get(name)

    def get_handler(self, name: str) -> Callable[..., str] | None:
        """Get tool handler function by name, None if not registered."""
        tool = self._tools.get(name)
        return tool.handler if tool else None

    def list_tools(self) -> list[str]:
        """List registered tool names in registration order."""
        return list(self._tools.keys())

    def count(self) -> int:
        """Get total number of registered tools."""
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools


def build_schema_tools(schema: GraphQLSchema) -> list[dict[str, Any]]:
    """Build the tool definitions that apply to a schema.

    Args:
        schema: Loaded GraphQL schema

    Returns:
        List of {name, handler, description} dictionaries in registration order
    """
    return [
        {
            "name": name,
            "handler": handler,
            "description": TOOL_DESCRIPTIONS[name],
        }
        for name, handler in build_tool_handlers(schema).items()
    ]
