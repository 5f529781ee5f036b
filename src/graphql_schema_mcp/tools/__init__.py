"""Schema introspection tools for the MCP server."""

from .descriptions import TOOL_DESCRIPTIONS, get_tool_name
from .handlers import (
    build_tool_handlers,
    get_root_field,
    get_type,
    get_type_fields,
    list_root_fields,
    list_types,
    search_schema,
)
from .registry import ToolMetadata, ToolRegistry, build_schema_tools

__all__ = [
    "ToolMetadata",
    "ToolRegistry",
    "build_schema_tools",
    "build_tool_handlers",
    "list_root_fields",
    "get_root_field",
    "list_types",
    "get_type",
    "get_type_fields",
    "search_schema",
    "get_tool_name",
    "TOOL_DESCRIPTIONS",
]
