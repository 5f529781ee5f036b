"""MCP server exposing a GraphQL schema to LLM agents."""

from .constants import ErrorMessage
from .decorators import handle_errors
from .kinds import RootOperation, TypeKind, type_kind
from .loader import SchemaParseError, load_schema, schema_name_from_path
from .server import MCPServer, create_server, load_config
from .transport import StdioTransport, create_transport

__all__ = [
    "MCPServer",
    "create_server",
    "load_config",
    "load_schema",
    "schema_name_from_path",
    "SchemaParseError",
    "StdioTransport",
    "create_transport",
    "RootOperation",
    "TypeKind",
    "type_kind",
    "handle_errors",
    "ErrorMessage",
]
