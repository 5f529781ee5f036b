"""Tool handlers for the GraphQL Schema MCP Server.

Every handler is a pure function from the loaded schema (plus at most one
string argument) to a text payload. Lookup misses are reported as text so
the calling agent can react to them; nothing here raises for unknown names.
"""

import logging
import re
from typing import Callable, Optional

from graphql import GraphQLSchema, print_ast

from ..constants import (
    LINE_SEPARATOR,
    LIST_SEPARATOR,
    NO_MATCHES,
    ErrorMessage,
)
from ..kinds import (
    RootOperation,
    is_field_bearing,
    is_internal_type_name,
    root_fields,
    type_kind,
)
from .descriptions import get_tool_name

logger = logging.getLogger(__name__)


def list_root_fields(fields: dict) -> str:
    """List the names of root operation fields in declaration order."""
    return LIST_SEPARATOR.join(fields.keys())


def get_root_field(fields: dict, field_name: str) -> str:
    """Print a single root field definition in SDL.

    Args:
        fields: Field mapping of a root operation type
        field_name: Exact field name

    Returns:
        SDL text of the field, or a not-found message if the field is
        missing or was not built from SDL
    """
    field = fields.get(field_name)
    if field is None or field.ast_node is None:
        return ErrorMessage.FIELD_NOT_FOUND
    return print_ast(field.ast_node)


def list_types(schema: GraphQLSchema) -> str:
    """List every user-facing type name, skipping introspection types."""
    return LIST_SEPARATOR.join(
        type_name
        for type_name in schema.type_map
        if not is_internal_type_name(type_name)
    )


def get_type(schema: GraphQLSchema, type_name: str) -> str:
    """Get a type definition in SDL.

    Types without a syntax node (built-in scalars, introspection types)
    get a short summary of name, description and kind instead.
    """
    graphql_type = schema.type_map.get(type_name)
    if graphql_type is None:
        return ErrorMessage.TYPE_NOT_FOUND.format(type_name=type_name)

    if graphql_type.ast_node is None:
        description = graphql_type.description or ErrorMessage.NO_DESCRIPTION
        return LINE_SEPARATOR.join(
            [
                f"Type: {type_name}",
                f"Description: {description}",
                f"Kind: {type_kind(graphql_type).value}",
            ]
        )

    return print_ast(graphql_type.ast_node)


def get_type_fields(schema: GraphQLSchema, type_name: str) -> str:
    """List ``name: Type`` pairs for an object, interface or input type."""
    graphql_type = schema.type_map.get(type_name)
    if graphql_type is None:
        return ErrorMessage.TYPE_NOT_FOUND.format(type_name=type_name)
    if not is_field_bearing(graphql_type):
        return ErrorMessage.TYPE_HAS_NO_FIELDS.format(type_name=type_name)

    return LINE_SEPARATOR.join(
        f"{field_name}: {field.type}"
        for field_name, field in graphql_type.fields.items()
    )


def search_schema(schema: GraphQLSchema, pattern: str) -> str:
    """Search type names and field names with a case-insensitive regex.

    Raises:
        re.error: If the pattern is not a valid regular expression
    """
    search_regex = re.compile(pattern, re.IGNORECASE)

    public_types = [
        (type_name, graphql_type)
        for type_name, graphql_type in schema.type_map.items()
        if not is_internal_type_name(type_name)
    ]

    matching_types = [
        type_name for type_name, _ in public_types if search_regex.search(type_name)
    ]

    matching_fields = [
        f"{type_name}.{field_name}"
        for type_name, graphql_type in public_types
        if is_field_bearing(graphql_type)
        for field_name in graphql_type.fields
        if search_regex.search(field_name)
    ]

    logger.debug(
        f"search_schema({pattern!r}): {len(matching_types)} types, "
        f"{len(matching_fields)} fields"
    )

    return LINE_SEPARATOR.join(
        [
            f"Matching types: {LIST_SEPARATOR.join(matching_types) or NO_MATCHES}",
            f"Matching fields: {LIST_SEPARATOR.join(matching_fields) or NO_MATCHES}",
        ]
    )


def _root_operation_handlers(
    fields: dict,
) -> tuple[Callable[[], str], Callable[[str], str]]:
    # FastMCP builds the argument contract from these signatures.
    def list_fields() -> str:
        return list_root_fields(fields)

    def get_field(fieldName: str) -> str:
        return get_root_field(fields, fieldName)

    return list_fields, get_field


def build_tool_handlers(schema: GraphQLSchema) -> dict[str, Callable[..., str]]:
    """Build the handler closures that apply to a schema.

    Root operation tools are only included when the schema defines that
    root type. Ordering is stable: query, mutation and subscription tools
    first, then the type tools.

    Args:
        schema: Loaded GraphQL schema

    Returns:
        Mapping of tool name to handler function
    """
    handlers: dict[str, Callable[..., str]] = {}

    for operation in RootOperation:
        fields: Optional[dict] = root_fields(schema, operation)
        if fields is None:
            logger.debug(f"Schema has no {operation.value} type, skipping its tools")
            continue
        list_fields, get_field = _root_operation_handlers(fields)
        handlers[get_tool_name("list", operation)] = list_fields
        handlers[get_tool_name("get", operation)] = get_field

    def list_types_handler() -> str:
        return list_types(schema)

    def get_type_handler(typeName: str) -> str:
        return get_type(schema, typeName)

    def get_type_fields_handler(typeName: str) -> str:
        return get_type_fields(schema, typeName)

    def search_schema_handler(pattern: str) -> str:
        return search_schema(schema, pattern)

    handlers["list-types"] = list_types_handler
    handlers["get-type"] = get_type_handler
    handlers["get-type-fields"] = get_type_fields_handler
    handlers["search-schema"] = search_schema_handler

    return handlers
