"""Constants for the GraphQL Schema MCP Server.

This module defines defaults and the text templates returned to clients so
that handlers, the CLI and tests share the exact same wording.
"""

# Schema file used when no path is given on the command line
DEFAULT_SCHEMA_FILE = "schema.graphqls"
SCHEMA_FILE_SUFFIX = ".graphqls"
DEFAULT_SCHEMA_NAME = "schema"

# Names of built-in introspection types (__Schema, __Type, ...) start with this
INTROSPECTION_PREFIX = "__"

SERVER_VERSION = "1.0.0"
PROTOCOL_VERSION = "2024-11-05"
DEFAULT_CONFIG_PATH = "config/server.yaml"

# Joiners used by listing tools
LIST_SEPARATOR = ", "
LINE_SEPARATOR = "\n"
NO_MATCHES = "None"


class ErrorMessage:
    """Message templates.

    Lookup misses are reported to the agent as ordinary text, the fatal
    templates are written to stderr by the CLI.
    """

    # Per-request (returned as tool output)
    FIELD_NOT_FOUND = "Field not found or has no definition"
    TYPE_NOT_FOUND = 'Type "{type_name}" not found'
    TYPE_HAS_NO_FIELDS = 'Type "{type_name}" is not an object type with fields'
    NO_DESCRIPTION = "No description"

    # Fatal (startup)
    SCHEMA_FILE_NOT_FOUND = "Error: Schema file not found at {path}"
    SCHEMA_LOAD_FAILED = "Error loading schema: {error}"
    USAGE = "Usage: graphql-schema-mcp [path/to/schema.graphqls]"

    # Generic
    UNEXPECTED_ERROR = "Unexpected error occurred"
    UNSUPPORTED_TRANSPORT = (
        "Transport type '{transport_type}' not supported. "
        "Only 'stdio' is currently supported."
    )
