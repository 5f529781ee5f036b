"""Schema loading for the MCP server.

Reads a GraphQL SDL document from disk and builds the schema once at
startup. Both failure modes are fatal for the server; the CLI turns them
into a diagnostic on stderr and a non-zero exit status.
"""

import logging
from pathlib import Path
from typing import Optional

from graphql import GraphQLError, GraphQLSchema, build_schema

from .constants import DEFAULT_SCHEMA_FILE, DEFAULT_SCHEMA_NAME, SCHEMA_FILE_SUFFIX

logger = logging.getLogger(__name__)


class SchemaParseError(Exception):
    """Raised when a schema document is not valid GraphQL SDL."""


def resolve_schema_path(path: Optional[str] = None) -> Path:
    """Resolve the schema path against the current working directory.

    Args:
        path: Schema file path (absolute or relative). Defaults to
              ``schema.graphqls`` when omitted.

    Returns:
        Absolute path to the schema file
    """
    return Path(path if path is not None else DEFAULT_SCHEMA_FILE).resolve()


def load_schema(path: Optional[str] = None) -> GraphQLSchema:
    """Load and build a GraphQL schema from an SDL file.

    Args:
        path: Schema file path, see ``resolve_schema_path``

    Returns:
        The built GraphQLSchema

    Raises:
        FileNotFoundError: If the file cannot be read (missing, permission
                           denied, not a file). The message contains the
                           resolved absolute path.
        SchemaParseError: If the file is not UTF-8 text, or the document
                          does not parse or validate
    """
    schema_path = resolve_schema_path(path)

    try:
        schema_content = schema_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.debug(f"Failed to read schema file {schema_path}: {e}")
        raise FileNotFoundError(
            f"Schema file not found at {schema_path}"
        ) from e
    except UnicodeDecodeError as e:
        raise SchemaParseError(
            f"Schema file {schema_path} is not valid UTF-8: {e}"
        ) from e

    try:
        schema = build_schema(schema_content)
    except (GraphQLError, TypeError) as e:
        raise SchemaParseError(str(e)) from e

    logger.info(f"Loaded schema from {schema_path} ({len(schema.type_map)} types)")
    return schema


def schema_name_from_path(path: Optional[str] = None) -> str:
    """Derive a display name for the server from the schema path.

    ``../schema.shopify.2025-01.graphqls`` becomes ``schema.shopify.2025-01``.
    Without a path the name is ``schema``.
    """
    if not path:
        return DEFAULT_SCHEMA_NAME
    name = Path(path).name
    if name.endswith(SCHEMA_FILE_SUFFIX):
        name = name[: -len(SCHEMA_FILE_SUFFIX)]
    return name or DEFAULT_SCHEMA_NAME
