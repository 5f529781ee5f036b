"""Command-line entry point for the GraphQL Schema MCP Server."""

import argparse
import asyncio
import sys
from typing import Optional

from .constants import DEFAULT_SCHEMA_FILE, ErrorMessage
from .loader import SchemaParseError, load_schema, resolve_schema_path, schema_name_from_path
from .server import create_server, load_config

EPILOG = """\
Examples:
  graphql-schema-mcp
      Uses schema.graphqls in the current directory
  graphql-schema-mcp ../schema.shopify.2025-01.graphqls
      Uses the Shopify schema
  graphql-schema-mcp /absolute/path/to/custom-schema.graphqls
"""


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="graphql-schema-mcp",
        description="GraphQL Schema Model Context Protocol Server",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "schema",
        nargs="?",
        metavar="path/to/schema.graphqls",
        help=(
            "Path to the GraphQL schema file (optional). "
            f"If not provided, defaults to {DEFAULT_SCHEMA_FILE}"
        ),
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Server configuration YAML (default: config/server.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured logging level",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Load the schema and serve it over stdio.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    try:
        schema = load_schema(args.schema)
    except FileNotFoundError:
        print(
            ErrorMessage.SCHEMA_FILE_NOT_FOUND.format(path=resolve_schema_path(args.schema)),
            file=sys.stderr,
        )
        print(ErrorMessage.USAGE, file=sys.stderr)
        return 1
    except SchemaParseError as e:
        print(ErrorMessage.SCHEMA_LOAD_FAILED.format(error=e), file=sys.stderr)
        return 1

    config = load_config(args.config)
    if args.log_level:
        config.setdefault("logging", {})["level"] = args.log_level

    server = create_server(
        schema,
        schema_name=schema_name_from_path(args.schema),
        config=config,
    )

    try:
        asyncio.run(server.start())
    except KeyboardInterrupt:
        print("\nServer interrupted by user", file=sys.stderr)
    except Exception as e:
        print(f"Server failed: {e}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
