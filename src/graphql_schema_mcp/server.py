"""MCP Server exposing a GraphQL schema.

This module wires the loaded schema into FastMCP: it sets up logging,
registers the introspection tools that apply to the schema and runs the
request loop over stdio until the client closes stdin.
"""

import json
import logging
import sys
import time
from pathlib import Path
from typing import Any, Optional

import yaml
from graphql import GraphQLSchema
from mcp.server.fastmcp import FastMCP

from .constants import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_SCHEMA_NAME,
    PROTOCOL_VERSION,
    SERVER_VERSION,
)
from .decorators import handle_errors
from .tools.registry import ToolRegistry, build_schema_tools
from .transport import create_transport

logger = logging.getLogger(__name__)

TEXT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


class MCPServer:
    """MCP Server for a single GraphQL schema.

    The schema is loaded before the server is created and is only read
    afterwards; every tool is a lookup against it.
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        schema_name: str = DEFAULT_SCHEMA_NAME,
        config: Optional[dict[str, Any]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize MCP Server.

        Args:
            schema: Loaded GraphQL schema
            schema_name: Display name, usually derived from the schema file
            config: Server configuration dictionary. May contain:
                - server: {version, description}
                - logging: {level, format, file}
                - transport: {type}
            logger: Logger used by the server, defaults to this module's
        """
        self.schema = schema
        self.schema_name = schema_name
        self.config = config or {}
        self.logger = logger or logging.getLogger(__name__)

        server_config = self.config.get("server", {})
        self.name = f"GraphQL Schema: {schema_name}"
        self.version = server_config.get("version", SERVER_VERSION)
        self.description = server_config.get(
            "description",
            f"Provides GraphQL schema information for {schema_name}",
        )

        transport_config = self.config.get("transport", {})
        self.transport_type = transport_config.get("type", "stdio")

        logging_config = self.config.get("logging", {})
        self.log_level = logging_config.get("level", "INFO")
        self.log_format = logging_config.get("format", "text")
        self.log_file = logging_config.get("file")

        self.tool_registry = ToolRegistry()
        self._setup_logging()

        self.mcp = FastMCP(name=self.name, instructions=self.description)
        # FastMCP has no version argument; initialize reports this value.
        self.mcp._mcp_server.version = self.version
        self._capabilities_registered = False

        self.logger.info(f"Initialized {self.name} MCP Server v{self.version}")

    def _setup_logging(self) -> None:
        """Route all logging to stderr (and optionally a file).

        stdout belongs to the MCP protocol and must stay clean.
        """
        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, str(self.log_level).upper(), logging.INFO))
        root_logger.handlers.clear()

        if self.log_format == "json":
            formatter: logging.Formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(TEXT_LOG_FORMAT)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        if self.log_file:
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            self.logger.info(f"Logging to file: {self.log_file}")

    def _register_capabilities(self) -> None:
        """Register the schema tools with FastMCP and the tool registry.

        Root operation tools are only registered for root types the schema
        defines. Calling this more than once is a no-op.
        """
        if self._capabilities_registered:
            return

        self.logger.info("Registering server capabilities...")

        for tool in build_schema_tools(self.schema):
            handler = handle_errors(tool["handler"])
            handler.__name__ = tool["name"].replace("-", "_")

            # FastMCP.tool() returns a decorator; FastMCP validates the
            # arguments against the handler signature before calling it.
            self.mcp.tool(name=tool["name"], description=tool["description"])(handler)

            self.tool_registry.register(
                name=tool["name"],
                handler=handler,
                version=self.version,
                description=tool["description"],
            )
            self.logger.debug(f"Registered tool: {tool['name']}")

        self._capabilities_registered = True
        self.logger.info(f"Registered {self.tool_registry.count()} tools")

    async def start(self) -> None:
        """Start the MCP server.

        Serves requests one at a time until the client closes stdin.

        Raises:
            ValueError: If the configured transport is not stdio
        """
        self.logger.info("Starting MCP server...")
        self._register_capabilities()

        transport = create_transport(self.transport_type)
        try:
            read_stream, write_stream = await transport.start()
            self.logger.info("Server ready. Waiting for requests...")
            low_level_server = self.mcp._mcp_server
            await low_level_server.run(
                read_stream,
                write_stream,
                low_level_server.create_initialization_options(),
            )
        except Exception as e:
            self.logger.error(f"Server error: {e}", exc_info=True)
            raise
        finally:
            await transport.stop()
            await self.stop()

    async def stop(self) -> None:
        """Stop the MCP server."""
        self.logger.info("MCP server stopped")

    def get_capabilities(self) -> dict[str, Any]:
        """Get server capabilities declaration."""
        return {
            "server": {
                "name": self.name,
                "version": self.version,
                "description": self.description,
            },
            "protocol": {
                "version": PROTOCOL_VERSION,
            },
            "capabilities": {
                "tools": {
                    "listChanged": False,
                },
            },
            "tools": self.tool_registry.list_tools(),
        }


def load_config(config_path: Optional[str] = None) -> dict[str, Any]:
    """Load server configuration from a YAML file.

    Args:
        config_path: Path to the YAML file, defaults to config/server.yaml
                     in the working directory

    Returns:
        Configuration dictionary; empty if the file is missing or invalid
    """
    path = Path(config_path or DEFAULT_CONFIG_PATH)
    if not path.exists():
        if config_path:
            logger.warning(f"Config file not found: {path}")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {path}: {e}")
        logger.info("Using default configuration")
        return {}

    if not isinstance(config, dict):
        logger.warning(f"Ignoring config {path}: expected a mapping")
        return {}
    return config


def create_server(
    schema: GraphQLSchema,
    schema_name: str = DEFAULT_SCHEMA_NAME,
    config: Optional[dict[str, Any]] = None,
    config_path: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> MCPServer:
    """Factory function to create an MCP server instance.

    Args:
        schema: Loaded GraphQL schema
        schema_name: Display name of the schema
        config: Server configuration. If None, loaded from ``config_path``
        config_path: YAML config file, see ``load_config``
        logger: Logger injected into the server

    Returns:
        MCPServer instance with its tools registered
    """
    if config is None:
        config = load_config(config_path)

    server = MCPServer(schema, schema_name=schema_name, config=config, logger=logger)
    server._register_capabilities()
    return server
