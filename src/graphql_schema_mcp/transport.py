"""Transport layer for the MCP server.

The server only speaks MCP over stdin/stdout. Framing and serialization
belong to the ``mcp`` SDK; this wrapper owns opening and closing the
streams.
"""

import logging
from typing import Any, Optional

from mcp.server.stdio import stdio_server

from .constants import ErrorMessage

logger = logging.getLogger(__name__)


class StdioTransport:
    """stdio transport for MCP server communication.

    stdout carries protocol messages only, so nothing else may print to it
    while the transport is open.
    """

    transport_type = "stdio"

    def __init__(self):
        self._stdio_context: Optional[Any] = None

    async def start(self) -> tuple[Any, Any]:
        """Open stdin/stdout as MCP message streams.

        Returns:
            Tuple of (read_stream, write_stream)
        """
        logger.info("Starting stdio transport...")
        self._stdio_context = stdio_server()
        read_stream, write_stream = await self._stdio_context.__aenter__()
        logger.info("stdio transport started")
        return read_stream, write_stream

    async def stop(self) -> None:
        """Close the streams. Safe to call when not started."""
        if self._stdio_context is None:
            return
        try:
            await self._stdio_context.__aexit__(None, None, None)
            logger.info("stdio transport stopped")
        finally:
            self._stdio_context = None


def create_transport(transport_type: str) -> StdioTransport:
    """Create the transport for a configured transport type.

    Raises:
        ValueError: If the transport type is not "stdio"
    """
    if transport_type == StdioTransport.transport_type:
        return StdioTransport()
    raise ValueError(
        ErrorMessage.UNSUPPORTED_TRANSPORT.format(transport_type=transport_type)
    )
