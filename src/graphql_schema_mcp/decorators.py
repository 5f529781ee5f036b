"""Decorators for MCP tool handlers.

This module provides the error handling wrapper applied to every tool
handler before it is registered with FastMCP.
"""

import logging
from functools import wraps
from typing import Callable, ParamSpec, TypeVar

from mcp.server.fastmcp.exceptions import ToolError

from .constants import ErrorMessage

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def handle_errors(func: Callable[P, T]) -> Callable[P, T]:
    """Decorator to log tool calls and normalize unexpected failures.

    Handlers report lookup misses as text, so anything raised here is an
    internal fault. It is logged with its traceback and re-raised as a
    ToolError, which FastMCP turns into a generic error result.

    ``functools.wraps`` keeps the wrapped signature visible, FastMCP reads
    it to build the tool's argument contract.

    Args:
        func: Synchronous tool handler

    Returns:
        Wrapped handler with the same signature
    """
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        logger.debug(f"Tool {func.__name__} called with {kwargs or args}")
        try:
            return func(*args, **kwargs)
        except ToolError:
            raise
        except Exception as e:
            logger.error(
                f"Unexpected error in {func.__name__}: {e}",
                exc_info=True,
            )
            raise ToolError(f"{ErrorMessage.UNEXPECTED_ERROR}: {e}") from e

    return wrapper
