"""Tool names and descriptions for the GraphQL Schema MCP Server.

Argument contracts are not declared here: FastMCP derives them from the
handler signatures in ``handlers.py``.
"""

from ..kinds import RootOperation


def get_tool_name(action: str, operation: RootOperation) -> str:
    """Name of a root operation tool.

    Args:
        action: "list" or "get"
        operation: Root operation the tool serves

    Returns:
        e.g. "list-query-fields" or "get-mutation-field"
    """
    if action == "list":
        return f"list-{operation.value}-fields"
    if action == "get":
        return f"get-{operation.value}-field"
    raise ValueError(f"Unknown tool action: {action}")


def _root_operation_descriptions(operation: RootOperation) -> dict[str, str]:
    return {
        get_tool_name("list", operation): (
            "Lists all of the available root-level fields for a "
            f"GraphQL {operation.value}."
        ),
        get_tool_name("get", operation): (
            f"Gets a single GraphQL {operation.value} field definition "
            "in GraphQL Schema Definition Language."
        ),
    }


TOOL_DESCRIPTIONS: dict[str, str] = {
    **_root_operation_descriptions(RootOperation.QUERY),
    **_root_operation_descriptions(RootOperation.MUTATION),
    **_root_operation_descriptions(RootOperation.SUBSCRIPTION),
    "list-types": "Lists all of the types defined in the GraphQL schema.",
    "get-type": (
        "Gets a single GraphQL type from the schema in the GraphQL "
        "Schema Definition Language"
    ),
    "get-type-fields": "Gets a simplified list of fields for a specific GraphQL type",
    "search-schema": "Search for types or fields in the schema by name pattern",
}
