"""Type kinds and root operations of a GraphQL schema.

graphql-core models every named type as its own class. Handlers never
inspect those classes directly; they go through ``type_kind`` which maps a
type onto the closed ``TypeKind`` set and fails loudly on anything else.
"""

from enum import Enum
from typing import Optional

from graphql import (
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
)

from .constants import INTROSPECTION_PREFIX


class TypeKind(str, Enum):
    """Structural kind of a named GraphQL type."""

    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"


FIELD_BEARING_KINDS = frozenset(
    {TypeKind.OBJECT, TypeKind.INTERFACE, TypeKind.INPUT_OBJECT}
)


class RootOperation(str, Enum):
    """Root operation sets a schema may define."""

    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"


def type_kind(graphql_type: GraphQLNamedType) -> TypeKind:
    """Return the kind of a named type.

    Raises:
        TypeError: If the type is not one of the known kinds
    """
    if is_scalar_type(graphql_type):
        return TypeKind.SCALAR
    if is_object_type(graphql_type):
        return TypeKind.OBJECT
    if is_interface_type(graphql_type):
        return TypeKind.INTERFACE
    if is_union_type(graphql_type):
        return TypeKind.UNION
    if is_enum_type(graphql_type):
        return TypeKind.ENUM
    if is_input_object_type(graphql_type):
        return TypeKind.INPUT_OBJECT
    raise TypeError(f"Unknown GraphQL type kind: {graphql_type!r}")


def is_field_bearing(graphql_type: GraphQLNamedType) -> bool:
    return type_kind(graphql_type) in FIELD_BEARING_KINDS


def is_internal_type_name(type_name: str) -> bool:
    """True for built-in introspection types such as ``__Schema``."""
    return type_name.startswith(INTROSPECTION_PREFIX)


def root_type(
    schema: GraphQLSchema, operation: RootOperation
) -> Optional[GraphQLObjectType]:
    """Get the root type for an operation, or None if the schema has none."""
    if operation is RootOperation.QUERY:
        return schema.query_type
    if operation is RootOperation.MUTATION:
        return schema.mutation_type
    if operation is RootOperation.SUBSCRIPTION:
        return schema.subscription_type
    raise ValueError(f"Unknown root operation: {operation!r}")


def root_fields(schema: GraphQLSchema, operation: RootOperation) -> Optional[dict]:
    """Get the fields of a root operation type.

    Returns None when the root type is absent, which is distinct from a
    root type that happens to declare no fields.
    """
    operation_type = root_type(schema, operation)
    if operation_type is None:
        return None
    return operation_type.fields
