"""Tests for the schema tool handlers.

Tests cover:
- Root operation field listing and lookup
- Type listing, lookup and field listing
- Schema search
- Handler set built for a schema
- Round-trip of printed definitions
"""

import re

import pytest
from graphql import (
    GraphQLField,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
    parse,
    print_ast,
)

from graphql_schema_mcp.kinds import RootOperation, is_field_bearing, root_fields
from graphql_schema_mcp.tools.handlers import (
    build_tool_handlers,
    get_root_field,
    get_type,
    get_type_fields,
    list_root_fields,
    list_types,
    search_schema,
)


@pytest.fixture
def code_first_schema():
    """Schema built in code: no syntax nodes, no descriptions."""
    return GraphQLSchema(
        query=GraphQLObjectType("Query", {"hello": GraphQLField(GraphQLString)})
    )


@pytest.mark.unit
class TestRootFieldTools:
    """Test list/get root operation field handlers."""

    def test_list_query_fields(self, minimal_schema):
        fields = root_fields(minimal_schema, RootOperation.QUERY)
        assert list_root_fields(fields) == "user"

    def test_list_fields_declaration_order(self, shop_schema):
        fields = root_fields(shop_schema, RootOperation.QUERY)
        assert list_root_fields(fields) == "user, users, search"

    def test_get_query_field(self, minimal_schema):
        fields = root_fields(minimal_schema, RootOperation.QUERY)
        assert "user(id: ID!): User" in get_root_field(fields, "user")

    def test_get_mutation_field(self, shop_schema):
        fields = root_fields(shop_schema, RootOperation.MUTATION)
        assert get_root_field(fields, "createUser") == "createUser(input: UserInput!): User!"

    def test_get_missing_field(self, minimal_schema):
        fields = root_fields(minimal_schema, RootOperation.QUERY)
        assert get_root_field(fields, "missing") == "Field not found or has no definition"

    def test_get_field_is_case_sensitive(self, minimal_schema):
        fields = root_fields(minimal_schema, RootOperation.QUERY)
        assert get_root_field(fields, "User") == "Field not found or has no definition"

    def test_get_field_without_syntax_node(self, code_first_schema):
        fields = root_fields(code_first_schema, RootOperation.QUERY)
        assert get_root_field(fields, "hello") == "Field not found or has no definition"


@pytest.mark.unit
class TestListTypes:
    """Test list_types."""

    def test_excludes_introspection_types(self, shop_schema):
        names = list_types(shop_schema).split(", ")
        assert names
        assert not [name for name in names if name.startswith("__")]

    def test_includes_user_and_builtin_types(self, shop_schema):
        names = set(list_types(shop_schema).split(", "))
        assert {
            "User",
            "Node",
            "Order",
            "OrderStatus",
            "SearchResult",
            "DateTime",
            "UserInput",
            "Query",
            "Mutation",
            "String",
            "Boolean",
        } <= names

    def test_matches_type_map(self, shop_schema):
        expected = [name for name in shop_schema.type_map if not name.startswith("__")]
        assert list_types(shop_schema) == ", ".join(expected)


@pytest.mark.unit
class TestGetType:
    """Test get_type."""

    def test_prints_sdl_definition(self, shop_schema):
        text = get_type(shop_schema, "User")
        assert '"""A customer of the shop"""' in text
        assert "type User implements Node {" in text
        assert "orders(first: Int = 10): [Order!]!" in text

    def test_prints_enum(self, shop_schema):
        text = get_type(shop_schema, "OrderStatus")
        assert text.startswith("enum OrderStatus {")
        assert "SHIPPED" in text

    def test_prints_union(self, shop_schema):
        assert get_type(shop_schema, "SearchResult") == "union SearchResult = User | Order"

    def test_not_found(self, shop_schema):
        assert get_type(shop_schema, "Product") == 'Type "Product" not found'

    def test_builtin_scalar_summary(self, shop_schema):
        text = get_type(shop_schema, "String")
        lines = text.split("\n")

        assert lines[0] == "Type: String"
        assert lines[1].startswith("Description: The `String` scalar type")
        assert lines[-1] == "Kind: SCALAR"

    def test_introspection_type_summary(self, shop_schema):
        text = get_type(shop_schema, "__Schema")
        assert text.startswith("Type: __Schema\n")
        assert text.endswith("Kind: OBJECT")

    def test_missing_description_placeholder(self, code_first_schema):
        assert get_type(code_first_schema, "Query") == (
            "Type: Query\nDescription: No description\nKind: OBJECT"
        )


@pytest.mark.unit
class TestGetTypeFields:
    """Test get_type_fields."""

    def test_object_fields(self, shop_schema):
        assert get_type_fields(shop_schema, "Order") == (
            "id: ID!\n"
            "total: Float!\n"
            "status: OrderStatus!\n"
            "items: [String!]"
        )

    def test_interface_fields(self, shop_schema):
        assert get_type_fields(shop_schema, "Node") == "id: ID!"

    def test_input_object_fields(self, shop_schema):
        assert get_type_fields(shop_schema, "UserInput") == "name: String!\nemail: String!"

    def test_root_type_fields(self, shop_schema):
        assert get_type_fields(shop_schema, "Query").split("\n") == [
            "user: User",
            "users: [User!]!",
            "search: [SearchResult!]!",
        ]

    @pytest.mark.parametrize("type_name", ["User", "Node", "Order", "UserInput", "Query"])
    def test_line_count_matches_declared_fields(self, shop_schema, type_name):
        lines = get_type_fields(shop_schema, type_name).split("\n")
        declared = list(shop_schema.type_map[type_name].fields)

        assert len(lines) == len(declared)
        assert [line.split(":")[0] for line in lines] == declared

    @pytest.mark.parametrize("type_name", ["OrderStatus", "SearchResult", "DateTime", "String"])
    def test_not_field_bearing(self, shop_schema, type_name):
        assert get_type_fields(shop_schema, type_name) == (
            f'Type "{type_name}" is not an object type with fields'
        )

    def test_not_found(self, shop_schema):
        assert get_type_fields(shop_schema, "Product") == 'Type "Product" not found'


@pytest.mark.unit
class TestSearchSchema:
    """Test search_schema."""

    def test_matches_types_and_fields(self, shop_schema):
        assert search_schema(shop_schema, "user") == (
            "Matching types: User, UserInput\n"
            "Matching fields: Query.user, Query.users, Mutation.createUser"
        )

    def test_case_insensitive(self, shop_schema):
        assert search_schema(shop_schema, "ORDERSTATUS").startswith(
            "Matching types: OrderStatus\n"
        )

    def test_regex_pattern(self, shop_schema):
        text = search_schema(shop_schema, "^e")
        assert text.split("\n")[1] == "Matching fields: User.email, UserInput.email"

    def test_no_matches(self, shop_schema):
        assert search_schema(shop_schema, "zzzNotInSchema") == (
            "Matching types: None\nMatching fields: None"
        )

    def test_skips_introspection_types(self, shop_schema):
        # __Type has a field named "kind", __TypeKind is an enum
        assert search_schema(shop_schema, "kind") == (
            "Matching types: None\nMatching fields: None"
        )

    def test_match_all(self, shop_schema):
        public = {
            name: graphql_type
            for name, graphql_type in shop_schema.type_map.items()
            if not name.startswith("__")
        }
        expected_fields = [
            f"{name}.{field_name}"
            for name, graphql_type in public.items()
            if is_field_bearing(graphql_type)
            for field_name in graphql_type.fields
        ]

        type_line, field_line = search_schema(shop_schema, ".*").split("\n")

        assert type_line == f"Matching types: {', '.join(public)}"
        assert field_line == f"Matching fields: {', '.join(expected_fields)}"

    def test_invalid_regex_raises(self, shop_schema):
        with pytest.raises(re.error):
            search_schema(shop_schema, "(unclosed")


@pytest.mark.unit
class TestBuildToolHandlers:
    """Test the handler set built for a schema."""

    def test_query_only_schema(self, minimal_schema):
        handlers = build_tool_handlers(minimal_schema)

        assert list(handlers) == [
            "list-query-fields",
            "get-query-field",
            "list-types",
            "get-type",
            "get-type-fields",
            "search-schema",
        ]

    def test_query_and_mutation_schema(self, shop_schema):
        handlers = build_tool_handlers(shop_schema)

        assert "list-mutation-fields" in handlers
        assert "get-mutation-field" in handlers
        assert "list-subscription-fields" not in handlers
        assert "get-subscription-field" not in handlers

    def test_subscription_schema(self, subscription_schema):
        handlers = build_tool_handlers(subscription_schema)

        assert handlers["list-subscription-fields"]() == "orderShipped"
        assert handlers["get-subscription-field"](fieldName="orderShipped") == (
            "orderShipped(orderId: ID!): String!"
        )
        assert "list-mutation-fields" not in handlers

    def test_handlers_close_over_schema(self, shop_schema):
        handlers = build_tool_handlers(shop_schema)

        assert handlers["list-query-fields"]() == "user, users, search"
        assert handlers["get-query-field"](fieldName="missing") == (
            "Field not found or has no definition"
        )
        assert handlers["get-type"](typeName="Nope") == 'Type "Nope" not found'
        assert handlers["get-type-fields"](typeName="Node") == "id: ID!"
        assert handlers["search-schema"](pattern="total") == (
            "Matching types: None\nMatching fields: Order.total"
        )
        assert "Order" in handlers["list-types"]().split(", ")


@pytest.mark.unit
class TestRoundTrip:
    """Printed definitions parse back to the same definition."""

    @pytest.mark.parametrize(
        "type_name", ["User", "Node", "Order", "OrderStatus", "SearchResult", "UserInput"]
    )
    def test_type_round_trip(self, shop_schema, type_name):
        original = shop_schema.type_map[type_name].ast_node
        reparsed = parse(get_type(shop_schema, type_name)).definitions[0]

        assert reparsed.kind == original.kind
        assert reparsed.name.value == original.name.value
        assert print_ast(reparsed) == print_ast(original)
        if hasattr(original, "fields"):
            assert [f.name.value for f in reparsed.fields] == [
                f.name.value for f in original.fields
            ]

    def test_field_round_trip(self, shop_schema):
        fields = root_fields(shop_schema, RootOperation.QUERY)
        printed = get_root_field(fields, "users")
        reparsed = parse(f"type Query {{ {printed} }}").definitions[0].fields[0]

        assert reparsed.name.value == "users"
        assert print_ast(reparsed.type) == "[User!]!"
        assert [arg.name.value for arg in reparsed.arguments] == ["filter"]
