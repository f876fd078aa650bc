from typing import cast

from graphql import (
    OperationDefinitionNode,
    VariableDefinitionNode,
    build_schema,
    parse,
)
from graphql.pyutils import Undefined

from graphql_webhooks.utilities import parse_variable

schema = build_schema(
    """
    type Query { search(filter: Filter, limit: Int): [String] }
    input Filter { term: String, exact: Boolean }
    enum Color { RED, GREEN }
    """
)


def variable(definition: str) -> VariableDefinitionNode:
    document = parse(f"query q({definition}) {{ search }}")
    operation = cast(OperationDefinitionNode, document.definitions[0])
    return operation.variable_definitions[0]


def describe_parse_variable():
    def treats_missing_values_as_undefined():
        assert parse_variable(None, variable("$limit: Int"), schema) is Undefined
        assert parse_variable(Undefined, variable("$limit: Int!"), schema) is Undefined

    def parses_numbers_from_strings():
        assert parse_variable("42", variable("$limit: Int"), schema) == 42
        assert parse_variable("1.5", variable("$ratio: Float"), schema) == 1.5
        assert parse_variable("42", variable("$limit: Int!"), schema) == 42

    def passes_invalid_numbers_through():
        assert parse_variable("many", variable("$limit: Int"), schema) == "many"
        assert parse_variable("1.5", variable("$limit: Int"), schema) == "1.5"

    def parses_booleans_from_strings():
        assert parse_variable("true", variable("$flag: Boolean"), schema) is True
        assert parse_variable("false", variable("$flag: Boolean"), schema) is False
        assert parse_variable("yes", variable("$flag: Boolean"), schema) == "yes"

    def keeps_strings_for_string_and_id():
        assert parse_variable("42", variable("$id: ID!"), schema) == "42"
        assert parse_variable("hello", variable("$s: String"), schema) == "hello"

    def converts_numbers_for_string_and_id():
        assert parse_variable(42, variable("$id: ID!"), schema) == "42"
        assert parse_variable(1.5, variable("$s: String"), schema) == "1.5"
        assert parse_variable(True, variable("$s: String"), schema) is True

    def keeps_non_string_values():
        assert parse_variable(7, variable("$limit: Int"), schema) == 7
        assert parse_variable(False, variable("$flag: Boolean"), schema) is False

    def keeps_enum_values():
        assert parse_variable("RED", variable("$color: Color"), schema) == "RED"

    def parses_items_of_lists():
        assert parse_variable(["1", "2"], variable("$ids: [Int!]!"), schema) == [1, 2]
        assert parse_variable(
            [["true"], ["false", None]], variable("$flags: [[Boolean]]"), schema
        ) == [[True], [False, None]]

    def wraps_single_values_for_lists():
        assert parse_variable("3", variable("$ids: [Int]"), schema) == [3]

    def parses_input_objects_from_json():
        assert parse_variable(
            '{"term": "graphql", "exact": true}', variable("$filter: Filter"), schema
        ) == {"term": "graphql", "exact": True}

    def passes_invalid_json_through():
        assert parse_variable("{term", variable("$filter: Filter"), schema) == "{term"

    def keeps_input_objects_given_as_dicts():
        value = {"term": "graphql"}
        assert parse_variable(value, variable("$filter: Filter"), schema) is value

    def passes_values_of_unknown_types_through():
        assert parse_variable("x", variable("$x: Unknown"), schema) == "x"
