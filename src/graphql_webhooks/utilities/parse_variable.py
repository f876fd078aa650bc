from json import loads
from typing import Any, Callable, Dict

from graphql import (
    GraphQLSchema,
    ListTypeNode,
    NonNullTypeNode,
    TypeNode,
    VariableDefinitionNode,
    is_input_object_type,
    is_scalar_type,
)
from graphql.pyutils import Undefined

__all__ = ["parse_variable"]


def parse_boolean(value: str) -> Any:
    return {"true": True, "false": False}.get(value, value)


def parse_number(convert: Callable[[str], Any]) -> Callable[[str], Any]:
    def parse(value: str) -> Any:
        try:
            return convert(value)
        except ValueError:
            return value

    return parse


parse_builtin_scalar: Dict[str, Callable[[str], Any]] = {
    "Int": parse_number(int),
    "Float": parse_number(float),
    "Boolean": parse_boolean,
}


def parse_variable(
    value: Any, variable: VariableDefinitionNode, schema: GraphQLSchema
) -> Any:
    """Prepare a raw input value for the given variable.

    Input values often arrive as strings, e.g. from query parameters. This function
    converts such strings into the Python values expected by the declared type of
    the variable: numbers and booleans for the built-in scalars and dictionaries for
    input objects passed as JSON. Values that cannot be converted are passed through,
    so that the errors are reported when the values are coerced during execution.

    A missing value (``None``) results in ``Undefined``, meaning the variable should
    not be provided at all.
    """
    if value is None or value is Undefined:
        return Undefined
    return parse_value(value, variable.type, schema)


def parse_value(value: Any, type_node: TypeNode, schema: GraphQLSchema) -> Any:
    if isinstance(type_node, NonNullTypeNode):
        return parse_value(value, type_node.type, schema)

    if isinstance(type_node, ListTypeNode):
        values = value if isinstance(value, (list, tuple)) else [value]
        return [parse_value(item, type_node.type, schema) for item in values]

    type_ = schema.get_type(type_node.name.value)  # type: ignore
    if is_scalar_type(type_):
        name = type_.name  # type: ignore
        if isinstance(value, str):
            parse = parse_builtin_scalar.get(name)
            return parse(value) if parse else value
        if name in ("String", "ID") and isinstance(value, (int, float)):
            if not isinstance(value, bool):
                return str(value)
    elif is_input_object_type(type_) and isinstance(value, str):
        try:
            return loads(value)
        except ValueError:
            return value
    return value
