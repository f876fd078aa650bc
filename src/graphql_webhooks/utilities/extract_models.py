from typing import Dict, List

from graphql import (
    GraphQLNamedType,
    GraphQLOutputType,
    GraphQLSchema,
    get_named_type,
    get_nullable_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
)

from ..pyutils import param_case

__all__ = ["extract_models"]


def extract_models(schema: GraphQLSchema) -> List[str]:
    """Find the object types of the schema that can be fetched by reference.

    An object type with an ``id`` field is considered a model if the query type
    allows fetching a list of them through a field named like the type in plural
    (e.g. ``users`` for ``User``) without required arguments, and a single one
    through a field named like the type (e.g. ``user``) with an ``id`` as its only
    argument.
    """
    query_type = schema.query_type
    if not query_type:
        return []

    candidates: Dict[str, Dict[str, bool]] = {}
    for field_name, field in query_type.fields.items():
        named_type = get_named_type(field.type)
        if not has_id(named_type):
            continue
        flags = candidates.setdefault(named_type.name, {"list": False, "single": False})
        if is_list_of(field.type, named_type):
            if is_name_equal(field_name, f"{named_type.name}s") and not any(
                is_non_null_type(arg.type) for arg in field.args.values()
            ):
                flags["list"] = True
        elif is_name_equal(field_name, named_type.name) and list(field.args) == ["id"]:
            flags["single"] = True

    return [
        name for name, flags in candidates.items() if flags["list"] and flags["single"]
    ]


def has_id(type_: GraphQLNamedType) -> bool:
    return is_object_type(type_) and "id" in type_.fields  # type: ignore


def is_list_of(type_: GraphQLOutputType, expected: GraphQLNamedType) -> bool:
    type_ = get_nullable_type(type_)  # type: ignore
    if not is_list_type(type_):
        return False
    item_type = get_nullable_type(type_.of_type)  # type: ignore
    return item_type is expected


def is_name_equal(a: str, b: str) -> bool:
    return param_case(a) == param_case(b)
