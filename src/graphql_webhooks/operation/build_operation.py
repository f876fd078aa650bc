from typing import Collection, List, Optional, Set, Union, cast

from graphql import (
    ArgumentNode,
    DocumentNode,
    FieldNode,
    GraphQLField,
    GraphQLInputType,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLUnionType,
    InlineFragmentNode,
    ListTypeNode,
    NamedTypeNode,
    NameNode,
    NonNullTypeNode,
    OperationDefinitionNode,
    OperationType,
    SelectionSetNode,
    TypeNode,
    VariableDefinitionNode,
    VariableNode,
    get_named_type,
    is_leaf_type,
    is_list_type,
    is_non_null_type,
    is_union_type,
)

from ..error import UnknownOperationFieldError
from ..pyutils import camel_case

__all__ = [
    "build_operation",
    "build_operation_name",
    "build_variable_type",
    "OperationBuildContext",
]


CompositeType = Union[GraphQLObjectType, GraphQLInterfaceType]

ID_FIELD = "id"


class OperationBuildContext:
    """Traversal state of a single :func:`build_operation` call.

    The context collects the variable definitions in the order in which the
    arguments are met and keeps track of the composite types that are currently
    being expanded on the path from the root field. A fresh context is created for
    every call, so builds never share state.
    """

    models: Collection[str]
    ignore: Collection[str]
    variables: List[VariableDefinitionNode]
    variable_names: Set[str]
    visited: Set[str]

    __slots__ = "models", "ignore", "variables", "variable_names", "visited"

    def __init__(self, models: Collection[str], ignore: Collection[str]) -> None:
        self.models = frozenset(models)
        self.ignore = frozenset(ignore)
        self.variables = []
        self.variable_names = set()
        self.visited = set()

    def is_ignored(
        self, type_: GraphQLNamedType, parent: GraphQLNamedType, field_name: str
    ) -> bool:
        """Check whether the type or the field referencing it is exempt from
        collapsing."""
        ignore = self.ignore
        return type_.name in ignore or f"{parent.name}.{field_name}" in ignore

    def should_collapse(
        self, type_: GraphQLNamedType, parent: GraphQLNamedType, field_name: str
    ) -> bool:
        """Check whether a reference to the type collapses to its ``id``.

        Models without an ``id`` field are expanded like other types.
        """
        return (
            type_.name in self.models
            and ID_FIELD in getattr(type_, "fields", ())
            and not self.is_ignored(type_, parent, field_name)
        )

    def add_variable(self, name: str, type_: GraphQLInputType) -> VariableNode:
        """Add a variable definition and return the variable for the argument.

        A name that is already taken gets the lowest free numeric suffix, e.g.
        ``messageAddedAuthorPostsFirst2``.
        """
        names = self.variable_names
        unique_name, suffix = name, 1
        while unique_name in names:
            suffix += 1
            unique_name = f"{name}{suffix}"
        names.add(unique_name)
        variable = VariableNode(name=NameNode(value=unique_name))
        self.variables.append(
            VariableDefinitionNode(
                variable=variable, type=build_variable_type(type_), directives=[]
            )
        )
        return variable


def build_operation(
    schema: GraphQLSchema,
    kind: Union[OperationType, str],
    field: str,
    models: Optional[Collection[str]] = None,
    ignore: Optional[Collection[str]] = None,
) -> DocumentNode:
    """Build an operation document for a root field of the schema.

    The document contains a single operation of the given kind which selects the
    given field of the corresponding root type. The selection set of the field is
    built by walking the type graph of the schema:

    - leaf fields (scalars and enums) are selected as they are,
    - unions get an inline fragment for every possible type,
    - references to one of the ``models`` with an ``id`` field (besides the root
      field itself) collapse to a selection of their ``id`` unless the type name or
      the referencing ``"Parent.field"`` is in ``ignore``,
    - fields of a type that is already being expanded on the current path are
      skipped, so cyclic schemas produce finite documents.

    Every argument on the way becomes a variable of the operation. Arguments of the
    root field keep their name, all others are named after their path, e.g.
    ``$messageAddedAuthorPostsFirst``. Clashing names get a numeric suffix.
    """
    operation = OperationType(kind)
    root_type = get_root_type(schema, operation)
    root_field = root_type.fields.get(field) if root_type else None
    if not root_type or not root_field:
        raise UnknownOperationFieldError(operation.value, field)

    context = OperationBuildContext(models or (), ignore or ())
    selection = build_field(context, root_type, field, root_field, [], is_root=True)

    return DocumentNode(
        definitions=[
            OperationDefinitionNode(
                operation=operation,
                name=NameNode(value=build_operation_name(field, operation)),
                variable_definitions=context.variables,
                directives=[],
                selection_set=SelectionSetNode(selections=[selection]),
            )
        ]
    )


def build_operation_name(field: str, kind: Union[OperationType, str]) -> str:
    """Get the name of the operation for a root field, e.g. ``userQuery``."""
    return camel_case(f"{field}_{OperationType(kind).value}")


def get_root_type(
    schema: GraphQLSchema, operation: OperationType
) -> Optional[GraphQLObjectType]:
    if operation == OperationType.QUERY:
        return schema.query_type
    if operation == OperationType.MUTATION:
        return schema.mutation_type
    return schema.subscription_type


def build_field(
    context: OperationBuildContext,
    parent: CompositeType,
    field_name: str,
    field: GraphQLField,
    path: List[str],
    is_root: bool = False,
) -> FieldNode:
    path = [*path, field_name]

    arguments: List[ArgumentNode] = []
    for arg_name, arg in field.args.items():
        variable_name = arg_name if is_root else camel_case("_".join([*path, arg_name]))
        arguments.append(
            ArgumentNode(
                name=NameNode(value=arg_name),
                value=context.add_variable(variable_name, arg.type),
            )
        )

    named_type = get_named_type(field.type)
    selection_set = (
        None
        if is_leaf_type(named_type)
        else build_selection_set(context, parent, field_name, named_type, path, is_root)
    )

    return FieldNode(
        name=NameNode(value=field_name),
        arguments=arguments,
        directives=[],
        selection_set=selection_set,
    )


def build_selection_set(
    context: OperationBuildContext,
    parent: CompositeType,
    field_name: str,
    type_: GraphQLNamedType,
    path: List[str],
    is_root: bool,
) -> SelectionSetNode:
    if is_union_type(type_):
        type_ = cast(GraphQLUnionType, type_)
        visited = context.visited
        visited.add(type_.name)
        try:
            fragments = [
                InlineFragmentNode(
                    type_condition=NamedTypeNode(name=NameNode(value=member.name)),
                    directives=[],
                    selection_set=build_composite_selection_set(
                        context,
                        parent,
                        field_name,
                        member,
                        # keeps variable names of sibling branches apart
                        [*path, member.name],
                        is_root,
                    ),
                )
                for member in type_.types
            ]
        finally:
            visited.discard(type_.name)
        return SelectionSetNode(selections=fragments)

    return build_composite_selection_set(
        context, parent, field_name, cast(CompositeType, type_), path, is_root
    )


def build_composite_selection_set(
    context: OperationBuildContext,
    parent: CompositeType,
    field_name: str,
    type_: CompositeType,
    path: List[str],
    is_root: bool,
) -> SelectionSetNode:
    if not is_root and context.should_collapse(type_, parent, field_name):
        return SelectionSetNode(selections=[build_leaf(ID_FIELD)])

    visited = context.visited
    if type_.name in visited:
        # a union member that is already being expanded further up the path
        return SelectionSetNode(selections=[build_leaf("__typename")])
    visited.add(type_.name)
    try:
        selections = [
            build_field(context, type_, name, field, path)
            for name, field in type_.fields.items()
            if get_named_type(field.type).name not in visited
        ]
    finally:
        visited.discard(type_.name)

    return SelectionSetNode(selections=selections or [build_leaf("__typename")])


def build_leaf(name: str) -> FieldNode:
    return FieldNode(name=NameNode(value=name), arguments=[], directives=[])


def build_variable_type(type_: GraphQLInputType) -> TypeNode:
    """Get the AST type node matching a GraphQL input type."""
    if is_non_null_type(type_):
        return NonNullTypeNode(
            type=build_variable_type(cast(GraphQLNonNull, type_).of_type)
        )
    if is_list_type(type_):
        return ListTypeNode(type=build_variable_type(cast(GraphQLList, type_).of_type))
    return NamedTypeNode(name=NameNode(value=cast(GraphQLNamedType, type_).name))
