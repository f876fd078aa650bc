from typing import List, NamedTuple, Optional

from graphql import (
    DocumentNode,
    OperationType,
    VariableDefinitionNode,
    get_operation_ast,
)

__all__ = ["get_operation_info", "OperationInfo"]


class OperationInfo(NamedTuple):
    """Kind, name and variable definitions of an operation"""

    operation: OperationType
    name: Optional[str]
    variables: List[VariableDefinitionNode]


def get_operation_info(
    document: DocumentNode, operation_name: Optional[str] = None
) -> Optional[OperationInfo]:
    """Get information about the operation in the given document.

    If the document holds more than one operation, the ``operation_name`` must be
    given to select one of them. Returns ``None`` if no operation can be found.
    """
    operation = get_operation_ast(document, operation_name)
    if not operation:
        return None
    return OperationInfo(
        operation.operation,
        operation.name.value if operation.name else None,
        list(operation.variable_definitions or ()),
    )
