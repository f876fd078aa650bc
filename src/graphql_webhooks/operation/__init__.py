"""Operation building

The :mod:`graphql_webhooks.operation` package is responsible for creating executable
operation documents from the fields of a schema.
"""

from .build_operation import (
    build_operation,
    build_operation_name,
    build_variable_type,
    OperationBuildContext,
)
from .get_operation_info import get_operation_info, OperationInfo

__all__ = [
    "build_operation",
    "build_operation_name",
    "build_variable_type",
    "get_operation_info",
    "OperationBuildContext",
    "OperationInfo",
]
