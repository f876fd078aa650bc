"""GraphQL-Webhooks

GraphQL-Webhooks turns the fields of a GraphQL schema into executable operations
without hand-written queries, and runs subscriptions whose results are pushed to
webhook URLs registered by the subscribers.

The :mod:`graphql_webhooks` package is the main entry point of the library. The
most important names are re-exported here:

- :func:`build_operation` builds an operation document for a root field.
- :class:`SubscriptionManager` starts, updates and stops webhook subscriptions.
- :class:`HttpDeliverySink` posts results to the webhook URLs.
"""

# The GraphQL-Webhooks version info.
from .version import version, version_info

# Build executable operations from the schema.
from .operation import (
    build_operation,
    build_operation_name,
    build_variable_type,
    get_operation_info,
    OperationBuildContext,
    OperationInfo,
)

# Run subscriptions delivering to webhooks.
from .subscription import (
    SubscriptionManager,
    BuiltOperation,
    StartedSubscription,
    StoppedSubscription,
    Session,
    SessionStore,
)

# Push results to the webhook URLs.
from .delivery import DeliverySink, HttpDeliverySink

# Helpers for schemas, variables and contexts.
from .utilities import extract_models, parse_variable, resolve_context

# Errors.
from .error import (
    WebhookError,
    UnknownOperationFieldError,
    UnknownSubscriptionFieldError,
    UnknownSessionIdError,
    ExecutionError,
    DeliveryError,
    StreamError,
)

__version__ = version
__version_info__ = version_info

__all__ = [
    "version",
    "version_info",
    "build_operation",
    "build_operation_name",
    "build_variable_type",
    "get_operation_info",
    "OperationBuildContext",
    "OperationInfo",
    "SubscriptionManager",
    "BuiltOperation",
    "StartedSubscription",
    "StoppedSubscription",
    "Session",
    "SessionStore",
    "DeliverySink",
    "HttpDeliverySink",
    "extract_models",
    "parse_variable",
    "resolve_context",
    "WebhookError",
    "UnknownOperationFieldError",
    "UnknownSubscriptionFieldError",
    "UnknownSessionIdError",
    "ExecutionError",
    "DeliveryError",
    "StreamError",
]
