"""Webhook Errors

The :mod:`graphql_webhooks.error` package contains the errors raised when building
operations and when running subscription sessions.
"""

from .webhook_error import (
    WebhookError,
    UnknownOperationFieldError,
    UnknownSubscriptionFieldError,
    UnknownSessionIdError,
    ExecutionError,
    DeliveryError,
    StreamError,
)

__all__ = [
    "WebhookError",
    "UnknownOperationFieldError",
    "UnknownSubscriptionFieldError",
    "UnknownSessionIdError",
    "ExecutionError",
    "DeliveryError",
    "StreamError",
]
