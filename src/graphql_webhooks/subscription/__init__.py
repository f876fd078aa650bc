"""Webhook Subscriptions

The :mod:`graphql_webhooks.subscription` package is responsible for running
subscriptions and delivering their results to the URLs of the subscribers.
"""

from .manager import (
    SubscriptionManager,
    BuiltOperation,
    StartedSubscription,
    StoppedSubscription,
)
from .session import Session, SessionStore

__all__ = [
    "SubscriptionManager",
    "BuiltOperation",
    "StartedSubscription",
    "StoppedSubscription",
    "Session",
    "SessionStore",
]
