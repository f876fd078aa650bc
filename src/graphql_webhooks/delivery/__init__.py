"""Result delivery

The :mod:`graphql_webhooks.delivery` package is responsible for pushing the results
of subscriptions to the callback URLs of the subscribers.
"""

from .sink import DeliverySink, HttpDeliverySink

__all__ = ["DeliverySink", "HttpDeliverySink"]
