"""Webhook Utilities

The :mod:`graphql_webhooks.utilities` package contains helpers for working with
schemas, variables and execution contexts.
"""

# Find the object types that can be referenced by id.
from .extract_models import extract_models

# Prepare raw input values for variables.
from .parse_variable import parse_variable

# Get the context value for an execution.
from .resolve_context import resolve_context

__all__ = ["extract_models", "parse_variable", "resolve_context"]
