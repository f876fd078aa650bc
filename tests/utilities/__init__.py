"""Tests for graphql_webhooks.utilities"""
