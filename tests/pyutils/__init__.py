"""Tests for graphql_webhooks.pyutils"""
