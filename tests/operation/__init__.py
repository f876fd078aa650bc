"""Tests for graphql_webhooks.operation"""
