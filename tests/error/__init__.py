"""Tests for graphql_webhooks.error"""
