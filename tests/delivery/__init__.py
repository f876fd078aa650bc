"""Tests for graphql_webhooks.delivery"""
