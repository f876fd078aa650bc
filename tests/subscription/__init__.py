"""Tests for graphql_webhooks.subscription"""
