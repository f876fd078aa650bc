"""Tests for graphql_webhooks"""
