"""Shared utilities for when-present."""
