"""Shared utilities for console output and content fetching."""
