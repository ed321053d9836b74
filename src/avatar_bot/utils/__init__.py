"""Shared utilities: configuration loading and structured logging."""
