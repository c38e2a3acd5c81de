"""Shared helpers for errors and logging."""
