"""Utility modules for formatting, validation and logging."""
