"""Daily puzzle domain services.

This package contains the in-memory score logic that is imported by
HTTP routes, socket handlers and CLI commands, keeping transport concerns
separated from the daily record rules.
"""
