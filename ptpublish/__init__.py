"""Argument checks for a private-tracker upload, with an HTTP client, query-string helpers and logging setup."""

__version__ = "1.0.1"