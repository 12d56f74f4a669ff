"""
Exception hierarchy for monoutils.

Callers that only care about "something in monoutils rejected my input"
catch UtilsError. Everything else propagates with a full traceback.
"""

from __future__ import annotations


class UtilsError(Exception):
    """Base class for all errors raised by monoutils."""
    pass


class InvalidArgumentError(UtilsError, ValueError):
    """
    Raised when a utility receives an argument outside its contract.

    Examples:
        - chunk(items, 0)
        - capitalize(None)
        - sum(1, "2")

    Subclasses ValueError so generic `except ValueError` handlers keep working.
    """
    pass


class ConfigError(UtilsError):
    """Raised when a demo config file is missing or malformed."""
    pass


__all__ = ["UtilsError", "InvalidArgumentError", "ConfigError"]
