"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from CocheckUserError.

Programming errors and bugs should NOT inherit from CocheckUserError —
they will propagate with full tracebacks.
"""

from __future__ import annotations


class CocheckUserError(Exception):
    """
    Base class for all user-facing errors.

    These errors indicate problems that the user can fix:
    configuration issues, missing paths, unreadable input.
    """
    pass


class ConfigLoadError(CocheckUserError, ValueError):
    """Invalid or unreadable configuration, with the offending field path in the message."""
    pass


class SourceNotFoundError(CocheckUserError):
    """A path given for checking does not exist."""
    pass


__all__ = ["CocheckUserError", "ConfigLoadError", "SourceNotFoundError"]
