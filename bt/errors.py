"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from BTUserError.

Programming errors and bugs should NOT inherit from BTUserError:
they will propagate with full tracebacks.
"""

from __future__ import annotations


class BTUserError(Exception):
    """
    Base class for all user-facing errors in Block Templater.

    These errors indicate problems that the user can fix:
    malformed block specifications, invalid references, unreadable files, etc.
    """
    pass


__all__ = ["BTUserError"]
