"""Standardized exit codes for the mapconfirm CLI.

Following POSIX conventions and common CLI practices.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for the mapconfirm CLI."""

    SUCCESS = 0
    """Session completed, whatever the number of accepted items."""

    USER_ERROR = 1
    """User error: invalid arguments, unreadable item file, bad key bindings."""

    SYSTEM_ERROR = 2
    """System error: command not found, permission denied."""

    PROCESSING_ERROR = 3
    """A command run on an accepted item failed and --stop-on-error was given."""

    INTERRUPTED = 130
    """User interrupted with SIGINT (Ctrl+C) or closed input (Ctrl+D)."""
