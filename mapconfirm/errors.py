#!/usr/bin/env python3
"""
Exception types for mapconfirm.
"""


class MapConfirmError(Exception):
    """Base exception for mapconfirm-specific errors."""

    pass


class ConfigurationError(MapConfirmError):
    """Raised when a confirmation run is set up with invalid arguments.

    Detected before the first item is pulled, so no prompt is ever shown
    for a misconfigured run.
    """

    pass


class ItemSourceError(ConfigurationError):
    """Raised when the item source is neither iterable nor a pull function."""

    pass


class CommandFailedError(MapConfirmError):
    """Raised when a command run on an accepted item exits non-zero."""

    def __init__(self, argv, returncode: int):
        self.argv = list(argv)
        self.returncode = returncode
        super().__init__(f"Command exited with status {returncode}: {' '.join(self.argv)}")
