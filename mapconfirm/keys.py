"""Key bindings for the confirmation prompt.

Keys are single characters as returned by ``click.getchar``. The answer keys
are fixed; only the help key is configurable.
"""

from enum import Enum
from typing import Optional

ESC = "\x1b"
DEL = "\x7f"
SPC = " "

EXIT_KEYS = frozenset({"q", ESC})
ACCEPT_KEYS = frozenset({"y", "Y", SPC})
DECLINE_KEYS = frozenset({"n", "N", DEL})
ACCEPT_AND_EXIT_KEY = "."
ACCEPT_ALL_KEY = "!"

FIXED_KEYS = EXIT_KEYS | ACCEPT_KEYS | DECLINE_KEYS | {ACCEPT_AND_EXIT_KEY, ACCEPT_ALL_KEY}

_NAMED_KEYS = {
    SPC: "SPC",
    DEL: "DEL",
    ESC: "ESC",
    "\r": "RET",
    "\n": "C-j",
    "\t": "TAB",
    "\x00": "C-@",
}


class Decision(str, Enum):
    """What a key press asks the driver to do with the current item."""

    EXIT = "exit"
    ACCEPT = "accept"
    DECLINE = "decline"
    ACCEPT_AND_EXIT = "accept_and_exit"
    ACCEPT_ALL = "accept_all"
    HELP = "help"
    OTHER = "other"  # extra handler or invalid input


def reserved_keys(help_key: str) -> frozenset:
    """Return every key with a built-in meaning, the help key included."""
    return FIXED_KEYS | {help_key}


def classify_key(key: str, help_key: str) -> Decision:
    """Map a key press to a built-in decision.

    Checked in a fixed order: exit, accept, decline, accept-and-exit,
    accept-all, help. Anything else is ``Decision.OTHER`` and is left to the
    caller's extra handlers.
    """
    if key in EXIT_KEYS:
        return Decision.EXIT
    if key in ACCEPT_KEYS:
        return Decision.ACCEPT
    if key in DECLINE_KEYS:
        return Decision.DECLINE
    if key == ACCEPT_AND_EXIT_KEY:
        return Decision.ACCEPT_AND_EXIT
    if key == ACCEPT_ALL_KEY:
        return Decision.ACCEPT_ALL
    if key == help_key:
        return Decision.HELP
    return Decision.OTHER


def describe_key(key: Optional[str]) -> str:
    """Return a short printable name for a key.

    Control characters are shown as ``C-<letter>`` and the common whitespace
    and editing keys by name (``SPC``, ``DEL``, ``ESC``, ``RET``, ``TAB``).

    >>> describe_key(" ")
    'SPC'
    >>> describe_key("\\x08")
    'C-h'
    """
    if not key:
        return ""
    if key in _NAMED_KEYS:
        return _NAMED_KEYS[key]
    if len(key) == 1 and ord(key) < 0x20:
        return "C-" + chr(ord(key) + 0x60)
    if key.startswith(ESC) and len(key) > 1:
        # Multi-byte escape sequences (arrow keys and the like)
        return "ESC " + key[1:]
    return key
