"""Help text and prompt suffix generation.

Both are pure functions of their arguments so the same labels and handlers
always render the same text.
"""

from typing import Callable, List, Mapping, NamedTuple

from .handlers import ActionHandler
from .keys import (
    ACCEPT_ALL_KEY,
    ACCEPT_AND_EXIT_KEY,
    DEL,
    ESC,
    SPC,
    describe_key,
)


class HelpLabels(NamedTuple):
    """Words used to talk about items in help text."""

    singular: str = "object"
    plural: str = "objects"
    verb: str = "act on"


DEFAULT_LABELS = HelpLabels()


def build_help_text(
    labels: HelpLabels,
    handlers: Mapping[str, ActionHandler],
    describe: Callable[[str], str] = describe_key,
) -> str:
    """Render the help shown when the help key is pressed.

    Args:
        labels: Nouns and verb for the items being confirmed
        handlers: Extra handlers, one help line each in their given order
        describe: Turns a key into its printed name

    Returns:
        Multi-line help text
    """
    singular, plural, verb = labels
    lines: List[str] = [
        f"Type {describe(SPC)} or `y' to {verb} the current {singular}; "
        f"{describe(DEL)} or `n' to skip the current {singular};",
        f"{ACCEPT_ALL_KEY} to {verb} all remaining {plural};",
        f"{describe(ESC)} or `q' to exit;",
    ]
    for key, action in handlers.items():
        lines.append(f"{describe(key)} to {action.help};")
    lines.append(
        f"or {ACCEPT_AND_EXIT_KEY} (period) to {verb} the current {singular} and exit."
    )
    return "\n".join(lines)


def build_prompt_suffix(
    handlers: Mapping[str, ActionHandler],
    help_key: str,
    describe: Callable[[str], str] = describe_key,
) -> str:
    """Render the key reminder appended to every prompt.

    >>> build_prompt_suffix({}, "?")
    '(y, n, !, ., q, or ?) '
    """
    extra = "".join(f"{describe(key)}, " for key in handlers)
    return f"(y, n, {ACCEPT_ALL_KEY}, {ACCEPT_AND_EXIT_KEY}, q, {extra}or {describe(help_key)}) "
