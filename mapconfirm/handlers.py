"""Caller-supplied per-key handlers.

An extra handler gets the current item and returns True when it dealt with
the item (counted as an action, move on) or False to have the same item
asked about again.
"""

from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Tuple, Union

from .errors import ConfigurationError
from .keys import describe_key, reserved_keys

HandlerFunc = Callable[[Any], bool]


class ActionHandler(NamedTuple):
    """A handler function and the help line shown for its key."""

    handler: HandlerFunc
    help: str


HandlerSpec = Union[ActionHandler, Tuple[HandlerFunc, str]]


def validate_handlers(
    extra_handlers: Optional[Mapping[str, HandlerSpec]], help_key: str
) -> Dict[str, ActionHandler]:
    """Check extra handlers and return them as an ordered key -> handler dict.

    Args:
        extra_handlers: Mapping of single-character key to a
            ``(handler, help)`` pair, or None
        help_key: The key bound to help in this run

    Returns:
        Dict in the caller's order with every value an ``ActionHandler``

    Raises:
        ConfigurationError: If a key is not a single character, collides
            with a built-in key, or its entry is not a callable/help pair
    """
    if not extra_handlers:
        return {}

    reserved = reserved_keys(help_key)
    handlers: Dict[str, ActionHandler] = {}
    for key, spec in extra_handlers.items():
        if not isinstance(key, str) or len(key) != 1:
            raise ConfigurationError(
                f"Handler key must be a single character, got {key!r}"
            )
        if key in reserved:
            raise ConfigurationError(
                f"Handler key {describe_key(key)!r} is already bound to a built-in answer"
            )
        try:
            func, help_text = spec
        except (TypeError, ValueError):
            raise ConfigurationError(
                f"Handler for key {describe_key(key)!r} must be a (function, help) pair"
            ) from None
        if not callable(func):
            raise ConfigurationError(
                f"Handler for key {describe_key(key)!r} is not callable"
            )
        handlers[key] = ActionHandler(func, str(help_text))
    return handlers
