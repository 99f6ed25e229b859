"""Prompt results returned by a prompter for one item.

A prompter may return a plain value; :func:`as_prompt_result` turns it into
one of the three variants:

- ``DisplayString``: ask the user, showing this text.
- ``Verdict``: decided already, act when true and skip when false.
- ``Deferred``: decided by calling a zero-argument function, only when the
  item is actually reached.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union


@dataclass(frozen=True)
class DisplayString:
    """Interactive prompt text for an item."""

    text: str


@dataclass(frozen=True)
class Verdict:
    """Pre-decided answer: act on the item or skip it without asking."""

    act: bool


@dataclass(frozen=True)
class Deferred:
    """Answer computed lazily by calling ``thunk``."""

    thunk: Callable[[], Any]


PromptResult = Union[DisplayString, Verdict, Deferred]

SKIP = Verdict(False)
AUTO_ACT = Verdict(True)


def as_prompt_result(value: Any) -> PromptResult:
    """Coerce a raw prompter return value into a prompt result.

    Strings become prompts, callables are deferred, anything else is judged
    by its truth value.
    """
    if isinstance(value, (DisplayString, Verdict, Deferred)):
        return value
    if isinstance(value, str):
        return DisplayString(value)
    if callable(value):
        return Deferred(value)
    return Verdict(bool(value))


def is_interactive(result: PromptResult) -> bool:
    """Return True when the user has to be asked about the item."""
    return isinstance(result, DisplayString)


def resolve(result: PromptResult) -> bool:
    """Reduce a prompt result to act (True) or skip (False).

    A ``DisplayString`` resolves to True: this is only consulted once the user
    has already agreed to act on everything that is not explicitly skipped.
    A ``Deferred`` thunk is called each time it is resolved.
    """
    if isinstance(result, DisplayString):
        return True
    if isinstance(result, Verdict):
        return result.act
    return bool(result.thunk())
