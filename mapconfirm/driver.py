"""Item-by-item confirmation loop.

For each item pulled from a source the driver asks the prompter how to treat
it, reads one key when the user has to decide, and applies the actor to the
accepted items. The number of items acted upon is returned.

Answer keys, checked in this order:

- ``q``/ESC: stop, leaving the remaining items untouched
- ``y``/``Y``/SPC: act on the item and continue
- ``n``/``N``/DEL: skip the item and continue
- ``.``: act on the item and stop
- ``!``: act on this and every remaining item the prompter does not skip
- help key: show help, then ask about the same item again
- a key from ``extra_handlers``: let the handler decide
- anything else: complain, then ask about the same item again
"""

from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence

from .display import ConsoleKeyReader, KeyReader
from .errors import ConfigurationError
from .handlers import HandlerSpec, validate_handlers
from .help import DEFAULT_LABELS, HelpLabels, build_help_text, build_prompt_suffix
from .keys import FIXED_KEYS, Decision, classify_key
from .logging import get_logger
from .source import EXHAUSTED, ItemSource, SourceLike
from .verdicts import PromptResult, as_prompt_result, is_interactive, resolve

logger = get_logger(__name__)

Prompter = Callable[[Any], Any]
Actor = Callable[[Any], Any]


class DriverMode(str, Enum):
    """Where the driver is in a confirmation run."""

    PROMPTING = "prompting"
    RUN_TO_COMPLETION = "run_to_completion"
    AWAITING_HELP_REPLAY = "awaiting_help_replay"
    TERMINATED = "terminated"


class ConfirmationDriver:
    """Run one confirmation session over an item source.

    All state lives on the instance and belongs to a single :meth:`run`;
    create a new driver for every session.
    """

    def __init__(
        self,
        prompter: Prompter,
        actor: Actor,
        source: SourceLike,
        help_labels: Optional[Sequence[str]] = None,
        extra_handlers: Optional[Mapping[str, HandlerSpec]] = None,
        key_reader: Optional[KeyReader] = None,
    ):
        """Initialize the driver and validate its configuration.

        Args:
            prompter: Called with an item; returns prompt text, a verdict,
                or a zero-argument function producing a verdict
            actor: Called with each item that is acted upon
            source: Iterable of items, or a pull function returning
                ``EXHAUSTED`` when done
            help_labels: ``(singular, plural, verb)`` for help text
            extra_handlers: Key -> ``(handler, help)`` for additional answers
            key_reader: Terminal access (defaults to ``ConsoleKeyReader``)

        Raises:
            ConfigurationError: If handlers, labels, help key or source are
                invalid
        """
        self.prompter = prompter
        self.actor = actor
        self.key_reader = key_reader if key_reader is not None else ConsoleKeyReader()
        self.help_key = self.key_reader.help_key
        if not isinstance(self.help_key, str) or len(self.help_key) != 1:
            raise ConfigurationError(
                f"Help key must be a single character, got {self.help_key!r}"
            )
        if self.help_key in FIXED_KEYS:
            raise ConfigurationError(
                f"Help key {self.key_reader.describe_key(self.help_key)!r} "
                "is already bound to a built-in answer"
            )
        self.labels = _as_labels(help_labels)
        self.handlers = validate_handlers(extra_handlers, self.help_key)
        self.source = ItemSource(source)

        describe = self.key_reader.describe_key
        self.help_text = build_help_text(self.labels, self.handlers, describe)
        self.prompt_suffix = build_prompt_suffix(self.handlers, self.help_key, describe)

        self.actions = 0
        self.mode = DriverMode.PROMPTING
        # Item to ask about again before pulling a new one
        self._replay: Any = EXHAUSTED

    def run(self) -> int:
        """Ask about every item until the source runs dry or the user stops.

        Returns:
            Number of items acted upon
        """
        logger.debug("Confirmation run started", handler_keys=list(self.handlers))

        while self.mode is not DriverMode.TERMINATED:
            item = self._next_item()
            if item is EXHAUSTED:
                self.mode = DriverMode.TERMINATED
                break

            result = as_prompt_result(self.prompter(item))
            if is_interactive(result):
                self._ask(item, result.text)
            else:
                self._auto_resolve(item, result)

        self.key_reader.clear()
        logger.debug(
            "Confirmation run finished", actions=self.actions, pulled=self.source.pulled
        )
        return self.actions

    def _next_item(self) -> Any:
        if self._replay is not EXHAUSTED:
            item, self._replay = self._replay, EXHAUSTED
            self.mode = DriverMode.PROMPTING
            return item
        return self.source.pull()

    def _act(self, item: Any) -> None:
        self.actor(item)
        self.actions += 1

    def _auto_resolve(self, item: Any, result: PromptResult) -> None:
        act = resolve(result)
        logger.debug("Prompt resolved without asking", act=act)
        if act:
            self._act(item)

    def _ask(self, item: Any, prompt: str) -> None:
        reader = self.key_reader
        prompt_line = prompt + self.prompt_suffix
        reader.show(prompt_line)
        key = reader.read_key()
        # Echo the answer next to the prompt
        reader.show(prompt_line + reader.describe_key(key))

        decision = classify_key(key, self.help_key)
        logger.debug("Key decision", decision=decision.value, key=reader.describe_key(key))

        if decision is Decision.EXIT:
            self.mode = DriverMode.TERMINATED
        elif decision is Decision.ACCEPT:
            self._act(item)
        elif decision is Decision.DECLINE:
            pass
        elif decision is Decision.ACCEPT_AND_EXIT:
            self._act(item)
            self.mode = DriverMode.TERMINATED
        elif decision is Decision.ACCEPT_ALL:
            self._accept_all(item)
        elif decision is Decision.HELP:
            reader.show_help(self.help_text)
            self._replay = item
            self.mode = DriverMode.AWAITING_HELP_REPLAY
        elif key in self.handlers:
            if self.handlers[key].handler(item):
                self.actions += 1
            else:
                logger.debug("Handler declined item", key=reader.describe_key(key))
                self._replay = item
        else:
            reader.show(f"Type {reader.describe_key(self.help_key)} for help.")
            reader.alert()
            reader.pause()
            self._replay = item

    def _accept_all(self, current: Any) -> None:
        """Act on ``current`` and on every remaining item that is not skipped."""
        self.mode = DriverMode.RUN_TO_COMPLETION
        item = current
        while item is not EXHAUSTED:
            if resolve(as_prompt_result(self.prompter(item))):
                self._act(item)
            else:
                logger.debug("Skipped while accepting all")
            item = self.source.pull()
        self.mode = DriverMode.TERMINATED


def _as_labels(help_labels: Optional[Sequence[str]]) -> HelpLabels:
    if help_labels is None:
        return DEFAULT_LABELS
    if isinstance(help_labels, HelpLabels):
        return help_labels
    if isinstance(help_labels, str) or len(help_labels) != 3:
        raise ConfigurationError(
            "Help labels must be three strings: singular noun, plural noun, verb"
        )
    return HelpLabels(*(str(label) for label in help_labels))


def run(
    prompter: Prompter,
    actor: Actor,
    source: SourceLike,
    help_labels: Optional[Sequence[str]] = None,
    extra_handlers: Optional[Mapping[str, HandlerSpec]] = None,
    key_reader: Optional[KeyReader] = None,
) -> int:
    """Ask about each item from ``source`` and act on the accepted ones.

    Args:
        prompter: Item -> prompt text, verdict, or deferred verdict
        actor: Applied to every accepted item
        source: Iterable of items or a pull function
        help_labels: ``(singular, plural, verb)``, defaults to
            object/objects/act on
        extra_handlers: Key -> ``(handler, help)`` for additional answers
        key_reader: Terminal access (defaults to ``ConsoleKeyReader``)

    Returns:
        Number of items acted upon

    Raises:
        ConfigurationError: If the run is misconfigured; nothing is asked
    """
    driver = ConfirmationDriver(
        prompter,
        actor,
        source,
        help_labels=help_labels,
        extra_handlers=extra_handlers,
        key_reader=key_reader,
    )
    return driver.run()


map_y_or_n_p = run
