"""Key input and transient display for confirmation prompts.

The driver talks to the terminal only through a :class:`KeyReader`, so tests
and other front ends can supply their own.
"""

import time
from typing import Optional, Protocol, runtime_checkable

import click
from rich.console import Console
from rich.control import Control
from rich.segment import ControlType

from .config import get_config
from .keys import describe_key
from .logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class KeyReader(Protocol):
    """Terminal capabilities the confirmation driver needs."""

    help_key: str

    def read_key(self) -> str:
        """Block until one key is pressed and return it."""
        ...

    def show(self, text: str) -> None:
        """Replace the transient status line with ``text``."""
        ...

    def show_help(self, text: str) -> None:
        """Display help text where the user can read it."""
        ...

    def clear(self) -> None:
        """Remove the transient status line."""
        ...

    def alert(self) -> None:
        """Signal invalid input (bell)."""
        ...

    def pause(self) -> None:
        """Wait briefly so a status message can be read."""
        ...

    def describe_key(self, key: str) -> str:
        """Return a printable name for ``key``."""
        ...


class ConsoleKeyReader:
    """KeyReader backed by ``click.getchar`` and a rich Console.

    The status line is redrawn in place: every :meth:`show` erases the
    current line first, so only the last message stays visible.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        help_key: Optional[str] = None,
        pause_seconds: Optional[float] = None,
    ):
        """Initialize console key reader.

        Args:
            console: Console to draw on (defaults to a stdout Console)
            help_key: Key that shows help (defaults to config)
            pause_seconds: Pause after invalid input (defaults to config)
        """
        config = get_config()
        self.console = console or Console(highlight=False)
        self.help_key = help_key if help_key is not None else config.help_key
        self.pause_seconds = (
            pause_seconds if pause_seconds is not None else config.invalid_key_pause
        )
        self._line_dirty = False

    def read_key(self) -> str:
        # Raises KeyboardInterrupt on Ctrl-C and EOFError on Ctrl-D
        key = click.getchar()
        logger.debug("Key read", key=describe_key(key))
        return key

    def _erase_line(self) -> None:
        self.console.control(
            Control.move_to_column(0), Control((ControlType.ERASE_IN_LINE, 2))
        )

    def show(self, text: str) -> None:
        self._erase_line()
        self.console.print(text, end="", markup=False, highlight=False)
        self._line_dirty = True

    def show_help(self, text: str) -> None:
        if self._line_dirty:
            self._erase_line()
            self._line_dirty = False
        self.console.print()
        self.console.print(text, markup=False, highlight=False, style="dim")
        self.console.print()

    def clear(self) -> None:
        if self._line_dirty:
            self._erase_line()
            self._line_dirty = False

    def alert(self) -> None:
        self.console.bell()

    def pause(self) -> None:
        time.sleep(self.pause_seconds)

    def describe_key(self, key: str) -> str:
        return describe_key(key)
