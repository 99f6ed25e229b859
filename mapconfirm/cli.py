#!/usr/bin/env python3
"""mapconfirm CLI - run a command on items, asking about each one first.

Works like ``xargs -p`` with one key press per item: accept, skip, accept all
the rest, or stop.
"""
from __future__ import annotations

import shlex
import subprocess
import sys
from pathlib import Path
from typing import Any, Callable, List, Optional, TextIO

import click
import yaml
from pydantic import ValidationError
from rich.console import Console

from mapconfirm.display import ConsoleKeyReader
from mapconfirm.driver import ConfirmationDriver
from mapconfirm.errors import CommandFailedError, ConfigurationError
from mapconfirm.exit_codes import ExitCode
from mapconfirm.handlers import ActionHandler
from mapconfirm.logging import get_logger, restore_logging, setup_logging, suppress_logging
from mapconfirm.source import EXHAUSTED
from mapconfirm.verdicts import SKIP

logger = get_logger(__name__)
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def load_items(path: Path) -> List[str]:
    """Read items from a YAML list or a plain text file.

    Args:
        path: ``.yaml``/``.yml`` file holding a list, or any other file with
            one item per line

    Returns:
        Items as strings, blank lines dropped

    Raises:
        ConfigurationError: If a YAML file does not hold a list
    """
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yaml", ".yml"}:
        data = yaml.safe_load(text)
        if data is None:
            return []
        if not isinstance(data, list):
            raise ConfigurationError(f"{path} must contain a YAML list of items")
        return [str(entry) for entry in data]
    return [line.strip() for line in text.splitlines() if line.strip()]


def stream_source(stream: TextIO) -> Callable[[], Any]:
    """Return a pull function yielding non-blank lines from ``stream``.

    Lines are read only when the next item is needed, so a long pipe is not
    drained when the user stops early.
    """

    def pull() -> Any:
        while True:
            line = stream.readline()
            if not line:
                return EXHAUSTED
            line = line.strip()
            if line:
                return line

    return pull


class CommandSession:
    """Prompter, actor and extra handlers for running a command per item."""

    def __init__(
        self,
        command: List[str],
        reader: ConsoleKeyReader,
        dry_run: bool = False,
        unique: bool = False,
        stop_on_error: bool = False,
    ):
        self.command = command
        self.reader = reader
        self.dry_run = dry_run
        self.unique = unique
        self.stop_on_error = stop_on_error
        self.done: set = set()
        self.failures = 0

    def argv_for(self, item: str) -> List[str]:
        return [*self.command, item]

    def prompt(self, item: str) -> Any:
        if self.unique and item in self.done:
            logger.debug("Duplicate item skipped", item=item)
            return SKIP
        return f"Run {shlex.join(self.argv_for(item))}? "

    def act(self, item: str) -> None:
        argv = self.argv_for(item)
        self.done.add(item)
        self.reader.clear()
        if self.dry_run:
            console.print(shlex.join(argv), markup=False)
            return

        logger.debug("Running command", argv=argv)
        completed = subprocess.run(argv, check=False)
        if completed.returncode != 0:
            self.failures += 1
            err_console.print(
                f"[red]✗[/red] exit status {completed.returncode}: "
                f"{shlex.join(argv)}"
            )
            if self.stop_on_error:
                raise CommandFailedError(argv, completed.returncode)

    def view(self, item: str) -> bool:
        """Show the full command line, then ask about the item again."""
        self.reader.show_help(shlex.join(self.argv_for(item)))
        return False

    def handlers(self) -> dict:
        return {"v": ActionHandler(self.view, "view the full command line")}


@click.command(
    context_settings={"max_content_width": 120, "allow_interspersed_args": False}
)
@click.argument("command", nargs=-1, required=True)
@click.option(
    "--items",
    "items_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read items from FILE (YAML list or one per line) instead of stdin",
)
@click.option("--noun", default="item", show_default=True, help="Singular item name for help")
@click.option("--nouns", default="items", show_default=True, help="Plural item name for help")
@click.option("--verb", default="run on", show_default=True, help="Verb used in help")
@click.option("--help-key", default=None, help="Key that shows help (default from config)")
@click.option("--dry-run", is_flag=True, help="Print command lines instead of running them")
@click.option("--unique", is_flag=True, help="Skip items already run in this session")
@click.option("--stop-on-error", is_flag=True, help="Stop at the first failing command")
@click.option("--quiet", is_flag=True, help="Silence logging while prompting")
def main(
    command: tuple,
    items_file: Optional[Path],
    noun: str,
    nouns: str,
    verb: str,
    help_key: Optional[str],
    dry_run: bool,
    unique: bool,
    stop_on_error: bool,
    quiet: bool,
):
    """Run COMMAND once per item, asking before each run.

    \b
    Keys:
      y, SPC    Run on this item
      n, DEL    Skip this item
      !         Run on this and all remaining items
      .         Run on this item, then stop
      q, ESC    Stop
      v         Show the full command line
      ?         Help

    \b
    Examples:
      ls *.log | mapconfirm rm          # Delete log files one by one
      mapconfirm --items hosts.yaml -- ping -c 1   # Item list from YAML
      git branch --merged | mapconfirm --dry-run git branch -d
    """
    try:
        setup_logging()
    except ValidationError as e:
        err_console.print("[red]✗ Error:[/red] invalid configuration")
        err_console.print(str(e), markup=False)
        sys.exit(ExitCode.USER_ERROR)

    if items_file is not None:
        try:
            source: Any = load_items(items_file)
        except (ConfigurationError, yaml.YAMLError) as e:
            err_console.print(f"[red]✗ Error:[/red] {e}")
            sys.exit(ExitCode.USER_ERROR)
    else:
        stdin = click.get_text_stream("stdin")
        if stdin.isatty():
            err_console.print(
                "[red]✗ Error:[/red] no items: pipe them on stdin or pass --items FILE"
            )
            sys.exit(ExitCode.USER_ERROR)
        source = stream_source(stdin)

    if quiet:
        suppress_logging()
    try:
        reader = ConsoleKeyReader(help_key=help_key)
        session = CommandSession(
            list(command),
            reader,
            dry_run=dry_run,
            unique=unique,
            stop_on_error=stop_on_error,
        )
        driver = ConfirmationDriver(
            session.prompt,
            session.act,
            source,
            help_labels=(noun, nouns, verb),
            extra_handlers=session.handlers(),
            key_reader=reader,
        )
        count = driver.run()
    except ConfigurationError as e:
        err_console.print(f"[red]✗ Error:[/red] {e}")
        sys.exit(ExitCode.USER_ERROR)
    except CommandFailedError as e:
        reader.clear()
        err_console.print(f"[red]✗ Stopped:[/red] {e}")
        sys.exit(ExitCode.PROCESSING_ERROR)
    except FileNotFoundError as e:
        reader.clear()
        err_console.print(f"[red]✗ Error:[/red] {e}")
        sys.exit(ExitCode.SYSTEM_ERROR)
    except (KeyboardInterrupt, EOFError):
        reader.clear()
        err_console.print("[dim]Cancelled[/dim]")
        sys.exit(ExitCode.INTERRUPTED)
    finally:
        if quiet:
            restore_logging()

    label = noun if count == 1 else nouns
    console.print(f"[green]✓[/green] {count} {label} accepted")
    if session.failures:
        err_console.print(f"[yellow]{session.failures} command(s) failed[/yellow]")


if __name__ == "__main__":
    main()
