#!/usr/bin/env python3
"""
Example: Confirming file deletions one at a time

This example shows the library API behind the mapconfirm command: a
prompter that decides per file whether to ask, an actor that deletes, and an
extra key that prints a file's size and asks again.
"""

import sys
from pathlib import Path

from mapconfirm import SKIP, ActionHandler, run


def cleanup(directory: Path, pattern: str = "*.tmp") -> int:
    """Ask before deleting each file matching ``pattern`` in ``directory``."""

    def prompter(path: Path):
        if path.is_dir():
            return SKIP
        # Empty files go without asking
        if path.stat().st_size == 0:
            return lambda: path.exists()
        return f"Delete {path.name}? "

    def show_size(path: Path) -> bool:
        print(f"\n{path.name}: {path.stat().st_size} bytes")
        return False

    return run(
        prompter,
        lambda path: path.unlink(),
        sorted(directory.glob(pattern)),
        help_labels=("file", "files", "delete"),
        extra_handlers={"s": ActionHandler(show_size, "show the size of the current file")},
    )


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()
    deleted = cleanup(target)
    print(f"\nDeleted {deleted} file(s)")
