"""Shared fixtures for unit tests."""

from typing import Iterable, List

import pytest

from mapconfirm.config import reset_config
from mapconfirm.keys import describe_key


class ScriptedKeyReader:
    """KeyReader that replays a fixed list of keys and records output."""

    def __init__(self, keys: Iterable[str] = (), help_key: str = "?"):
        self.keys: List[str] = list(keys)
        self.help_key = help_key
        self.reads = 0
        self.shown: List[str] = []
        self.help_shown: List[str] = []
        self.alerts = 0
        self.pauses = 0
        self.clears = 0

    def read_key(self) -> str:
        if not self.keys:
            raise AssertionError("Driver read more keys than were scripted")
        self.reads += 1
        return self.keys.pop(0)

    def show(self, text: str) -> None:
        self.shown.append(text)

    def show_help(self, text: str) -> None:
        self.help_shown.append(text)

    def clear(self) -> None:
        self.clears += 1

    def alert(self) -> None:
        self.alerts += 1

    def pause(self) -> None:
        self.pauses += 1

    def describe_key(self, key: str) -> str:
        return describe_key(key)


@pytest.fixture
def key_reader():
    """Build a scripted key reader: ``key_reader("y", "n", ...)``."""

    def _make(*keys: str, help_key: str = "?") -> ScriptedKeyReader:
        return ScriptedKeyReader(keys, help_key=help_key)

    return _make


@pytest.fixture
def recorder():
    """Callable that remembers every item it was called with."""

    class Recorder:
        def __init__(self):
            self.calls: list = []

        def __call__(self, item):
            self.calls.append(item)

    return Recorder()


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Keep environment and cached config from leaking between tests."""
    for name in (
        "MAPCONFIRM_HELP_KEY",
        "MAPCONFIRM_INVALID_KEY_PAUSE",
        "MAPCONFIRM_LOG_LEVEL",
        "MAPCONFIRM_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
