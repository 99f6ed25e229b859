"""Tests for the console key reader."""

import io
from unittest.mock import patch

from rich.console import Console

from mapconfirm.display import ConsoleKeyReader, KeyReader


def _reader(**kwargs):
    output = io.StringIO()
    console = Console(file=output, force_terminal=False, width=120)
    return ConsoleKeyReader(console=console, **kwargs), output


class TestConsoleKeyReader:
    """Test ConsoleKeyReader."""

    def test_is_key_reader(self):
        """ConsoleKeyReader satisfies the KeyReader protocol."""
        reader, _ = _reader()
        assert isinstance(reader, KeyReader)

    def test_defaults_from_config(self, monkeypatch):
        """Help key and pause come from config when not given."""
        monkeypatch.setenv("MAPCONFIRM_HELP_KEY", "h")
        monkeypatch.setenv("MAPCONFIRM_INVALID_KEY_PAUSE", "0.5")
        reader, _ = _reader()
        assert reader.help_key == "h"
        assert reader.pause_seconds == 0.5

    def test_explicit_values_win(self):
        """Constructor arguments override config."""
        reader, _ = _reader(help_key="\x08", pause_seconds=0)
        assert reader.help_key == "\x08"
        assert reader.pause_seconds == 0

    def test_read_key(self):
        """Keys come from click.getchar."""
        reader, _ = _reader()
        with patch("mapconfirm.display.click.getchar", return_value="y") as getchar:
            assert reader.read_key() == "y"
            getchar.assert_called_once_with()

    def test_show_writes_without_newline(self):
        """Status text stays on the current line."""
        reader, output = _reader()
        reader.show("Delete [a]? ")
        assert output.getvalue() == "Delete [a]? "

    def test_show_help(self):
        """Help text is printed on its own lines."""
        reader, output = _reader()
        reader.show("Prompt? ")
        reader.show_help("line one\nline two")
        assert "line one\nline two\n" in output.getvalue()

    def test_alert_rings_bell(self):
        """Alerts use the console bell."""
        reader, _ = _reader()
        with patch.object(reader.console, "bell") as bell:
            reader.alert()
            bell.assert_called_once_with()

    def test_pause_sleeps(self):
        """Pause sleeps for the configured time."""
        reader, _ = _reader(pause_seconds=0.75)
        with patch("mapconfirm.display.time.sleep") as sleep:
            reader.pause()
            sleep.assert_called_once_with(0.75)

    def test_describe_key(self):
        """Key names follow describe_key."""
        reader, _ = _reader()
        assert reader.describe_key(" ") == "SPC"
