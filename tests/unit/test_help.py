"""Tests for help text and prompt suffix generation."""

from mapconfirm.handlers import ActionHandler
from mapconfirm.help import HelpLabels, build_help_text, build_prompt_suffix


def _noop(item):
    return True


class TestBuildHelpText:
    """Test build_help_text."""

    def test_default_labels(self):
        """Default labels talk about objects."""
        text = build_help_text(HelpLabels(), {})
        assert text == (
            "Type SPC or `y' to act on the current object; "
            "DEL or `n' to skip the current object;\n"
            "! to act on all remaining objects;\n"
            "ESC or `q' to exit;\n"
            "or . (period) to act on the current object and exit."
        )

    def test_handler_lines_in_order(self):
        """Each handler adds a line before the final one, in order."""
        handlers = {
            "e": ActionHandler(_noop, "edit the current file"),
            "\x04": ActionHandler(_noop, "show a diff"),
        }
        lines = build_help_text(HelpLabels("file", "files", "save"), handlers).splitlines()

        assert len(lines) == 6
        assert lines[3] == "e to edit the current file;"
        assert lines[4] == "C-d to show a diff;"
        assert lines[5] == "or . (period) to save the current file and exit."

    def test_identical_inputs_identical_text(self):
        """Help text is a pure function of its inputs."""
        handlers = {"x": ActionHandler(_noop, "do x")}
        labels = HelpLabels("buffer", "buffers", "kill")
        assert build_help_text(labels, handlers) == build_help_text(labels, handlers)

    def test_custom_describe(self):
        """Key names come from the describe function."""
        text = build_help_text(HelpLabels(), {}, describe=lambda key: f"<{key}>")
        assert text.startswith("Type < > or `y'")


class TestBuildPromptSuffix:
    """Test build_prompt_suffix."""

    def test_no_handlers(self):
        """Plain suffix lists the built-in keys."""
        assert build_prompt_suffix({}, "?") == "(y, n, !, ., q, or ?) "

    def test_with_handlers(self):
        """Handler keys are listed before the help key."""
        handlers = {
            "v": ActionHandler(_noop, "view"),
            "e": ActionHandler(_noop, "edit"),
        }
        assert build_prompt_suffix(handlers, "\x08") == "(y, n, !, ., q, v, e, or C-h) "
