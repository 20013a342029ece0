"""Tests for the TerminalDisplay module."""

import io

from term_gopher.interfaces import Display
from term_gopher.display.terminal_display import ANSI_CODES, ANSI_RESET, TerminalDisplay


class TestTerminalDisplay:
    """Tests for TerminalDisplay."""

    def test_render_plain(self):
        """With colour off, lines are written unchanged."""
        stream = io.StringIO()
        display = TerminalDisplay(color=False, stream=stream)

        display.render([("status", "example.org:70"), ("text", "hello")])

        assert stream.getvalue() == "example.org:70\nhello\n"

    def test_render_colored(self):
        stream = io.StringIO()
        display = TerminalDisplay(styles={"error": "red"}, stream=stream)

        display.render([("error", "boom")])

        assert stream.getvalue() == f"{ANSI_CODES['red']}boom{ANSI_RESET}\n"

    def test_unknown_style_uncolored(self):
        display = TerminalDisplay(styles={}, stream=io.StringIO())
        assert display.format_line("item:whatever", "x") == "x"

    def test_unknown_color_name_uncolored(self):
        display = TerminalDisplay(styles={"text": "sparkly"}, stream=io.StringIO())
        assert display.format_line("text", "x") == "x"

    def test_default_styles(self):
        display = TerminalDisplay(stream=io.StringIO())
        assert display.format_line("item:submenu", "x").startswith(ANSI_CODES["blue"])

    def test_format_prompt(self):
        display = TerminalDisplay(stream=io.StringIO())
        assert display.format_prompt("> ") == f"{ANSI_CODES['bold']}> {ANSI_RESET}"
        assert TerminalDisplay(color=False).format_prompt("> ") == "> "


class TestDisplayInterface:
    """Tests for the Display base class."""

    def test_render_is_the_only_required_method(self):
        class ListDisplay(Display):
            def __init__(self):
                self.plans = []

            def render(self, plan):
                self.plans.append(plan)

        display = ListDisplay()
        display.render([("info", "note")])

        assert display.plans == [[("info", "note")]]
        assert display.format_prompt("> ") == "> "
