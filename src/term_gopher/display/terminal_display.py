"""ANSI terminal display adapter."""

import sys
from typing import TextIO

from ..config import DEFAULT_STYLES
from ..interfaces import Display, RenderPlan

ANSI_RESET = "\x1b[0m"

ANSI_CODES = {
    "red": "\x1b[0;31m",
    "green": "\x1b[0;32m",
    "yellow": "\x1b[0;33m",
    "blue": "\x1b[0;34m",
    "purple": "\x1b[0;35m",
    "cyan": "\x1b[0;36m",
    "white": "\x1b[0;37m",
    "black": "\x1b[0;30m",
    "bold": "\x1b[1m",
    "default": "",
}


class TerminalDisplay(Display):
    """Writes render plans to a text stream, colouring lines by style tag.

    Unknown style tags and colour names are printed without escapes.
    """

    def __init__(
        self,
        styles: dict[str, str] | None = None,
        color: bool = True,
        stream: TextIO | None = None,
    ):
        """
        Initialize the display.

        Args:
            styles: Style tag to colour name mapping.
            color: Whether to emit ANSI escape sequences.
            stream: Output stream (defaults to standard output).
        """
        self.styles = styles if styles is not None else dict(DEFAULT_STYLES)
        self.color = color
        self.stream = stream or sys.stdout

    def render(self, plan: RenderPlan) -> None:
        for style, text in plan:
            self.stream.write(self.format_line(style, text) + "\n")
        self.stream.flush()

    def format_line(self, style: str, text: str) -> str:
        """Apply the colour for a style tag to one line of text."""
        if not self.color:
            return text

        code = ANSI_CODES.get(self.styles.get(style, "default"), "")
        if not code:
            return text
        return f"{code}{text}{ANSI_RESET}"

    def format_prompt(self, text: str) -> str:
        if not self.color:
            return text
        return f"{ANSI_CODES['bold']}{text}{ANSI_RESET}"
