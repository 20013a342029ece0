"""Display adapters for the Gopher client."""

from .terminal_display import TerminalDisplay

__all__ = ["TerminalDisplay"]
