"""Command parser for interpreting user input."""

import re
from abc import ABC
from dataclasses import dataclass

from ..errors import IndexOutOfRangeError, UnknownCommandError
from .address import Address, DEFAULT_PORT, parse_address
from .navigator import ALREADY_AT_ROOT
from .session import Session


class Command(ABC):
    """Base class for all commands."""

    pass


@dataclass(frozen=True)
class NoOpCommand(Command):
    """Command that changes nothing, optionally carrying a message."""

    message: str | None = None


@dataclass(frozen=True)
class SelectCommand(Command):
    """Command to follow a menu entry by 0-based index."""

    index: int


@dataclass(frozen=True)
class BackCommand(Command):
    """Command to go back in history."""

    pass


@dataclass(frozen=True)
class ForwardCommand(Command):
    """Command to go forward in history."""

    pass


@dataclass(frozen=True)
class ReloadCommand(Command):
    """Command to re-fetch the current address."""

    pass


@dataclass(frozen=True)
class HelpCommand(Command):
    """Command to display help information."""

    pass


@dataclass(frozen=True)
class GoCommand(Command):
    """Command to jump to a typed address."""

    address: Address


@dataclass(frozen=True)
class CursorCommand(Command):
    """Command to move the menu cursor."""

    delta: int


@dataclass(frozen=True)
class SaveCommand(Command):
    """Command to write the current document to a file."""

    path: str


@dataclass(frozen=True)
class WhereCommand(Command):
    """Command to show the current address."""

    pass


@dataclass(frozen=True)
class QuitCommand(Command):
    """Command to leave the client."""

    pass


class CommandParser:
    """Interprets input lines against the current Session."""

    # Command mappings
    BACK_COMMANDS = {"b", "back"}
    FORWARD_COMMANDS = {"f", "forward"}
    RELOAD_COMMANDS = {"r", "reload"}
    HELP_COMMANDS = {"?", "h", "help"}
    GO_COMMANDS = {"go", "g", "s"}
    NEXT_COMMANDS = {"n", "next"}
    PREV_COMMANDS = {"p", "prev"}
    OPEN_COMMANDS = {"o", "open"}
    SAVE_COMMANDS = {"save", "w"}
    WHERE_COMMANDS = {"url", "where", "s"}
    QUIT_COMMANDS = {"q", "quit", "exit"}

    _NUMBER = re.compile(r"^\d+$")

    def __init__(self, prefix: str = "/", default_port: int = DEFAULT_PORT):
        """
        Initialize the parser.

        Args:
            prefix: Optional character that may precede command words.
            default_port: Port used for typed addresses without one.
        """
        self.prefix = prefix
        self.default_port = default_port

    def interpret(self, session: Session, input_str: str) -> Command:
        """
        Interpret a raw input line.

        Args:
            session: The current session, used to validate selections.
            input_str: The raw input line from the user.

        Returns:
            A Command object representing the input.

        Raises:
            UnknownCommandError: If the input matches no command.
            IndexOutOfRangeError: If a selection is outside the loaded menu.
            AddressError: If a typed address is invalid.
        """
        cleaned = input_str.strip()

        if not cleaned:
            return NoOpCommand()

        if self._NUMBER.match(cleaned):
            return self._select(session, int(cleaned))

        body = cleaned
        if self.prefix and body.startswith(self.prefix) and len(body) > len(self.prefix):
            body = body[len(self.prefix):]

        word, _, arg = body.partition(" ")
        word = word.lower()
        arg = arg.strip()

        if not arg:
            command = self._simple_command(session, word)
            if command is not None:
                return command

        if word in self.GO_COMMANDS:
            if not arg:
                raise UnknownCommandError(input_str.strip())
            return GoCommand(parse_address(arg, self.default_port))

        if word in self.SAVE_COMMANDS and arg:
            return SaveCommand(path=arg)

        if not arg and self._looks_like_address(body):
            return GoCommand(parse_address(body, self.default_port))

        raise UnknownCommandError(input_str.strip())

    def _simple_command(self, session: Session, word: str) -> Command | None:
        """Map argument-less command words."""
        if word in self.BACK_COMMANDS:
            if not session.has_history():
                return NoOpCommand(message=ALREADY_AT_ROOT)
            return BackCommand()

        if word in self.FORWARD_COMMANDS:
            return ForwardCommand()

        if word in self.RELOAD_COMMANDS:
            return ReloadCommand()

        if word in self.HELP_COMMANDS:
            return HelpCommand()

        if word in self.NEXT_COMMANDS:
            return CursorCommand(delta=1)

        if word in self.PREV_COMMANDS:
            return CursorCommand(delta=-1)

        if word in self.OPEN_COMMANDS:
            return self._select(session, session.cursor)

        if word in self.WHERE_COMMANDS:
            return WhereCommand()

        if word in self.QUIT_COMMANDS:
            return QuitCommand()

        return None

    @staticmethod
    def _select(session: Session, index: int) -> SelectCommand:
        size = session.menu_size()
        if index >= size:
            raise IndexOutOfRangeError(index, size)
        return SelectCommand(index=index)

    @staticmethod
    def _looks_like_address(text: str) -> bool:
        if text.lower().startswith("gopher://"):
            return True
        return any(c in text for c in ".:/[") and " " not in text
