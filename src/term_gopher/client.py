"""GopherClient - Main orchestrator for the terminal Gopher client."""

import logging
from pathlib import Path
from typing import Callable

from .errors import GopherError, HandlerError
from .interfaces import Display, GopherTransport
from .core import (
    Address,
    BinaryBlob,
    CommandParser,
    Command,
    NoOpCommand,
    SelectCommand,
    BackCommand,
    ForwardCommand,
    ReloadCommand,
    HelpCommand,
    GoCommand,
    CursorCommand,
    SaveCommand,
    WhereCommand,
    QuitCommand,
    ItemType,
    Menu,
    MenuRenderer,
    Navigator,
    ResponseClassifier,
    Session,
    TextBody,
)
from .core.menu_renderer import STYLE_ERROR, STYLE_INFO, STYLE_STATUS
from .config import Config
from .handlers import ExternalHandlers

logger = logging.getLogger(__name__)


class GopherClient:
    """Interactive client orchestrating all components.

    Reads command lines, drives the navigator and hands render plans to
    the display. Uses dependency injection for transport and display.
    """

    def __init__(
        self,
        transport: GopherTransport,
        display: Display,
        config: Config | None = None,
        input_func: Callable[[str], str] = input,
    ):
        """
        Initialize the Gopher client.

        Args:
            transport: Transport for fetching resources.
            display: Display adapter receiving render plans.
            config: Client configuration (uses defaults if None).
            input_func: Reads one line of user input given a prompt.
        """
        self.transport = transport
        self.display = display
        self.config = config or Config()
        self.input_func = input_func

        # Initialize components
        self.parser = CommandParser(
            prefix=self.config.command_prefix,
            default_port=self.config.default_port,
        )
        self.classifier = ResponseClassifier(encoding=self.config.encoding)
        self.navigator = Navigator(transport, self.classifier)
        self.renderer = MenuRenderer(prefix=self.config.command_prefix)
        self.handlers = ExternalHandlers(self.config)
        self.session = Session()

    def start(self, address: Address) -> None:
        """
        Load the start address.

        A failed first fetch is reported and leaves the client idle, so
        'reload' can retry it.

        Args:
            address: The address given on the command line.
        """
        logger.info(f"Starting at {address}")
        self.session = Session(current=address)
        try:
            self.session, _ = self.navigator.reload(self.session)
        except GopherError as e:
            logger.warning(f"Initial fetch failed: {e}")
            self._show_error(str(e))
            return
        self._show_screen()

    def run(self) -> None:
        """Read and handle commands until quit or end of input."""
        self._show_message("Welcome to term-gopher. Type '?' for help.")
        while True:
            prompt = self.display.format_prompt(self.renderer.prompt(self.session))
            try:
                line = self.input_func(prompt)
            except (EOFError, KeyboardInterrupt):
                break

            try:
                if not self.handle_line(line):
                    break
            except KeyboardInterrupt:
                # Interrupted fetch; the session was never replaced
                self._show_error("Interrupted.")

        self._show_message("Goodbye.")

    def handle_line(self, line: str) -> bool:
        """
        Handle one line of user input.

        Errors are shown to the user and never change the session.

        Args:
            line: The raw input line.

        Returns:
            False when the user asked to quit, True otherwise.
        """
        logger.debug(f"Input: {line!r}")
        try:
            command = self.parser.interpret(self.session, line)
            logger.debug(f"Command: {command}")
            return self._process_command(command)
        except GopherError as e:
            logger.info(f"Command failed: {e}")
            self._show_error(str(e))
            return True

    def _process_command(self, command: Command) -> bool:
        """
        Process a command, updating the session on success.

        Args:
            command: The interpreted command.

        Returns:
            False for QuitCommand, True otherwise.
        """
        if isinstance(command, QuitCommand):
            return False

        if isinstance(command, NoOpCommand):
            if command.message:
                self._show_message(command.message)
            return True

        if isinstance(command, HelpCommand):
            self.display.render(self.renderer.render_help())
            return True

        if isinstance(command, WhereCommand):
            current = self.session.current
            self._show_message(current.to_url() if current else "Nowhere yet.")
            return True

        if isinstance(command, SaveCommand):
            self._handle_save(command.path)
            return True

        if isinstance(command, SelectCommand):
            self._apply(*self._handle_select(command.index))
            return True

        if isinstance(command, BackCommand):
            self._apply(*self.navigator.back(self.session))
        elif isinstance(command, ForwardCommand):
            self._apply(*self.navigator.forward(self.session))
        elif isinstance(command, ReloadCommand):
            self._apply(*self.navigator.reload(self.session))
        elif isinstance(command, GoCommand):
            self._apply(*self.navigator.jump_to(self.session, command.address))
        elif isinstance(command, CursorCommand):
            self._apply(*self.navigator.move_cursor(self.session, command.delta))
        else:
            logger.warning(f"Unhandled command type: {command.__class__.__name__}")

        return True

    def _handle_select(self, index: int) -> tuple[Session, str | None]:
        menu = self.session.menu()
        entry = menu.entry_at(index) if menu is not None else None

        if entry is not None and entry.item_type is ItemType.SEARCH:
            try:
                query = self.input_func(f"Search {entry.display}: ")
            except EOFError:
                return self.session, "Search cancelled."
            return self.navigator.select(self.session, index, query=query)

        if entry is not None and self.handlers.handles(entry.item_type):
            return self.session, self._launch(entry.item_type, entry.address)

        return self.navigator.select(self.session, index)

    def _launch(self, item_type: ItemType, address: Address) -> str | None:
        """Open an item with its external program; the session stays put."""
        if item_type is ItemType.TELNET:
            return self.handlers.open_telnet(address)
        if item_type is ItemType.HTML and address.selector.startswith("URL:"):
            return self.handlers.open_url(address.selector[4:])

        data = self.transport.fetch(address)
        return self.handlers.open_data(item_type, data)

    def _apply(self, session: Session, notice: str | None) -> None:
        """Commit a transition result and refresh the screen."""
        changed = session is not self.session
        self.session = session
        if changed:
            self._show_screen()
        if notice:
            self._show_message(notice)

    def _handle_save(self, path: str) -> None:
        """Write the current document to a file."""
        document = self.session.document
        if document is None:
            self._show_message("Nothing to save.")
            return

        target = Path(path).expanduser()
        if not target.is_absolute():
            target = self.config.get_download_path() / target

        if target.exists():
            self._show_error(f"File already exists: {target}")
            return

        if isinstance(document, BinaryBlob):
            data = document.data
        elif isinstance(document, TextBody):
            data = "".join(f"{line}\n" for line in document.lines).encode(self.config.encoding)
        elif isinstance(document, Menu):
            data = "".join(f"{e.to_line()}\n" for e in document.entries).encode(self.config.encoding)
        else:
            self._show_error("Cannot save this document.")
            return

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as e:
            logger.error(f"Saving to {target} failed: {e}")
            self._show_error(f"Could not save {target}: {e.strerror or e}")
            return

        logger.info(f"Saved {len(data)} bytes to {target}")
        self._show_message(f"Saved {len(data)} bytes to {target}")

    def _show_screen(self) -> None:
        document = self.session.document
        if isinstance(document, TextBody) and self.handlers.pager:
            self.display.render([(STYLE_STATUS, self.renderer.status_line(self.session))])
            try:
                notice = self.handlers.page("".join(f"{line}\n" for line in document.lines))
            except HandlerError as e:
                logger.warning(f"Pager failed, showing text inline: {e}")
                self._show_error(str(e))
            else:
                if notice:
                    self._show_message(notice)
                return

        self.display.render(self.renderer.render(self.session))

    def _show_message(self, text: str) -> None:
        self.display.render(self.renderer.render_message(text, STYLE_INFO))

    def _show_error(self, text: str) -> None:
        self.display.render(self.renderer.render_message(text, STYLE_ERROR))
