"""Navigation engine: moves a Session through Gopherspace."""

import logging

from ..errors import IndexOutOfRangeError
from ..interfaces import GopherTransport
from .address import Address, ItemType
from .classifier import Document, ResponseClassifier
from .session import Session

logger = logging.getLogger(__name__)

ALREADY_AT_ROOT = "Already at root."
NOTHING_FORWARD = "Nothing to go forward to."


class Navigator:
    """Executes navigation transitions over an immutable Session.

    Every transition returns ``(new_session, notice)``. Network failures
    propagate as exceptions so the caller keeps its previous Session.
    """

    def __init__(self, transport: GopherTransport, classifier: ResponseClassifier | None = None):
        """
        Initialize the navigator.

        Args:
            transport: Transport used to fetch addresses.
            classifier: Classifier for replies (uses defaults if None).
        """
        self.transport = transport
        self.classifier = classifier or ResponseClassifier()

    def _fetch(self, address: Address) -> Document:
        logger.info(f"Fetching {address}")
        raw = self.transport.fetch(address)
        return self.classifier.classify(address.item_type, raw, origin=address)

    def open(self, session: Session, address: Address) -> tuple[Session, str | None]:
        """
        Fetch an address and make it the current location.

        Args:
            session: Current session.
            address: Address to open.

        Returns:
            Tuple of (updated_session, notice).

        Raises:
            ConnectError: If the host cannot be reached.
            TruncatedResponseError: If the reply is cut off.
        """
        document = self._fetch(address)
        return session.load(address, document), None

    def jump_to(self, session: Session, address: Address) -> tuple[Session, str | None]:
        """Open a user-typed address as a new entry point."""
        logger.debug(f"Jumping to {address}")
        return self.open(session, address)

    def reload(self, session: Session) -> tuple[Session, str | None]:
        """Re-fetch the current address without touching history."""
        if session.current is None:
            return session, "Nothing to reload."

        document = self._fetch(session.current)
        if session.is_idle():
            return session.load(session.current, document), None
        return session.replace_document(document), None

    def back(self, session: Session) -> tuple[Session, str | None]:
        """Re-fetch the previous address and move back to it."""
        if not session.has_history():
            logger.debug("Back requested with empty history")
            return session, ALREADY_AT_ROOT

        document = self._fetch(session.history[-1])
        return session.step_back(document), None

    def forward(self, session: Session) -> tuple[Session, str | None]:
        """Re-fetch the address left by the last back step."""
        if not session.has_forward():
            logger.debug("Forward requested with empty forward stack")
            return session, NOTHING_FORWARD

        document = self._fetch(session.forward[-1])
        return session.step_forward(document), None

    def select(
        self,
        session: Session,
        index: int,
        query: str | None = None,
    ) -> tuple[Session, str | None]:
        """
        Follow the menu entry at a 0-based index.

        Args:
            session: Current session.
            index: Entry index within the loaded menu.
            query: Search terms, required for search entries.

        Returns:
            Tuple of (updated_session, notice).

        Raises:
            IndexOutOfRangeError: If no menu is loaded or index is invalid.
        """
        menu = session.menu()
        if menu is None:
            raise IndexOutOfRangeError(index, 0)

        entry = menu.entry_at(index)
        if entry is None:
            raise IndexOutOfRangeError(index, len(menu))

        item_type = entry.item_type
        address = entry.address
        logger.debug(f"Selected [{index}] {entry.display!r} ({item_type.name})")

        if not item_type.is_navigable:
            return session, "That line is not a link."

        if item_type is ItemType.SEARCH:
            if query is None or not query.strip():
                return session, "A search needs a query."
            address = address.with_selector(
                f"{address.selector}\t{query.strip()}",
                item_type=ItemType.SUBMENU,
            )
            return self.open(session, address)

        if item_type is ItemType.HTML and address.selector.startswith("URL:"):
            return session, f"External link: {address.selector[4:]}"

        if item_type in (ItemType.TELNET, ItemType.CCSO):
            return session, (
                f"{item_type.name.capitalize()} sessions are not supported "
                f"({address.host_port()})."
            )

        if not item_type.is_fetchable:
            return session, f"Unsupported item type {entry.type_char!r}."

        return self.open(session, address)

    def move_cursor(self, session: Session, delta: int) -> tuple[Session, str | None]:
        """Move the menu cursor, staying within the menu."""
        if session.menu() is None:
            return session, "No menu loaded."
        return session.move_cursor(delta), None
