"""Browsing session state."""

from dataclasses import dataclass, field

from .address import Address
from .classifier import Document, Menu


@dataclass(frozen=True)
class Session:
    """Browsing state for one client run (immutable).

    Attributes:
        current: Address being viewed, or the start address while idle.
        document: Loaded document, None until the first fetch succeeds.
        history: Previously visited addresses, most recent last.
        forward: Addresses left by going back, most recent last.
        cursor: Selected menu entry; 0 when no menu is loaded.
    """

    current: Address | None = None
    document: Document | None = None
    history: tuple[Address, ...] = field(default_factory=tuple)
    forward: tuple[Address, ...] = field(default_factory=tuple)
    cursor: int = 0

    def __init__(
        self,
        current: Address | None = None,
        document: Document | None = None,
        history: list[Address] | tuple[Address, ...] | None = None,
        forward: list[Address] | tuple[Address, ...] | None = None,
        cursor: int = 0,
    ):
        object.__setattr__(self, "current", current)
        object.__setattr__(self, "document", document)
        object.__setattr__(self, "history", tuple(history) if history else ())
        object.__setattr__(self, "forward", tuple(forward) if forward else ())
        object.__setattr__(self, "cursor", cursor)

    def is_idle(self) -> bool:
        """Check if no document has been loaded yet."""
        return self.document is None

    def menu(self) -> Menu | None:
        """Get the loaded menu, or None if the document is not a menu."""
        if isinstance(self.document, Menu):
            return self.document
        return None

    def menu_size(self) -> int:
        menu = self.menu()
        return len(menu) if menu is not None else 0

    def has_history(self) -> bool:
        return bool(self.history)

    def has_forward(self) -> bool:
        return bool(self.forward)

    def load(self, address: Address, document: Document) -> "Session":
        """
        Show a newly fetched document as a new history step.

        The previous address is pushed onto history unless nothing was
        loaded yet or it is the same address. The forward stack is cleared.
        """
        history = self.history
        if self.current is not None and self.document is not None and self.current != address:
            history = history + (self.current,)

        return Session(
            current=address,
            document=document,
            history=history,
            forward=(),
            cursor=0,
        )

    def replace_document(self, document: Document) -> "Session":
        """Swap in a re-fetched document for the current address."""
        return Session(
            current=self.current,
            document=document,
            history=self.history,
            forward=self.forward,
            cursor=self._clamp(self.cursor, document),
        )

    def step_back(self, document: Document) -> "Session":
        """Move to the top of history, showing its re-fetched document."""
        if not self.history:
            return self
        forward = self.forward
        if self.current is not None:
            forward = forward + (self.current,)
        return Session(
            current=self.history[-1],
            document=document,
            history=self.history[:-1],
            forward=forward,
            cursor=0,
        )

    def step_forward(self, document: Document) -> "Session":
        """Move to the top of the forward stack, showing its re-fetched document."""
        if not self.forward:
            return self
        history = self.history
        if self.current is not None:
            history = history + (self.current,)
        return Session(
            current=self.forward[-1],
            document=document,
            history=history,
            forward=self.forward[:-1],
            cursor=0,
        )

    def move_cursor(self, delta: int) -> "Session":
        """Return new session with the cursor moved and clamped to the menu."""
        return Session(
            current=self.current,
            document=self.document,
            history=self.history,
            forward=self.forward,
            cursor=self._clamp(self.cursor + delta, self.document),
        )

    @staticmethod
    def _clamp(cursor: int, document: Document | None) -> int:
        if not isinstance(document, Menu) or not document.entries:
            return 0
        return max(0, min(cursor, len(document.entries) - 1))
