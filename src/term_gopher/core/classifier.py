"""Response classification: turns raw reply bytes into a Document."""

import logging
import re
from dataclasses import dataclass, field

from .address import Address, ItemType, DEFAULT_PORT
from .menu_parser import MenuEntry, MenuParser, TERMINATOR

logger = logging.getLogger(__name__)

_LINE_SPLIT = re.compile(r"\r?\n")


class Document:
    """Base class for the three kinds of fetched content."""

    pass


@dataclass(frozen=True)
class Menu(Document):
    """A parsed menu reply."""

    entries: tuple[MenuEntry, ...] = field(default_factory=tuple)

    def __init__(self, entries: list[MenuEntry] | tuple[MenuEntry, ...] | None = None):
        object.__setattr__(self, "entries", tuple(entries) if entries else ())

    def __len__(self) -> int:
        return len(self.entries)

    def entry_at(self, index: int) -> MenuEntry | None:
        """Get entry at 0-based index, or None if out of range."""
        if index < 0 or index >= len(self.entries):
            return None
        return self.entries[index]


@dataclass(frozen=True)
class TextBody(Document):
    """A text reply, one element per line."""

    lines: tuple[str, ...] = field(default_factory=tuple)

    def __init__(self, lines: list[str] | tuple[str, ...] | None = None):
        object.__setattr__(self, "lines", tuple(lines) if lines else ())


@dataclass(frozen=True)
class BinaryBlob(Document):
    """A binary reply kept as raw bytes."""

    data: bytes = b""


def split_lines(text: str) -> list[str]:
    """
    Split reply text into lines, stripping the terminator.

    Everything from the first lone "." line onward is dropped. A trailing
    empty element produced by the final line terminator is dropped too.
    """
    lines = _LINE_SPLIT.split(text)
    if lines and lines[-1] == "":
        lines.pop()

    if TERMINATOR in lines:
        lines = lines[:lines.index(TERMINATOR)]

    return lines


class ResponseClassifier:
    """Decides whether a reply is a menu, text or binary document.

    Classification runs in two explicit phases: a strict menu check,
    then a fallback to plain text.
    """

    def __init__(self, parser: MenuParser | None = None, encoding: str = "utf-8"):
        self.parser = parser or MenuParser()
        self.encoding = encoding

    def classify(
        self,
        item_type: ItemType,
        raw: bytes,
        origin: Address | None = None,
    ) -> Document:
        """
        Classify a raw reply.

        Args:
            item_type: Item type the reply was requested as.
            raw: Raw reply bytes.
            origin: Address the reply came from; its host and port fill in
                menu lines that omit them.

        Returns:
            A Menu, TextBody or BinaryBlob.
        """
        if item_type.is_binary:
            logger.debug(f"Classified {len(raw)} bytes as binary ({item_type.name})")
            return BinaryBlob(raw)

        text = raw.decode(self.encoding, errors="replace")
        lines = split_lines(text)

        if self._is_error_reply(lines):
            logger.debug("Classified reply as a single error line")
            return Menu(self._parse(lines, origin))

        if self._looks_like_menu(lines):
            entries = self._parse(lines, origin)
            logger.debug(f"Classified reply as menu with {len(entries)} entries")
            return Menu(entries)

        logger.debug(f"Classified reply as text with {len(lines)} lines")
        return TextBody(lines)

    def _parse(self, lines: list[str], origin: Address | None) -> list[MenuEntry]:
        host = origin.host if origin else ""
        port = origin.port if origin else DEFAULT_PORT
        return self.parser.parse_menu(lines, default_host=host, default_port=port)

    @staticmethod
    def _is_error_reply(lines: list[str]) -> bool:
        non_empty = [line for line in lines if line]
        return len(non_empty) == 1 and non_empty[0].startswith(ItemType.ERROR.value)

    @staticmethod
    def _looks_like_menu(lines: list[str]) -> bool:
        """At least one tab-delimited line and no line without fields
        other than info or error text."""
        matched = False
        for line in lines:
            if not line:
                continue
            if "\t" in line:
                matched = True
            elif ItemType.from_char(line[0]).is_navigable:
                return False
        return matched
