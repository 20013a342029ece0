"""Parser for Gopher menu lines."""

import logging
from dataclasses import dataclass
from typing import Iterable

from ..errors import MalformedLineError
from .address import Address, ItemType, DEFAULT_PORT

logger = logging.getLogger(__name__)

TERMINATOR = "."


@dataclass(frozen=True)
class MenuEntry:
    """One line of a Gopher menu.

    Attributes:
        item_type: Parsed item type (UNSUPPORTED for unknown characters).
        display: User-visible string, never containing a TAB.
        address: Target of the entry. Only meaningful when the item type
            is navigable; info and error lines keep whatever the server sent.
        type_char: Raw type character as received.
    """

    item_type: ItemType
    display: str
    address: Address
    type_char: str = ""

    @property
    def is_navigable(self) -> bool:
        return self.item_type.is_navigable

    def to_line(self) -> str:
        """Serialise back to the tab-delimited menu grammar."""
        type_char = self.type_char or self.item_type.value
        return "\t".join((
            f"{type_char}{self.display}",
            self.address.selector,
            self.address.host,
            str(self.address.port),
        ))


class MenuParser:
    """Decodes menu reply lines into MenuEntry objects."""

    FIELD_SEPARATOR = "\t"

    def parse_line(
        self,
        line: str,
        default_host: str = "",
        default_port: int = DEFAULT_PORT,
    ) -> MenuEntry:
        """
        Parse a single menu line.

        Grammar: ``<type><display>TAB<selector>TAB<host>TAB<port>``.
        Lines with fewer than three fields reuse the connection's host and
        port. A missing or non-numeric port becomes 70.

        Args:
            line: The raw line without its line terminator.
            default_host: Host of the connection the menu came from.
            default_port: Port of the connection the menu came from.

        Returns:
            The parsed MenuEntry.

        Raises:
            MalformedLineError: If the line cannot be used at all.
        """
        line = line.rstrip("\r\n")

        if not line:
            raise MalformedLineError(line, "empty line")

        if line == TERMINATOR:
            raise MalformedLineError(line, "terminator line")

        type_char = line[0]
        if type_char == self.FIELD_SEPARATOR:
            raise MalformedLineError(line, "missing item type")

        item_type = ItemType.from_char(type_char)
        fields = line[1:].split(self.FIELD_SEPARATOR, 3)

        if len(fields) == 1:
            # Lazy servers send info and error text without any fields
            if item_type.is_navigable:
                raise MalformedLineError(line, "no tab-delimited fields")
            return MenuEntry(
                item_type=item_type,
                display=fields[0],
                address=Address(
                    host=default_host,
                    port=default_port,
                    item_type=item_type,
                ),
                type_char=type_char,
            )

        display, selector = fields[0], fields[1]

        if len(fields) < 3:
            host, port = default_host, default_port
        else:
            host = fields[2] or default_host
            port = self._parse_port(fields[3] if len(fields) > 3 else "")

        return MenuEntry(
            item_type=item_type,
            display=display,
            address=Address(
                host=host,
                port=port,
                selector=selector,
                item_type=item_type,
            ),
            type_char=type_char,
        )

    def parse_menu(
        self,
        lines: Iterable[str],
        default_host: str = "",
        default_port: int = DEFAULT_PORT,
    ) -> list[MenuEntry]:
        """
        Parse all lines of a menu reply.

        Empty lines are ignored, parsing stops at the terminator line and
        malformed lines are logged and skipped.
        """
        entries = []
        for line in lines:
            line = line.rstrip("\r\n")
            if line == TERMINATOR:
                break
            if not line:
                continue
            try:
                entries.append(self.parse_line(line, default_host, default_port))
            except MalformedLineError as e:
                logger.warning(f"Skipping menu line: {e}")
        return entries

    @staticmethod
    def _parse_port(value: str) -> int:
        # Gopher+ servers append a TAB and "+" after the port
        value = value.split("\t", 1)[0].strip()
        try:
            return int(value)
        except ValueError:
            return DEFAULT_PORT
