"""Builds render plans for the display adapter."""

from .address import ItemType
from .classifier import BinaryBlob, Menu, TextBody
from .menu_parser import MenuEntry
from .session import Session

STYLE_TEXT = "text"
STYLE_ERROR = "error"
STYLE_INFO = "info"
STYLE_STATUS = "status"

# Item type formatting stuff
ITEM_TYPE_TAGS = {
    ItemType.SEARCH: " <INP>",
    ItemType.TELNET: " <TEL>",
    ItemType.CCSO: " <CSO>",
    ItemType.BINARY: " <BIN>",
    ItemType.DOS_BINARY: " <BIN>",
    ItemType.BINHEX: " <HQX>",
    ItemType.UUENCODED: " <UUE>",
    ItemType.HTML: " <HTM>",
    ItemType.GIF: " <IMG>",
    ItemType.IMAGE: " <IMG>",
    ItemType.PNG: " <IMG>",
    ItemType.JPG: " <IMG>",
    ItemType.MIRROR: " <MIR>",
    ItemType.UNSUPPORTED: " <???>",
}

HELP_TEXT = """Gopher Client Help:
[num]           - Open menu entry number
o, open         - Open the entry under the cursor
n, next         - Move the cursor down
p, prev         - Move the cursor up
b, back         - Go back in history
f, forward      - Go forward in history
r, reload       - Reload the current page
go HOST[:PORT][/SELECTOR]
                - Jump to an address (gopher:// URLs work too)
save FILE       - Save the current document
url, s          - Show the current address
?, help         - This help
q, quit         - Leave

Commands may be prefixed with {prefix}"""


class MenuRenderer:
    """Turns a Session into an ordered list of (style, text) pairs."""

    def __init__(self, prefix: str = "/"):
        self.prefix = prefix

    def render(self, session: Session) -> list[tuple[str, str]]:
        """
        Render the current screen.

        Args:
            session: The session to render.

        Returns:
            Render plan: a status line followed by the document lines.
        """
        plan = [(STYLE_STATUS, self.status_line(session))]
        document = session.document

        if document is None:
            plan.append((STYLE_STATUS, "(nothing loaded, type 'reload' to retry)"))
        elif isinstance(document, Menu):
            plan.extend(self.render_menu(document, cursor=session.cursor))
        elif isinstance(document, TextBody):
            plan.extend((STYLE_TEXT, line) for line in document.lines)
        elif isinstance(document, BinaryBlob):
            plan.append((
                STYLE_STATUS,
                f"Binary file, {len(document.data)} bytes. Use 'save FILE' to keep it.",
            ))

        return plan

    def render_menu(self, menu: Menu, cursor: int | None = None) -> list[tuple[str, str]]:
        """Render menu entries, numbering the navigable ones by their index."""
        if not menu.entries:
            return [(STYLE_INFO, "(empty)")]

        return [
            self.render_entry(index, entry, selected=(index == cursor))
            for index, entry in enumerate(menu.entries)
        ]

    def render_entry(self, index: int, entry: MenuEntry, selected: bool = False) -> tuple[str, str]:
        if entry.item_type is ItemType.INFO:
            return STYLE_INFO, f"     {entry.display}"

        if entry.item_type is ItemType.ERROR:
            return STYLE_ERROR, f"     ERROR: {entry.display}"

        marker = ">" if selected else " "
        line = f"{marker}[{index}] {entry.display}"

        if entry.item_type in ITEM_TYPE_TAGS:
            line += ITEM_TYPE_TAGS[entry.item_type]
        elif entry.item_type is ItemType.SUBMENU and not line.endswith("/"):
            line += "/"

        return entry.item_type.style_name, line

    def status_line(self, session: Session) -> str:
        current = session.current
        if current is None:
            return "(no address)"
        return f"{current.host_port()} {current.selector}".rstrip()

    def prompt(self, session: Session) -> str:
        """Prompt shown before reading a command."""
        current = session.current
        if current is None:
            return "> "
        return f"{current.host_port()} {current.selector}> "

    def render_help(self) -> list[tuple[str, str]]:
        return [(STYLE_TEXT, line) for line in HELP_TEXT.format(prefix=self.prefix).splitlines()]

    def render_message(self, text: str, style: str = STYLE_INFO) -> list[tuple[str, str]]:
        return [(style, line) for line in text.splitlines() or [""]]
