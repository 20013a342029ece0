"""Item types and addresses of fetchable Gopher resources."""

from dataclasses import dataclass
from enum import Enum

from ..errors import AddressError

DEFAULT_PORT = 70


class ItemType(Enum):
    """Gopher item types, keyed by their menu type character."""

    TEXT_FILE = "0"
    SUBMENU = "1"
    CCSO = "2"
    ERROR = "3"
    BINHEX = "4"
    DOS_BINARY = "5"
    UUENCODED = "6"
    SEARCH = "7"
    TELNET = "8"
    BINARY = "9"
    MIRROR = "+"
    GIF = "g"
    IMAGE = "I"
    PNG = "p"
    JPG = "j"
    HTML = "h"
    INFO = "i"
    UNSUPPORTED = ""

    @classmethod
    def from_char(cls, char: str) -> "ItemType":
        """Map a type character to an ItemType, UNSUPPORTED if unknown."""
        if not char:
            return cls.UNSUPPORTED
        try:
            return cls(char)
        except ValueError:
            return cls.UNSUPPORTED

    @property
    def is_navigable(self) -> bool:
        """Info and error lines carry no target."""
        return self not in (ItemType.INFO, ItemType.ERROR)

    @property
    def is_menu(self) -> bool:
        return self in _MENU_TYPES

    @property
    def is_binary(self) -> bool:
        return self in _BINARY_TYPES

    @property
    def is_fetchable(self) -> bool:
        """Whether selecting this type fetches something we can show or save."""
        return self.is_menu or self.is_binary or self in (ItemType.TEXT_FILE, ItemType.HTML)

    @property
    def style_name(self) -> str:
        """Style tag used for menu lines of this type."""
        return f"item:{self.name.lower()}"


_MENU_TYPES = frozenset({ItemType.SUBMENU, ItemType.MIRROR, ItemType.SEARCH})

_BINARY_TYPES = frozenset({
    ItemType.BINHEX,
    ItemType.DOS_BINARY,
    ItemType.UUENCODED,
    ItemType.BINARY,
    ItemType.GIF,
    ItemType.IMAGE,
    ItemType.PNG,
    ItemType.JPG,
})


@dataclass(frozen=True)
class Address:
    """Location of a Gopher resource."""

    host: str
    port: int = DEFAULT_PORT
    selector: str = ""
    item_type: ItemType = ItemType.SUBMENU

    def with_selector(self, selector: str, item_type: ItemType | None = None) -> "Address":
        """Return a copy pointing at another selector on the same server."""
        return Address(
            host=self.host,
            port=self.port,
            selector=selector,
            item_type=item_type or self.item_type,
        )

    def host_port(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{host}:{self.port}"

    def to_url(self) -> str:
        """Render as a gopher:// URL (RFC 4266)."""
        type_char = self.item_type.value or ItemType.SUBMENU.value
        if not self.selector and self.item_type is ItemType.SUBMENU:
            return f"gopher://{self.host_port()}/"
        return f"gopher://{self.host_port()}/{type_char}{self.selector}"

    def __str__(self) -> str:
        return self.to_url()


def _split_host_port(text: str, hostport: str, default_port: int) -> tuple[str, int]:
    """Split 'host', 'host:port' or '[v6]:port' into its parts."""
    if hostport.startswith("["):
        end = hostport.find("]")
        if end == -1:
            raise AddressError(text, "unterminated IPv6 address")
        host = hostport[1:end]
        rest = hostport[end + 1:]
        if rest and not rest.startswith(":"):
            raise AddressError(text, "unexpected characters after IPv6 address")
        port_str = rest[1:] if rest else ""
    elif hostport.count(":") > 1:
        # Bare IPv6 literal without brackets or port
        host, port_str = hostport, ""
    elif ":" in hostport:
        host, port_str = hostport.split(":", 1)
    else:
        host, port_str = hostport, ""

    if not host:
        raise AddressError(text, "missing host")

    if not port_str:
        return host, default_port

    try:
        port = int(port_str)
    except ValueError:
        raise AddressError(text, f"invalid port number: {port_str}")

    if port < 1 or port > 65535:
        raise AddressError(text, f"port out of range: {port}")

    return host, port


def parse_address(text: str, default_port: int = DEFAULT_PORT) -> Address:
    """
    Parse user-typed address text into an Address.

    Accepts ``host``, ``host:port``, ``host[:port]/selector`` and
    ``gopher://host[:port]/<type><selector>`` URLs. In the plain form the
    selector keeps its leading slash; in URL form the first path character
    is the item type.

    Args:
        text: The address text.
        default_port: Port used when none is given.

    Returns:
        The parsed Address.

    Raises:
        AddressError: If the text does not describe a usable address.
    """
    cleaned = text.strip()
    if not cleaned:
        raise AddressError(text, "empty address")

    is_url = cleaned.lower().startswith("gopher://")
    body = cleaned[len("gopher://"):] if is_url else cleaned

    if body.startswith("["):
        close = body.find("]")
        slash = body.find("/", close if close != -1 else 0)
    else:
        slash = body.find("/")

    if slash == -1:
        hostport, path = body, ""
    else:
        hostport, path = body[:slash], body[slash:]

    host, port = _split_host_port(text, hostport, default_port)

    if not is_url:
        return Address(host=host, port=port, selector=path)

    # RFC 4266: /<type><selector>
    if len(path) <= 1:
        return Address(host=host, port=port)

    item_type = ItemType.from_char(path[1])
    if item_type is ItemType.UNSUPPORTED:
        return Address(host=host, port=port, selector=path)
    return Address(host=host, port=port, selector=path[2:], item_type=item_type)
