"""Pytest configuration and fixtures."""

import pytest

from term_gopher.core import Address, ItemType
from term_gopher.errors import ConnectError


class FakeTransport:
    """Transport serving canned replies keyed by (host, port, selector)."""

    def __init__(self, replies: dict | None = None):
        self.replies = dict(replies or {})
        self.fetched: list[Address] = []
        self.failing: set[tuple[str, int, str]] = set()

    def add(self, address: Address, reply: bytes) -> None:
        self.replies[(address.host, address.port, address.selector)] = reply

    def fail(self, address: Address) -> None:
        self.failing.add((address.host, address.port, address.selector))

    def fetch(self, address: Address) -> bytes:
        self.fetched.append(address)
        key = (address.host, address.port, address.selector)
        if key in self.failing:
            raise ConnectError(f"connection refused by {address.host_port()}")
        if key not in self.replies:
            raise ConnectError(f"no route to {address.host_port()}")
        return self.replies[key]


ROOT = Address(host="example.org", port=70, selector="")
HOME = Address(host="example.org", port=70, selector="/home")
README = Address(host="example.org", port=70, selector="/readme.txt", item_type=ItemType.TEXT_FILE)

ROOT_MENU = (
    b"iWelcome to example.org\t\terror.host\t1\r\n"
    b"1Home\t/home\texample.org\t70\r\n"
    b"0Read me\t/readme.txt\texample.org\t70\r\n"
    b"7Search\t/search\texample.org\t70\r\n"
    b"9Archive\t/files/archive.zip\texample.org\t70\r\n"
    b".\r\n"
)

HOME_MENU = (
    b"iHome page\t\terror.host\t1\r\n"
    b"1Back to root\t\texample.org\t70\r\n"
    b"0Notes\t/home/notes.txt\texample.org\t70\r\n"
    b".\r\n"
)

README_TEXT = b"Hello from example.org\r\nSecond line\r\n.\r\n"


@pytest.fixture
def fake_transport():
    """A transport knowing the sample server."""
    transport = FakeTransport()
    transport.add(ROOT, ROOT_MENU)
    transport.add(HOME, HOME_MENU)
    transport.add(README, README_TEXT)
    transport.add(Address(host="example.org", selector="/files/archive.zip"), b"PK\x03\x04binary")
    transport.add(Address(host="example.org", selector="/search\tgopher"), (
        b"0Result\t/results/1\texample.org\t70\r\n.\r\n"
    ))
    return transport


@pytest.fixture
def root_address():
    return ROOT


@pytest.fixture
def home_address():
    return HOME
