"""TCP transport speaking the Gopher request/response exchange."""

import logging
import socket

from ..errors import ConnectError, TruncatedResponseError
from ..interfaces import GopherTransport
from ..core.address import Address

logger = logging.getLogger(__name__)

CRLF = b"\r\n"
TERMINATORS = (b"\r\n.\r\n", b"\n.\n")
BARE_TERMINATORS = (b".\r\n", b".\n")


def ends_with_terminator(data: bytes | bytearray) -> bool:
    """Check if a reply ends with the lone "." terminator line."""
    if len(data) <= 3 and bytes(data) in BARE_TERMINATORS:
        return True
    return any(data.endswith(t) for t in TERMINATORS)


class SocketTransport(GopherTransport):
    """Fetches resources over plain TCP, one connection per request.

    The timeout applies to connecting and to every read, so a stalled
    server cannot block the client indefinitely.
    """

    def __init__(self, timeout: float = 10.0, encoding: str = "utf-8", chunk_size: int = 4096):
        """
        Initialize the transport.

        Args:
            timeout: Seconds to wait for connecting and for each read.
            encoding: Encoding used for selectors.
            chunk_size: Bytes requested per read.
        """
        self.timeout = timeout
        self.encoding = encoding
        self.chunk_size = chunk_size

    def fetch(self, address: Address) -> bytes:
        """
        Send the selector and read the reply.

        Text and menu replies are read until the terminator line or until
        the server closes the connection; binary replies until close.

        Args:
            address: The resource to fetch.

        Returns:
            The raw reply bytes.

        Raises:
            ConnectError: On DNS failure, refusal, other socket errors or timeout.
            TruncatedResponseError: If a menu reply stops mid-line.
        """
        request = address.selector.encode(self.encoding, errors="replace") + CRLF
        stop_at_terminator = not address.item_type.is_binary
        logger.debug(f"Connecting to {address.host_port()} for {address.selector!r}")

        try:
            with socket.create_connection((address.host, address.port), timeout=self.timeout) as sock:
                sock.sendall(request)
                data = self._read_reply(sock, stop_at_terminator)
        except socket.timeout:
            raise ConnectError(f"timed out after {self.timeout}s ({address.host_port()})")
        except socket.gaierror as e:
            raise ConnectError(f"cannot resolve {address.host}: {e.strerror or e}")
        except ConnectionRefusedError:
            raise ConnectError(f"connection refused by {address.host_port()}")
        except OSError as e:
            raise ConnectError(f"{address.host_port()}: {e.strerror or e}")

        logger.debug(f"Received {len(data)} bytes from {address.host_port()}")

        if address.item_type.is_menu and data and not ends_with_terminator(data) and not data.endswith(b"\n"):
            raise TruncatedResponseError(
                f"Menu from {address.host_port()} ended in the middle of a line"
            )

        return data

    def _read_reply(self, sock: socket.socket, stop_at_terminator: bool) -> bytes:
        buffer = bytearray()
        while True:
            chunk = sock.recv(self.chunk_size)
            if not chunk:
                break
            buffer.extend(chunk)
            if stop_at_terminator and ends_with_terminator(buffer):
                break
        return bytes(buffer)
