"""Network transports for the Gopher client."""

from .socket_transport import SocketTransport

__all__ = ["SocketTransport"]
