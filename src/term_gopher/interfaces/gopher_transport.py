"""Abstract interface for fetching Gopher resources."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.address import Address


class GopherTransport(ABC):
    """Abstract interface for one request/response exchange per call."""

    @abstractmethod
    def fetch(self, address: "Address") -> bytes:
        """Send the address's selector and return the raw reply.

        Args:
            address: The resource to fetch.

        Returns:
            The reply bytes, including any terminator line.

        Raises:
            ConnectError: If the host cannot be reached or times out.
            TruncatedResponseError: If a menu reply is cut off mid-line.
        """
        pass
