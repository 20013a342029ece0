"""External programs for items the terminal cannot show itself."""

import logging
import shlex
import subprocess
import tempfile

from .config import Config
from .core import Address, ItemType
from .errors import HandlerError

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = {
    ItemType.GIF: ".gif",
    ItemType.PNG: ".png",
    ItemType.JPG: ".jpg",
    ItemType.IMAGE: "",
}


class ExternalHandlers:
    """Runs the configured browser, image viewer, telnet client and pager.

    Each program is optional. When one is missing the caller keeps its
    terminal-only behaviour.
    """

    def __init__(self, config: Config):
        self.browser = config.browser_command
        self.image = config.image_command
        self.telnet = config.telnet_command
        self.pager = config.pager_command
        self.encoding = config.encoding

    def command_for(self, item_type: ItemType) -> str | None:
        """Configured program for an item type, if any."""
        if item_type in IMAGE_SUFFIXES:
            return self.image
        if item_type is ItemType.HTML:
            return self.browser
        if item_type is ItemType.TELNET:
            return self.telnet
        return None

    def handles(self, item_type: ItemType) -> bool:
        return self.command_for(item_type) is not None

    def open_url(self, url: str) -> str | None:
        """Hand a URL: link to the browser."""
        return self._run(self.browser, [url])

    def open_telnet(self, address: Address) -> str | None:
        return self._run(self.telnet, [address.host, str(address.port)])

    def open_data(self, item_type: ItemType, data: bytes) -> str | None:
        """
        Write fetched data to a temporary file and open it.

        Args:
            item_type: Type of the fetched item, selecting the program.
            data: Raw reply bytes.

        Returns:
            A notice when the program exits unsuccessfully, else None.
        """
        command = self.command_for(item_type)
        if command is None:
            raise HandlerError(item_type.name.lower(), "no handler configured")

        suffix = ".html" if item_type is ItemType.HTML else IMAGE_SUFFIXES.get(item_type, "")
        with tempfile.NamedTemporaryFile(suffix=suffix, delete=False) as f:
            f.write(data)
        logger.debug(f"Wrote {len(data)} bytes to {f.name}")
        return self._run(command, [f.name])

    def page(self, text: str) -> str | None:
        """Pipe a text document through the pager."""
        return self._run(self.pager, [], stdin=text.encode(self.encoding, errors="replace"))

    def _run(self, command: str | None, args: list[str], stdin: bytes | None = None) -> str | None:
        if not command:
            raise HandlerError("handler", "no program configured")

        argv = shlex.split(command) + args
        logger.info(f"Running {argv}")
        try:
            result = subprocess.run(argv, input=stdin)
        except FileNotFoundError:
            raise HandlerError(argv[0], "program not found")
        except OSError as e:
            raise HandlerError(argv[0], str(e.strerror or e))

        if result.returncode != 0:
            logger.warning(f"{argv[0]} exited with status {result.returncode}")
            return f"{argv[0]} exited with status {result.returncode}."
        return None
