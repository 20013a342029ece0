"""Exception types raised by the Gopher client."""


class GopherError(Exception):
    """Base class for all client errors."""

    pass


class ConnectError(GopherError):
    """Raised when a host cannot be reached (DNS, refusal, timeout)."""

    def __init__(self, reason: str):
        super().__init__(f"Connection failed: {reason}")
        self.reason = reason


class TruncatedResponseError(GopherError):
    """Raised when a menu reply ends in the middle of a line."""

    def __init__(self, message: str = "Response ended in the middle of a line"):
        super().__init__(message)


class MalformedLineError(GopherError):
    """Raised for a single unparsable menu line."""

    def __init__(self, line: str, reason: str):
        super().__init__(f"Malformed menu line ({reason}): {line!r}")
        self.line = line
        self.reason = reason


class AddressError(GopherError, ValueError):
    """Raised when address text cannot be turned into an Address."""

    def __init__(self, text: str, reason: str):
        super().__init__(f"Invalid address {text!r}: {reason}")
        self.text = text
        self.reason = reason


class CommandError(GopherError):
    """Base class for user input errors."""

    pass


class UnknownCommandError(CommandError):
    """Raised when user input matches no command."""

    def __init__(self, text: str):
        super().__init__(f"Unknown command: {text}")
        self.text = text


class IndexOutOfRangeError(CommandError):
    """Raised when a selection does not name an entry of the loaded menu."""

    def __init__(self, index: int, size: int):
        if size:
            message = f"Invalid selection: {index} (menu has entries 0-{size - 1})"
        else:
            message = f"Invalid selection: {index} (no menu loaded)"
        super().__init__(message)
        self.index = index
        self.size = size


class HandlerError(GopherError):
    """Raised when an external handler program cannot be started."""

    def __init__(self, program: str, reason: str):
        super().__init__(f"Cannot run {program}: {reason}")
        self.program = program
        self.reason = reason
