class WakeyError(Exception):
    """Base class for all wakey errors."""


class InvalidMacLength(WakeyError, ValueError):
    """The MAC address string or byte sequence has the wrong size."""

    def __init__(self, msg: str = "Invalid MAC address length"):
        super().__init__(msg)


class InvalidMacFormat(WakeyError, ValueError):
    """The MAC address has the right size but does not decode."""

    def __init__(self, msg: str = "Invalid MAC address format"):
        super().__init__(msg)


class SendFailure(WakeyError):
    """Binding, enabling broadcast or sending the datagram failed."""

    def __init__(self, error: Exception):
        super().__init__(f"Couldn't send WoL packet: {error}")
        self.error = error
