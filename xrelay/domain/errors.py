"""Domain errors."""


class XRelayError(Exception):
    """Base class for all xrelay errors."""


class DuplicateEndpoint(XRelayError):
    """Raised when a channel or socket is already registered to a live pair."""


class LocalConnectError(XRelayError):
    """Raised when the local display socket cannot be connected."""


class UnsupportedPlatform(XRelayError):
    """Raised when the platform lacks Unix domain sockets or termios."""


class SetupError(XRelayError):
    """Fatal error while establishing the session, before the loop starts.

    Attributes:
        stage: Setup step that failed (connect, handshake, authenticate,
            open_channel, pty, forwarding, shell, raw_mode).
    """

    def __init__(self, stage: str, message: str) -> None:
        super().__init__(f"{stage}: {message}")
        self.stage = stage
        self.message = message
