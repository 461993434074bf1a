"""Local socket port - interface for local display connections."""

from typing import Protocol


class LocalSocketPort(Protocol):
    """Protocol for a connected local stream socket."""

    def readable(self, timeout: float = 0.0) -> bool:
        """Check whether a read would not block, waiting at most ``timeout``."""
        ...

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes.

        Returns b"" when the peer closed the connection or the read failed.
        """
        ...

    def write(self, data: bytes) -> int:
        """Write without blocking.

        Returns:
            Number of bytes accepted, 0 when the send buffer is full.

        Raises:
            OSError: If the peer is gone.
        """
        ...

    def close(self) -> None:
        """Shut down both directions and close. Safe to call more than once."""
        ...


class SocketConnector(Protocol):
    """Protocol for opening local stream connections."""

    def connect(self, address: str) -> LocalSocketPort:
        """Connect to ``address``.

        Raises:
            LocalConnectError: If the connection cannot be established.
                No socket is left open in that case.
        """
        ...
