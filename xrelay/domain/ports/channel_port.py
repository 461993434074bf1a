"""Secure channel port - interface for SSH logical channels."""

from typing import Protocol

from ..values import TerminalDimensions


class ChannelPort(Protocol):
    """Protocol for a logical channel multiplexed over the secure transport.

    Reads are non-blocking once ``recv_ready`` reported data; writes
    never block.
    """

    def recv_ready(self) -> bool:
        """Check whether data can be read without blocking."""
        ...

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes of buffered data."""
        ...

    def write(self, data: bytes) -> int:
        """Write as much of ``data`` as the channel window allows.

        Never waits for window space.

        Returns:
            Number of bytes accepted, possibly 0.
        """
        ...

    def at_eof(self) -> bool:
        """Check whether the remote side signalled end-of-stream.

        Returns True only after all data buffered before the EOF has
        been read.
        """
        ...

    def close(self) -> None:
        """Release the channel. Safe to call more than once."""
        ...


class ShellChannelPort(ChannelPort, Protocol):
    """Protocol for the primary interactive shell channel."""

    def request_pty(self, term_type: str, dimensions: TerminalDimensions) -> None:
        """Request a pseudo-terminal on the remote side."""
        ...

    def request_forwarding(self, screen_number: int, single_connection: bool) -> None:
        """Ask the remote side to forward display connections back to us."""
        ...

    def request_shell(self) -> None:
        """Start the remote interactive shell."""
        ...

    def resize(self, dimensions: TerminalDimensions) -> None:
        """Notify the remote pseudo-terminal of new geometry."""
        ...
