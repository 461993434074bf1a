"""Transport port - interface for the secure transport session."""

from collections.abc import Callable
from typing import Protocol

from .channel_port import ChannelPort, ShellChannelPort

ForwardingHandler = Callable[[ChannelPort], None]


class TransportPort(Protocol):
    """Protocol for the secure transport session.

    Setup methods raise ``SetupError`` naming the failed stage.
    """

    def open(self, host: str, port: int, timeout: float) -> None:
        """Open the underlying TCP connection."""
        ...

    def handshake(self) -> None:
        """Negotiate the secure session."""
        ...

    def verify_host_key(self, known_hosts: str | None) -> None:
        """Check the server key against a known_hosts file."""
        ...

    def authenticate(
        self,
        username: str,
        password: str | None = None,
        key_filename: str | None = None,
    ) -> None:
        """Authenticate with a password or a private key file."""
        ...

    def open_channel(self) -> ShellChannelPort:
        """Open a session channel for the interactive shell."""
        ...

    def set_forwarding_handler(self, handler: ForwardingHandler) -> None:
        """Register the callback for remotely opened forwarded connections."""
        ...

    def dispatch_forwarded(self) -> int:
        """Hand pending forwarded connections to the handler.

        Runs the handler synchronously in the caller's thread.

        Returns:
            Number of connections dispatched.
        """
        ...

    def close(self) -> None:
        """Disconnect the session and close the TCP connection."""
        ...
