"""Endpoint pair entity - one forwarded display connection."""

from dataclasses import dataclass, field
from datetime import datetime

from ..ports import ChannelPort, LocalSocketPort


@dataclass(eq=False)
class EndpointPair:
    """A forwarded connection: a remote channel bridged to a local socket.

    The channel is owned by the transport and only referenced here; the
    socket belongs to the pair once registered. Pairs compare by identity.

    Bytes read from one side but not yet accepted by the other wait in
    ``pending_to_socket`` / ``pending_to_channel``. At most one read's
    worth is held per direction.
    """

    channel: ChannelPort
    socket: LocalSocketPort
    created_at: datetime | None = None
    bytes_to_socket: int = 0
    bytes_to_channel: int = 0
    pending_to_socket: bytearray = field(default_factory=bytearray, repr=False)
    pending_to_channel: bytearray = field(default_factory=bytearray, repr=False)
    _released: bool = field(default=False, repr=False)

    @property
    def is_released(self) -> bool:
        """Whether the pair's endpoints have been released."""
        return self._released

    def record_to_socket(self, count: int) -> None:
        self.bytes_to_socket += count

    def record_to_channel(self, count: int) -> None:
        self.bytes_to_channel += count

    def release(self) -> bool:
        """Close the socket and drop the channel reference.

        Returns:
            True on the first call, False if already released.
        """
        if self._released:
            return False
        self._released = True
        self.pending_to_socket.clear()
        self.pending_to_channel.clear()
        try:
            self.socket.close()
        finally:
            self.channel.close()
        return True
