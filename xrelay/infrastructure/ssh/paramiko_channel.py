"""Paramiko channel adapter."""

import logging

import paramiko

from xrelay.domain import SetupError, TerminalDimensions

logger = logging.getLogger(__name__)


class ParamikoChannel:
    """Adapts paramiko.Channel to ChannelPort and ShellChannelPort."""

    def __init__(self, channel: paramiko.Channel) -> None:
        self._channel = channel

    @property
    def raw(self) -> paramiko.Channel:
        """Underlying paramiko channel."""
        return self._channel

    @property
    def channel_id(self) -> int:
        return self._channel.get_id()

    # Data transfer

    def recv_ready(self) -> bool:
        return self._channel.recv_ready()

    def read(self, size: int) -> bytes:
        return self._channel.recv(size)

    def write(self, data: bytes) -> int:
        # send() only waits when the remote window is exhausted
        if not self._channel.send_ready():
            return 0
        return self._channel.send(data)

    def at_eof(self) -> bool:
        # Buffered data must be drained before reporting end-of-stream
        ended = self._channel.eof_received or self._channel.closed
        return bool(ended) and not self._channel.recv_ready()

    def close(self) -> None:
        self._channel.close()

    # Shell channel requests

    def request_pty(self, term_type: str, dimensions: TerminalDimensions) -> None:
        try:
            self._channel.get_pty(term=term_type, width=dimensions.cols, height=dimensions.rows)
        except paramiko.SSHException as e:
            raise SetupError("pty", f"failed to request a pty: {e}") from e

    def request_forwarding(self, screen_number: int, single_connection: bool) -> None:
        try:
            # handler=None queues incoming X11 channels for Transport.accept()
            self._channel.request_x11(
                screen_number=screen_number,
                single_connection=single_connection,
            )
        except paramiko.SSHException as e:
            raise SetupError("forwarding", f"failed to request X11 forwarding: {e}") from e

    def request_shell(self) -> None:
        try:
            self._channel.invoke_shell()
        except paramiko.SSHException as e:
            raise SetupError("shell", f"failed to open a shell: {e}") from e

    def resize(self, dimensions: TerminalDimensions) -> None:
        try:
            self._channel.resize_pty(width=dimensions.cols, height=dimensions.rows)
        except (paramiko.SSHException, OSError, EOFError) as e:
            logger.warning("Resize request failed cols=%d rows=%d: %s", dimensions.cols, dimensions.rows, e)
