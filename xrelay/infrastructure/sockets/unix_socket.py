"""Unix domain socket adapter for local display connections.

Connected sockets are switched to non-blocking mode: reads are gated by
select() and writes take only what the kernel buffer accepts.
"""

import logging
import select
import socket
from contextlib import suppress

from xrelay.domain import LocalConnectError, UnsupportedPlatform

logger = logging.getLogger(__name__)


def unix_sockets_supported() -> bool:
    """Check whether the platform provides AF_UNIX stream sockets."""
    return hasattr(socket, "AF_UNIX")


class UnixStreamSocket:
    """Connected stream socket implementing LocalSocketPort."""

    def __init__(self, sock: socket.socket) -> None:
        sock.setblocking(False)
        self._sock = sock
        self._closed = False

    def fileno(self) -> int:
        return self._sock.fileno()

    @property
    def closed(self) -> bool:
        return self._closed

    def readable(self, timeout: float = 0.0) -> bool:
        if self._closed:
            return False
        ready, _, _ = select.select([self._sock], [], [], timeout)
        return bool(ready)

    def read(self, size: int) -> bytes:
        try:
            return self._sock.recv(size)
        except OSError as e:
            logger.debug("Socket read failed fd=%d: %s", self._sock.fileno(), e)
            return b""

    def write(self, data: bytes) -> int:
        try:
            return self._sock.send(data)
        except BlockingIOError:
            return 0

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        with suppress(OSError):
            self._sock.shutdown(socket.SHUT_RDWR)
        self._sock.close()


class UnixSocketConnector:
    """Opens Unix domain stream connections (SocketConnector)."""

    def __init__(self, timeout: float | None = None) -> None:
        if not unix_sockets_supported():
            raise UnsupportedPlatform("Unix domain sockets are not available")
        self._timeout = timeout

    def connect(self, address: str) -> UnixStreamSocket:
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            sock.settimeout(self._timeout)
            sock.connect(address)
        except OSError as e:
            with suppress(OSError):
                sock.shutdown(socket.SHUT_RDWR)
            sock.close()
            raise LocalConnectError(f"cannot connect to {address}: {e}") from e

        return UnixStreamSocket(sock)
