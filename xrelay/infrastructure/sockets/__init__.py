"""Local socket adapters."""

from .unix_socket import UnixSocketConnector, UnixStreamSocket, unix_sockets_supported

__all__ = [
    "UnixSocketConnector",
    "UnixStreamSocket",
    "unix_sockets_supported",
]
