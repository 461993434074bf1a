"""Domain ports - interfaces for infrastructure to implement."""

from .channel_port import ChannelPort, ShellChannelPort
from .local_socket_port import LocalSocketPort, SocketConnector
from .terminal_port import TerminalPort
from .transport_port import ForwardingHandler, TransportPort

__all__ = [
    "ChannelPort",
    "ShellChannelPort",
    "LocalSocketPort",
    "SocketConnector",
    "TerminalPort",
    "TransportPort",
    "ForwardingHandler",
]
