"""Pure domain layer - no infrastructure dependencies."""

# Value Objects
from .values import (
    DEFAULT_PAIR_BUFFER_SIZE,
    DEFAULT_SHELL_BUFFER_SIZE,
    DEFAULT_SOCKET_DIR,
    INPUT_CHUNK_SIZE,
    MAX_COLS,
    MAX_ROWS,
    MIN_COLS,
    MIN_ROWS,
    DisplayTarget,
    RelayLimits,
    TerminalDimensions,
)

# Ports
from .ports import (
    ChannelPort,
    ForwardingHandler,
    LocalSocketPort,
    ShellChannelPort,
    SocketConnector,
    TerminalPort,
    TransportPort,
)

# Entities
from .entities import EndpointPair, PrimarySession

# Services
from .services import PairRelay, flush_pending, resolve_display

# Errors
from .errors import (
    DuplicateEndpoint,
    LocalConnectError,
    SetupError,
    UnsupportedPlatform,
    XRelayError,
)

__all__ = [
    # Values
    "TerminalDimensions",
    "MIN_COLS",
    "MAX_COLS",
    "MIN_ROWS",
    "MAX_ROWS",
    "DisplayTarget",
    "DEFAULT_SOCKET_DIR",
    "RelayLimits",
    "DEFAULT_PAIR_BUFFER_SIZE",
    "DEFAULT_SHELL_BUFFER_SIZE",
    "INPUT_CHUNK_SIZE",
    # Ports
    "ChannelPort",
    "ShellChannelPort",
    "LocalSocketPort",
    "SocketConnector",
    "TerminalPort",
    "TransportPort",
    "ForwardingHandler",
    # Entities
    "EndpointPair",
    "PrimarySession",
    # Services
    "PairRelay",
    "flush_pending",
    "resolve_display",
    # Errors
    "XRelayError",
    "DuplicateEndpoint",
    "LocalConnectError",
    "SetupError",
    "UnsupportedPlatform",
]
