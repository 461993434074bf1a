"""Application services - use case implementations."""

from .client_service import ClientService, ClientSettings
from .connection_acceptor import ConnectionAcceptor, DisplaySource
from .event_loop import EventLoopDriver, LoopState
from .session_bridge import SessionBridge

__all__ = [
    "ClientService",
    "ClientSettings",
    "ConnectionAcceptor",
    "DisplaySource",
    "EventLoopDriver",
    "LoopState",
    "SessionBridge",
]
