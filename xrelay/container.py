"""Dependency container - holds all wired dependencies."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from xrelay.application.services import (
    ClientService,
    ConnectionAcceptor,
    SessionBridge,
)
from xrelay.config import Config
from xrelay.domain import PairRelay, TerminalPort, TransportPort

if TYPE_CHECKING:
    from xrelay.infrastructure.registry import EndpointPairRegistry


@dataclass(frozen=True)
class Container:
    """Immutable dependency container.

    All dependencies are wired at startup and cannot be modified.
    """

    # Services
    client_service: ClientService
    connection_acceptor: ConnectionAcceptor
    session_bridge: SessionBridge
    pair_relay: PairRelay

    # Registry of forwarded connections
    registry: "EndpointPairRegistry"

    # Adapters
    transport: TransportPort
    terminal: TerminalPort

    # Configuration
    config: Config
