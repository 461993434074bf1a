"""Composition root - the ONLY place where dependencies are wired."""

from xrelay.application.services import (
    ClientService,
    ClientSettings,
    ConnectionAcceptor,
    SessionBridge,
)
from xrelay.config import Config
from xrelay.container import Container
from xrelay.domain import PairRelay, RelayLimits, SocketConnector, TerminalPort, TransportPort
from xrelay.infrastructure.registry import EndpointPairRegistry


def create_settings(config: Config, password: str | None = None) -> ClientSettings:
    """Build client settings from validated configuration."""
    return ClientSettings(
        host=config.ssh.host,
        port=config.ssh.port,
        username=config.ssh.username,
        password=password,
        key_filename=config.ssh.key_filename,
        known_hosts=config.ssh.known_hosts,
        connect_timeout=config.ssh.connect_timeout,
        term_type=config.terminal.term_type,
        forwarding=config.forwarding.enabled,
        screen_number=config.forwarding.screen_number,
        single_connection=config.forwarding.single_connection,
    )


def create_container(
    config: Config,
    password: str | None = None,
    transport: TransportPort | None = None,
    terminal: TerminalPort | None = None,
    connector: SocketConnector | None = None,
) -> Container:
    """Create the dependency container with all wired dependencies.

    Adapters default to paramiko, termios and Unix sockets; tests pass
    fakes instead.

    Raises:
        UnsupportedPlatform: If a default adapter cannot run here.
    """
    if transport is None:
        from xrelay.infrastructure.ssh import ParamikoTransport

        transport = ParamikoTransport(timeout=config.ssh.connect_timeout)
    if terminal is None:
        from xrelay.infrastructure.terminal import PosixTerminal

        terminal = PosixTerminal()
    if connector is None:
        from xrelay.infrastructure.sockets import UnixSocketConnector

        connector = UnixSocketConnector()

    limits = RelayLimits(
        pair_buffer_size=config.forwarding.buffer_size,
        shell_buffer_size=config.relay.shell_buffer_size,
        input_wait=config.terminal.input_wait,
    )

    registry = EndpointPairRegistry()
    acceptor = ConnectionAcceptor(
        registry=registry,
        connector=connector,
        display_source=config.forwarding.current_display,
        socket_dir=config.forwarding.socket_dir,
    )
    bridge = SessionBridge(terminal, limits)
    relay = PairRelay(limits.pair_buffer_size)

    client_service = ClientService(
        settings=create_settings(config, password),
        transport=transport,
        terminal=terminal,
        registry=registry,
        acceptor=acceptor,
        bridge=bridge,
        relay=relay,
    )

    return Container(
        client_service=client_service,
        connection_acceptor=acceptor,
        session_bridge=bridge,
        pair_relay=relay,
        registry=registry,
        transport=transport,
        terminal=terminal,
        config=config,
    )
