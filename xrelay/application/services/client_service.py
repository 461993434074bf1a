"""Client service - session setup, the relay loop and teardown."""

import logging
from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from xrelay.domain import (
    PairRelay,
    PrimarySession,
    SetupError,
    ShellChannelPort,
    TerminalPort,
    TransportPort,
)

from .connection_acceptor import ConnectionAcceptor
from .event_loop import EventLoopDriver
from .session_bridge import SessionBridge

if TYPE_CHECKING:
    from xrelay.infrastructure.registry import EndpointPairRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientSettings:
    """Connection parameters for one client run."""

    host: str
    username: str
    port: int = 22
    password: str | None = None
    key_filename: str | None = None
    known_hosts: str | None = None
    connect_timeout: float = 30.0
    term_type: str = "xterm"
    forwarding: bool = True
    screen_number: int = 0
    single_connection: bool = False


class ClientService:
    """Runs one interactive session with display forwarding.

    Setup failures raise SetupError after closing whatever was opened.
    """

    def __init__(
        self,
        settings: ClientSettings,
        transport: TransportPort,
        terminal: TerminalPort,
        registry: "EndpointPairRegistry",
        acceptor: ConnectionAcceptor,
        bridge: SessionBridge,
        relay: PairRelay,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._terminal = terminal
        self._registry = registry
        self._acceptor = acceptor
        self._bridge = bridge
        self._relay = relay

    def open(self) -> PrimarySession:
        """Connect, authenticate and start the remote shell."""
        s = self._settings
        channel: ShellChannelPort | None = None
        try:
            self._transport.open(s.host, s.port, s.connect_timeout)
            self._transport.handshake()
            self._transport.verify_host_key(s.known_hosts)
            if s.forwarding:
                self._transport.set_forwarding_handler(self._acceptor)
            self._transport.authenticate(s.username, s.password, s.key_filename)

            channel = self._transport.open_channel()
            dimensions = self._terminal.current_geometry()
            channel.request_pty(s.term_type, dimensions)
            if s.forwarding:
                channel.request_forwarding(s.screen_number, s.single_connection)
            channel.request_shell()
        except SetupError as e:
            logger.error("Session setup failed stage=%s: %s", e.stage, e.message)
            if channel is not None:
                channel.close()
            self._transport.close()
            raise

        logger.info(
            "Shell started host=%s user=%s cols=%d rows=%d",
            s.host,
            s.username,
            dimensions.cols,
            dimensions.rows,
        )
        return PrimarySession(channel=channel, dimensions=dimensions)

    def create_driver(self) -> EventLoopDriver:
        return EventLoopDriver(
            bridge=self._bridge,
            registry=self._registry,
            relay=self._relay,
            terminal=self._terminal,
            transport=self._transport,
        )

    def run(self, while_raw: Callable[[], AbstractContextManager[Any]] = nullcontext) -> int:
        """Open the session and relay until the shell exits.

        Args:
            while_raw: Context entered before the terminal goes raw and
                exited after it has been restored.

        Returns:
            Number of loop ticks executed.

        Raises:
            SetupError: If the session cannot be established or raw mode
                cannot be entered. The terminal mode is restored first.
        """
        session = self.open()
        driver = self.create_driver()
        with while_raw():
            try:
                try:
                    previous_mode = self._terminal.enter_raw_mode()
                except OSError as e:
                    raise SetupError("raw_mode", f"failed to enter raw mode: {e}") from e
                session.mark_raw(previous_mode)
                return driver.run(session)
            finally:
                driver.stop(session)
                closed = self._registry.close_all()
                if closed:
                    logger.info("Closed %d forwarded connections at shutdown", closed)
                self._transport.close()
