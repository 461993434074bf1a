"""Event loop driver - the single-threaded polling loop."""

import logging
from enum import Enum
from typing import TYPE_CHECKING

from xrelay.domain import PairRelay, PrimarySession, TerminalPort, TransportPort

from .session_bridge import SessionBridge

if TYPE_CHECKING:
    from xrelay.infrastructure.registry import EndpointPairRegistry

logger = logging.getLogger(__name__)


class LoopState(Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class EventLoopDriver:
    """Services the shell and every forwarded connection, tick by tick.

    Each tick: dispatch pending forwarding requests, run the session
    bridge, then run the relay step on every registered pair. The loop
    stops once the shell channel reaches end-of-stream. Stopping restores
    the terminal mode and releases the shell channel, once.

    Forwarded connections still open at stop are left to the caller.
    """

    def __init__(
        self,
        bridge: SessionBridge,
        registry: "EndpointPairRegistry",
        relay: PairRelay,
        terminal: TerminalPort,
        transport: TransportPort | None = None,
    ) -> None:
        self._bridge = bridge
        self._registry = registry
        self._relay = relay
        self._terminal = terminal
        self._transport = transport
        self._state = LoopState.RUNNING
        self._ticks = 0

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def ticks(self) -> int:
        return self._ticks

    def tick(self, session: PrimarySession) -> LoopState:
        """Run a single iteration."""
        if self._state is LoopState.STOPPED:
            return self._state

        if self._transport is not None:
            self._transport.dispatch_forwarded()

        end_of_stream = self._bridge.step(session)
        self._registry.for_each_removing(self._relay.step)
        self._ticks += 1

        if end_of_stream:
            logger.info("Shell channel closed after %d ticks", self._ticks)
            self.stop(session)
        return self._state

    def run(self, session: PrimarySession) -> int:
        """Loop until the shell ends.

        Returns:
            Number of ticks executed.
        """
        try:
            while self._state is LoopState.RUNNING:
                self.tick(session)
        finally:
            self.stop(session)
        return self._ticks

    def stop(self, session: PrimarySession) -> None:
        """Transition to STOPPED. Idempotent."""
        if self._state is LoopState.STOPPED:
            return
        self._state = LoopState.STOPPED

        should_restore, previous_mode = session.take_mode_for_restore()
        try:
            if should_restore:
                self._terminal.restore_mode(previous_mode)
        finally:
            session.release_channel()
