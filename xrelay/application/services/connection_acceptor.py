"""Connection acceptor - turns forwarding requests into registered pairs."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from xrelay.domain import (
    DEFAULT_SOCKET_DIR,
    ChannelPort,
    DuplicateEndpoint,
    EndpointPair,
    LocalConnectError,
    SocketConnector,
    resolve_display,
)

if TYPE_CHECKING:
    from xrelay.infrastructure.registry import EndpointPairRegistry

logger = logging.getLogger(__name__)

DisplaySource = Callable[[], str | None]


class ConnectionAcceptor:
    """Handles "remote opened a forwarded connection" notifications.

    Resolves the display, connects a local socket and registers the pair.
    Unsupported displays and failed connects drop the request silently;
    the channel stays with the transport in that case.
    """

    def __init__(
        self,
        registry: "EndpointPairRegistry",
        connector: SocketConnector,
        display_source: DisplaySource,
        socket_dir: str = DEFAULT_SOCKET_DIR,
    ) -> None:
        self._registry = registry
        self._connector = connector
        self._display_source = display_source
        self._socket_dir = socket_dir

    def __call__(self, channel: ChannelPort) -> None:
        """Transport callback entry point."""
        self.accept(channel, self._display_source())

    def accept(self, channel: ChannelPort, descriptor: str | None) -> EndpointPair | None:
        """Bridge ``channel`` to the local display named by ``descriptor``.

        Returns:
            The registered pair, or None if the request was dropped.
        """
        address = resolve_display(descriptor, self._socket_dir)
        if address is None:
            logger.debug("Dropping forwarded connection, display not local display=%r", descriptor)
            return None

        try:
            sock = self._connector.connect(address)
        except LocalConnectError as e:
            logger.debug("Dropping forwarded connection: %s", e)
            return None

        pair = EndpointPair(channel=channel, socket=sock, created_at=datetime.now(UTC))
        try:
            self._registry.insert(pair)
        except DuplicateEndpoint as e:
            logger.warning("Dropping forwarded connection: %s", e)
            sock.close()
            return None

        return pair
