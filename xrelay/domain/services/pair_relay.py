"""Pair relay step - one non-blocking transfer round for a forwarded connection."""

import logging
from collections.abc import Callable

from ..entities import EndpointPair
from ..values import DEFAULT_PAIR_BUFFER_SIZE

logger = logging.getLogger(__name__)


def flush_pending(pending: bytearray, write: Callable[[bytes], int]) -> int:
    """Offer ``pending`` to ``write`` once and drop what was accepted.

    Returns:
        Number of bytes accepted.
    """
    sent = write(bytes(pending))
    del pending[:sent]
    return sent


class PairRelay:
    """Moves bytes between a forwarded channel and its local socket.

    Each ``step`` performs at most one bounded read and one write in each
    direction and never blocks. A side that cannot take more data keeps
    its backlog in the pair, and nothing new is read for that direction
    until the backlog is gone. Payloads are passed through unmodified.
    """

    def __init__(self, buffer_size: int = DEFAULT_PAIR_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._buffer_size = buffer_size

    @property
    def buffer_size(self) -> int:
        return self._buffer_size

    def step(self, pair: EndpointPair) -> bool:
        """Run one transfer round.

        Returns:
            True when the connection has ended (local peer closed, I/O
            error, or channel end-of-stream with nothing left to deliver
            locally), False otherwise.
        """
        try:
            # channel -> socket
            if not pair.pending_to_socket and pair.channel.recv_ready():
                pair.pending_to_socket += pair.channel.read(self._buffer_size)
            if pair.pending_to_socket:
                pair.record_to_socket(flush_pending(pair.pending_to_socket, pair.socket.write))

            # socket -> channel
            if not pair.pending_to_channel and pair.socket.readable(0.0):
                data = pair.socket.read(self._buffer_size)
                if not data:
                    return True
                pair.pending_to_channel += data
            if pair.pending_to_channel:
                pair.record_to_channel(flush_pending(pair.pending_to_channel, pair.channel.write))
        except MemoryError:
            logger.warning("Out of memory relaying pair, skipping this round")
            return False
        except OSError as e:
            logger.debug("Relay I/O error: %s", e)
            return True

        return pair.channel.at_eof() and not pair.pending_to_socket
