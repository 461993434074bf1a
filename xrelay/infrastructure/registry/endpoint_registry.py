"""Registry of live forwarded connections."""

import itertools
import logging
from collections.abc import Callable, Iterator

from xrelay.domain import DuplicateEndpoint, EndpointPair

logger = logging.getLogger(__name__)

PairStep = Callable[[EndpointPair], bool]


class EndpointPairRegistry:
    """Insertion-ordered set of live endpoint pairs.

    Pairs are keyed by a synthetic id so the registry can be mutated
    while a pass over it is in progress. A channel or socket may belong
    to at most one live pair.

    Only the event loop's thread touches the registry, so there is no lock.
    """

    def __init__(self) -> None:
        self._pairs: dict[int, EndpointPair] = {}
        self._by_channel: dict[int, int] = {}
        self._by_socket: dict[int, int] = {}
        self._ids = itertools.count(1)

    def insert(self, pair: EndpointPair) -> int:
        """Register a live pair.

        Returns:
            The pair's registry id.

        Raises:
            DuplicateEndpoint: If the pair's channel or socket is already
                registered.
        """
        if id(pair.channel) in self._by_channel:
            raise DuplicateEndpoint("channel already belongs to a live pair")
        if id(pair.socket) in self._by_socket:
            raise DuplicateEndpoint("socket already belongs to a live pair")

        pair_id = next(self._ids)
        self._pairs[pair_id] = pair
        self._by_channel[id(pair.channel)] = pair_id
        self._by_socket[id(pair.socket)] = pair_id

        logger.info("Forwarded connection opened pair_id=%d live=%d", pair_id, len(self._pairs))
        return pair_id

    def for_each_removing(self, visit: PairStep) -> int:
        """Visit every live pair once, removing those that report termination.

        Pairs inserted during the pass are first visited on the next pass.

        Returns:
            Number of pairs removed.
        """
        removed = 0
        for pair_id in list(self._pairs):
            pair = self._pairs.get(pair_id)
            if pair is None:
                continue
            if visit(pair):
                self.remove(pair_id)
                removed += 1
        return removed

    def remove(self, pair_id: int) -> EndpointPair | None:
        """Remove a pair and release its endpoints.

        Returns:
            The removed pair, or None if the id is unknown.
        """
        pair = self._pairs.pop(pair_id, None)
        if pair is None:
            return None

        self._by_channel.pop(id(pair.channel), None)
        self._by_socket.pop(id(pair.socket), None)
        try:
            pair.release()
        except OSError as e:
            logger.debug("Error releasing pair_id=%d: %s", pair_id, e)

        logger.info(
            "Forwarded connection closed pair_id=%d to_socket=%d to_channel=%d",
            pair_id,
            pair.bytes_to_socket,
            pair.bytes_to_channel,
        )
        return pair

    def close_all(self) -> int:
        """Remove and release every live pair.

        Returns:
            Number of pairs closed.
        """
        count = 0
        for pair_id in list(self._pairs):
            if self.remove(pair_id) is not None:
                count += 1
        return count

    def get(self, pair_id: int) -> EndpointPair | None:
        return self._pairs.get(pair_id)

    def __contains__(self, pair: object) -> bool:
        return any(p is pair for p in self._pairs.values())

    def __iter__(self) -> Iterator[EndpointPair]:
        return iter(list(self._pairs.values()))

    def __len__(self) -> int:
        return len(self._pairs)
