"""Shared test fixtures and configuration."""

import pytest

from xrelay.domain import (
    EndpointPair,
    LocalConnectError,
    PrimarySession,
    RelayLimits,
    SetupError,
    TerminalDimensions,
)

# ============= Domain Fixtures =============


@pytest.fixture
def default_dimensions():
    """Default terminal dimensions."""
    return TerminalDimensions.default()


@pytest.fixture
def relay_limits():
    """Small buffers so chunking is easy to observe."""
    return RelayLimits(pair_buffer_size=4, shell_buffer_size=8, input_wait=0.0)


# ============= Fake Adapters =============


class FakeChannel:
    """Fake secure channel for testing."""

    def __init__(self):
        self._incoming: list[bytes] = []
        self._eof = False
        self.written: list[bytes] = []
        self.resizes: list[TerminalDimensions] = []
        self.requests: list[tuple] = []
        # Bytes the remote window still accepts; None is unlimited
        self.window: int | None = None
        self.closed = False
        self.close_calls = 0

    def recv_ready(self) -> bool:
        return bool(self._incoming)

    def read(self, size: int) -> bytes:
        chunk = self._incoming.pop(0)
        if len(chunk) > size:
            self._incoming.insert(0, chunk[size:])
            chunk = chunk[:size]
        return chunk

    def write(self, data: bytes) -> int:
        if self.closed:
            raise OSError("Socket is closed")
        if self.window is not None:
            data = data[: self.window]
            self.window -= len(data)
        if data:
            self.written.append(data)
        return len(data)

    def at_eof(self) -> bool:
        return self._eof and not self._incoming

    def close(self) -> None:
        self.closed = True
        self.close_calls += 1

    def request_pty(self, term_type, dimensions) -> None:
        self.requests.append(("pty", term_type, dimensions))

    def request_forwarding(self, screen_number, single_connection) -> None:
        self.requests.append(("forwarding", screen_number, single_connection))

    def request_shell(self) -> None:
        self.requests.append(("shell",))

    def resize(self, dimensions) -> None:
        self.resizes.append(dimensions)

    # Test helpers
    def feed(self, data: bytes) -> None:
        """Queue data as if sent by the remote side."""
        self._incoming.append(data)

    def send_eof(self) -> None:
        """Simulate remote end-of-stream."""
        self._eof = True

    @property
    def pending(self) -> int:
        return sum(len(c) for c in self._incoming)


class FakeSocket:
    """Fake local socket for testing."""

    def __init__(self):
        self._incoming: list[bytes] = []
        self._peer_closed = False
        self.written: list[bytes] = []
        self.broken = False
        # Bytes the send buffer still accepts; None is unlimited
        self.capacity: int | None = None
        self.closed = False
        self.close_calls = 0
        self.read_calls = 0

    def readable(self, timeout: float = 0.0) -> bool:
        return bool(self._incoming) or self._peer_closed

    def read(self, size: int) -> bytes:
        self.read_calls += 1
        if self._incoming:
            chunk = self._incoming.pop(0)
            if len(chunk) > size:
                self._incoming.insert(0, chunk[size:])
                chunk = chunk[:size]
            return chunk
        return b""

    def write(self, data: bytes) -> int:
        if self.broken:
            raise BrokenPipeError("peer gone")
        if self.capacity is not None:
            data = data[: self.capacity]
            self.capacity -= len(data)
        if data:
            self.written.append(data)
        return len(data)

    def close(self) -> None:
        self.closed = True
        self.close_calls += 1

    # Test helpers
    def feed(self, data: bytes) -> None:
        """Queue data as if sent by the local display."""
        self._incoming.append(data)

    def peer_close(self) -> None:
        """Simulate the local display closing the connection."""
        self._peer_closed = True

    @property
    def pending(self) -> int:
        return sum(len(c) for c in self._incoming)


class FakeConnector:
    """Fake socket connector; fails for addresses in ``refuse``."""

    def __init__(self, refuse: set[str] | None = None):
        self.refuse = refuse or set()
        self.connected: list[str] = []
        self.sockets: list[FakeSocket] = []

    def connect(self, address: str) -> FakeSocket:
        if address in self.refuse:
            raise LocalConnectError(f"cannot connect to {address}: refused")
        self.connected.append(address)
        sock = FakeSocket()
        self.sockets.append(sock)
        return sock


class FakeTerminal:
    """Fake local terminal for testing."""

    def __init__(self, geometry: TerminalDimensions | None = None):
        self._geometry = [geometry or TerminalDimensions(cols=80, rows=24)]
        self._input: list[bytes] = []
        self.output: list[bytes] = []
        self.raw_calls = 0
        self.restore_calls: list = []
        self.fail_raw = False
        self.input_waits: list[float] = []

    def enter_raw_mode(self):
        self.raw_calls += 1
        if self.fail_raw:
            raise OSError(25, "Inappropriate ioctl for device")
        return "saved-mode"

    def restore_mode(self, previous_mode) -> None:
        self.restore_calls.append(previous_mode)

    def current_geometry(self) -> TerminalDimensions:
        # Last queued geometry sticks once the sequence runs out
        if len(self._geometry) > 1:
            return self._geometry.pop(0)
        return self._geometry[0]

    def input_ready(self, timeout: float = 0.0) -> bool:
        self.input_waits.append(timeout)
        return bool(self._input)

    def read_input(self, size: int) -> bytes:
        data = self._input.pop(0)
        if len(data) > size:
            self._input.insert(0, data[size:])
            data = data[:size]
        return data

    def write_output(self, data: bytes) -> None:
        self.output.append(data)

    # Test helpers
    def type(self, data: bytes) -> None:
        """Queue keystrokes."""
        self._input.append(data)

    def set_geometry_sequence(self, *dims: TerminalDimensions) -> None:
        self._geometry = list(dims)

    @property
    def output_bytes(self) -> bytes:
        return b"".join(self.output)


class FakeTransport:
    """Fake secure transport; ``fail_stage`` makes that step raise SetupError."""

    def __init__(self, channel: FakeChannel | None = None):
        self.channel = channel or FakeChannel()
        self.calls: list[str] = []
        self.fail_stage: str | None = None
        self.handler = None
        self.pending: list[FakeChannel] = []
        self.close_calls = 0
        self.auth: tuple | None = None

    def _step(self, stage: str) -> None:
        self.calls.append(stage)
        if self.fail_stage == stage:
            raise SetupError(stage, "simulated failure")

    def open(self, host, port, timeout) -> None:
        self._step("connect")

    def handshake(self) -> None:
        self._step("handshake")

    def verify_host_key(self, known_hosts) -> None:
        self._step("verify_host_key")

    def authenticate(self, username, password=None, key_filename=None) -> None:
        self.auth = (username, password, key_filename)
        self._step("authenticate")

    def open_channel(self) -> FakeChannel:
        self._step("open_channel")
        return self.channel

    def set_forwarding_handler(self, handler) -> None:
        self.handler = handler

    def dispatch_forwarded(self) -> int:
        count = 0
        while self.pending and self.handler is not None:
            self.handler(self.pending.pop(0))
            count += 1
        return count

    def close(self) -> None:
        self.close_calls += 1

    # Test helpers
    def open_forwarded(self, channel: FakeChannel) -> None:
        """Simulate the server opening a forwarded connection."""
        self.pending.append(channel)


@pytest.fixture
def fake_channel():
    return FakeChannel()


@pytest.fixture
def fake_socket():
    return FakeSocket()


@pytest.fixture
def fake_connector():
    return FakeConnector()


@pytest.fixture
def fake_terminal():
    return FakeTerminal()


@pytest.fixture
def fake_transport():
    return FakeTransport()


# ============= Entity Fixtures =============


@pytest.fixture
def sample_pair(fake_channel, fake_socket):
    """Pair of fake channel and fake socket."""
    return EndpointPair(channel=fake_channel, socket=fake_socket)


@pytest.fixture
def shell_channel():
    return FakeChannel()


@pytest.fixture
def primary_session(shell_channel):
    """Primary session at 80x24."""
    return PrimarySession(channel=shell_channel, dimensions=TerminalDimensions(cols=80, rows=24))


# ============= Registry Fixtures =============


@pytest.fixture
def registry():
    """Empty endpoint pair registry."""
    from xrelay.infrastructure.registry import EndpointPairRegistry

    return EndpointPairRegistry()


def make_pair() -> EndpointPair:
    """Create a pair with fresh fakes."""
    return EndpointPair(channel=FakeChannel(), socket=FakeSocket())
