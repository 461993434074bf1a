"""Tests for SessionBridge."""

import pytest

from xrelay.application.services import SessionBridge
from xrelay.domain import PrimarySession, RelayLimits, TerminalDimensions

from ..conftest import FakeChannel


@pytest.fixture
def bridge(fake_terminal, relay_limits):
    return SessionBridge(fake_terminal, relay_limits)


class TestSessionBridgeOutput:
    """Tests for shell output."""

    def test_shell_output_written_immediately(self, bridge, primary_session, shell_channel, fake_terminal):
        shell_channel.feed(b"hello\n")

        bridge.step(primary_session)

        assert fake_terminal.output == [b"hello\n"]

    def test_shell_output_bounded(self, bridge, primary_session, shell_channel, fake_terminal):
        """Test one buffer of shell output per step."""
        shell_channel.feed(b"0123456789abcdef!")

        bridge.step(primary_session)

        assert fake_terminal.output == [b"01234567"]

    def test_no_output_when_idle(self, bridge, primary_session, fake_terminal):
        bridge.step(primary_session)

        assert fake_terminal.output == []


class TestSessionBridgeInput:
    """Tests for keyboard input."""

    def test_single_byte_per_step(self, bridge, primary_session, shell_channel, fake_terminal):
        """Test keystrokes are forwarded one byte at a time."""
        fake_terminal.type(b"ls\r")

        bridge.step(primary_session)
        bridge.step(primary_session)
        bridge.step(primary_session)

        assert shell_channel.written == [b"l", b"s", b"\r"]

    def test_writes_exactly_bytes_read(self, bridge, primary_session, shell_channel, fake_terminal):
        """Test no padding goes out with a keystroke."""
        fake_terminal.type(b"q")

        bridge.step(primary_session)

        assert b"".join(shell_channel.written) == b"q"

    def test_input_wait_from_limits(self, fake_terminal, primary_session):
        bridge = SessionBridge(fake_terminal, RelayLimits(input_wait=0.005))

        bridge.step(primary_session)

        assert fake_terminal.input_waits == [0.005]

    def test_write_to_closed_channel_not_raised(self, bridge, primary_session, shell_channel, fake_terminal):
        shell_channel.close()
        fake_terminal.type(b"x")

        bridge.step(primary_session)

    def test_keystroke_kept_while_window_full(self, bridge, primary_session, shell_channel, fake_terminal):
        """Test a keystroke the channel cannot take is retried, not dropped."""
        shell_channel.window = 0
        fake_terminal.type(b"ab")

        bridge.step(primary_session)
        bridge.step(primary_session)

        assert shell_channel.written == []
        assert primary_session.pending_input == b"a"

        shell_channel.window = None
        bridge.step(primary_session)
        bridge.step(primary_session)

        assert shell_channel.written == [b"a", b"b"]


class TestSessionBridgeGeometry:
    """Tests for resize propagation."""

    def test_debounced_resize(self, bridge, primary_session, shell_channel, fake_terminal):
        """Test one notification per actual change, not per step."""
        fake_terminal.set_geometry_sequence(
            TerminalDimensions(cols=80, rows=24),
            TerminalDimensions(cols=80, rows=24),
            TerminalDimensions(cols=100, rows=24),
        )

        for _ in range(5):
            bridge.step(primary_session)

        assert shell_channel.resizes == [TerminalDimensions(cols=100, rows=24)]
        assert primary_session.dimensions == TerminalDimensions(cols=100, rows=24)

    def test_sync_geometry_reports_change(self, bridge, primary_session, fake_terminal):
        fake_terminal.set_geometry_sequence(TerminalDimensions(cols=120, rows=40))

        assert bridge.sync_geometry(primary_session) is True
        assert bridge.sync_geometry(primary_session) is False

    @pytest.mark.parametrize("error", [OSError("Socket is closed"), EOFError()])
    def test_resize_error_does_not_escape(self, fake_terminal, relay_limits, error):
        """Test a resize on a dead transport ends the round quietly."""

        class DeadShell(FakeChannel):
            def resize(self, dimensions):
                raise error

        session = PrimarySession(channel=DeadShell(), dimensions=TerminalDimensions(cols=80, rows=24))
        fake_terminal.set_geometry_sequence(TerminalDimensions(cols=100, rows=30))

        assert SessionBridge(fake_terminal, relay_limits).step(session) is False
        assert session.dimensions == TerminalDimensions(cols=80, rows=24)


class TestSessionBridgeEndOfStream:
    """Tests for end-of-stream reporting."""

    def test_not_eof_while_open(self, bridge, primary_session):
        assert bridge.step(primary_session) is False

    def test_eof_after_output_drained(self, bridge, primary_session, shell_channel, fake_terminal):
        shell_channel.feed(b"logout\r\n")
        shell_channel.send_eof()

        assert bridge.step(primary_session) is True
        assert fake_terminal.output_bytes == b"logout\r\n"
