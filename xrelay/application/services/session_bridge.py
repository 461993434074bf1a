"""Primary session bridge - local terminal <-> shell channel."""

import logging

from xrelay.domain import INPUT_CHUNK_SIZE, PrimarySession, RelayLimits, TerminalPort, flush_pending

logger = logging.getLogger(__name__)


class SessionBridge:
    """One non-blocking transfer round for the interactive shell.

    Keystrokes are forwarded one byte per round so each is echoed and
    processed immediately by the remote side. While the channel window is
    full the pending keystroke is retried and no new input is read.
    """

    def __init__(self, terminal: TerminalPort, limits: RelayLimits | None = None) -> None:
        self._terminal = terminal
        self._limits = limits or RelayLimits()

    def step(self, session: PrimarySession) -> bool:
        """Run one round.

        Returns:
            True when the shell channel reached end-of-stream.
        """
        try:
            self.sync_geometry(session)

            if session.channel.recv_ready():
                data = session.channel.read(self._limits.shell_buffer_size)
                if data:
                    self._terminal.write_output(data)

            if not session.pending_input and self._terminal.input_ready(self._limits.input_wait):
                session.pending_input += self._terminal.read_input(INPUT_CHUNK_SIZE)
            if session.pending_input:
                flush_pending(session.pending_input, session.channel.write)
        except MemoryError:
            logger.warning("Out of memory relaying shell, skipping this round")
        except (OSError, EOFError) as e:
            logger.debug("Shell relay I/O error: %s", e)

        return session.channel.at_eof()

    def sync_geometry(self, session: PrimarySession) -> bool:
        """Send a resize notification if the terminal size changed.

        Returns:
            True if a notification was sent.
        """
        current = self._terminal.current_geometry()
        if not session.geometry_changed(current):
            return False

        session.channel.resize(current)
        session.update_dimensions(current)
        logger.info("Terminal resized cols=%d rows=%d", current.cols, current.rows)
        return True
