"""POSIX terminal adapter (termios)."""

import logging
import os
import select
import sys
from typing import Any

from xrelay.domain import TerminalDimensions, UnsupportedPlatform

try:
    import termios
except ImportError:  # Windows
    termios = None

logger = logging.getLogger(__name__)


def termios_supported() -> bool:
    """Check whether termios is available on this platform."""
    return termios is not None


def make_raw(attrs: list[Any]) -> list[Any]:
    """Return a copy of tcgetattr() attributes switched to raw mode.

    Mirrors cfmakeraw(): no input translation, no output processing,
    no echo, no canonical mode, no signals, 8-bit characters.
    """
    iflag, oflag, cflag, lflag, ispeed, ospeed, cc = attrs
    iflag &= ~(
        termios.IGNBRK
        | termios.BRKINT
        | termios.PARMRK
        | termios.ISTRIP
        | termios.INLCR
        | termios.IGNCR
        | termios.ICRNL
        | termios.IXON
    )
    oflag &= ~termios.OPOST
    lflag &= ~(termios.ECHO | termios.ECHONL | termios.ICANON | termios.ISIG | termios.IEXTEN)
    cflag &= ~(termios.CSIZE | termios.PARENB)
    cflag |= termios.CS8
    return [iflag, oflag, cflag, lflag, ispeed, ospeed, list(cc)]


class PosixTerminal:
    """Local terminal implementing TerminalPort over stdin/stdout."""

    def __init__(self, input_fd: int | None = None, output_fd: int | None = None) -> None:
        if not termios_supported():
            raise UnsupportedPlatform("termios is not available")
        self._input_fd = sys.stdin.fileno() if input_fd is None else input_fd
        self._output_fd = sys.stdout.fileno() if output_fd is None else output_fd

    def enter_raw_mode(self) -> list[Any]:
        try:
            saved = termios.tcgetattr(self._input_fd)
            termios.tcsetattr(self._input_fd, termios.TCSADRAIN, make_raw(saved))
        except termios.error as e:
            raise OSError(*e.args) from e
        logger.debug("Terminal switched to raw mode fd=%d", self._input_fd)
        return saved

    def restore_mode(self, previous_mode: list[Any] | None) -> None:
        if previous_mode is None:
            return
        try:
            termios.tcsetattr(self._input_fd, termios.TCSADRAIN, previous_mode)
        except termios.error as e:
            logger.warning("Failed to restore terminal mode: %s", e)
            return
        logger.debug("Terminal mode restored fd=%d", self._input_fd)

    def current_geometry(self) -> TerminalDimensions:
        try:
            size = os.get_terminal_size(self._input_fd)
        except OSError:
            return TerminalDimensions.default()
        if size.columns <= 0 or size.lines <= 0:
            return TerminalDimensions.default()
        return TerminalDimensions.clamped(size.columns, size.lines)

    def input_ready(self, timeout: float = 0.0) -> bool:
        ready, _, _ = select.select([self._input_fd], [], [], timeout)
        return bool(ready)

    def read_input(self, size: int) -> bytes:
        return os.read(self._input_fd, size)

    def write_output(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = os.write(self._output_fd, view)
            view = view[written:]
