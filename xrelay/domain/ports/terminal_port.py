"""Terminal port - interface for the local controlling terminal."""

from typing import Any, Protocol

from ..values import TerminalDimensions


class TerminalPort(Protocol):
    """Protocol for local terminal access.

    Infrastructure layer implements this with termios and the stdio
    file descriptors.
    """

    def enter_raw_mode(self) -> Any:
        """Switch to raw mode.

        Returns:
            Opaque previous mode, to be handed to ``restore_mode``.

        Raises:
            OSError: If the terminal attributes cannot be changed.
        """
        ...

    def restore_mode(self, previous_mode: Any) -> None:
        """Restore a mode returned by ``enter_raw_mode``. None is a no-op."""
        ...

    def current_geometry(self) -> TerminalDimensions:
        """Get the current terminal size."""
        ...

    def input_ready(self, timeout: float = 0.0) -> bool:
        """Check whether local input is available."""
        ...

    def read_input(self, size: int) -> bytes:
        """Read up to ``size`` bytes of local input."""
        ...

    def write_output(self, data: bytes) -> None:
        """Write to the local output stream and flush."""
        ...
