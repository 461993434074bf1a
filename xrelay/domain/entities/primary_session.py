"""Primary session entity - the interactive shell."""

from dataclasses import dataclass, field
from typing import Any

from ..ports import ShellChannelPort
from ..values import TerminalDimensions


@dataclass
class PrimarySession:
    """Interactive shell state.

    Tracks the shell channel, the last geometry sent to the remote
    pseudo-terminal and the local terminal mode. The saved mode must be
    restored exactly once before exit.
    """

    channel: ShellChannelPort
    dimensions: TerminalDimensions
    raw_mode: bool = False
    previous_mode: Any = None
    mode_restored: bool = False
    channel_released: bool = False
    # Keystrokes the shell channel has not accepted yet
    pending_input: bytearray = field(default_factory=bytearray, repr=False)

    def geometry_changed(self, current: TerminalDimensions) -> bool:
        """Check whether ``current`` differs from the last known geometry."""
        return current != self.dimensions

    def update_dimensions(self, dimensions: TerminalDimensions) -> None:
        self.dimensions = dimensions

    def mark_raw(self, previous_mode: Any) -> None:
        """Record a successful switch to raw mode."""
        self.previous_mode = previous_mode
        self.raw_mode = True

    def take_mode_for_restore(self) -> tuple[bool, Any]:
        """Claim the one restore attempt.

        Returns:
            (should_restore, previous_mode). ``should_restore`` is True
            only on the first call.
        """
        if self.mode_restored:
            return False, None
        self.mode_restored = True
        self.raw_mode = False
        return True, self.previous_mode

    def release_channel(self) -> None:
        """Close the shell channel once."""
        if self.channel_released:
            return
        self.channel_released = True
        self.channel.close()
