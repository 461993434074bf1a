"""Domain value objects - immutable data structures."""

from .display_target import DEFAULT_SOCKET_DIR, DisplayTarget
from .relay_limits import (
    DEFAULT_PAIR_BUFFER_SIZE,
    DEFAULT_SHELL_BUFFER_SIZE,
    INPUT_CHUNK_SIZE,
    RelayLimits,
)
from .terminal_dimensions import MAX_COLS, MAX_ROWS, MIN_COLS, MIN_ROWS, TerminalDimensions

__all__ = [
    "TerminalDimensions",
    "MIN_COLS",
    "MAX_COLS",
    "MIN_ROWS",
    "MAX_ROWS",
    "DisplayTarget",
    "DEFAULT_SOCKET_DIR",
    "RelayLimits",
    "DEFAULT_PAIR_BUFFER_SIZE",
    "DEFAULT_SHELL_BUFFER_SIZE",
    "INPUT_CHUNK_SIZE",
]
