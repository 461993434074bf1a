"""Local terminal adapters."""

from .posix_terminal import PosixTerminal, make_raw, termios_supported

__all__ = [
    "PosixTerminal",
    "make_raw",
    "termios_supported",
]
