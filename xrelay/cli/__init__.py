"""Command line interface."""

from .args import build_overrides, parse_args
from .display import print_error, print_session_end, print_session_start

__all__ = [
    "parse_args",
    "build_overrides",
    "print_error",
    "print_session_start",
    "print_session_end",
]
