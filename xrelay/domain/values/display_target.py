"""Forwarding target value object.

A forwarding target is what the remote side asks us to connect to when it
opens an X11 channel. Only same-host displays are supported: the
descriptor ``:N``, ``:N.S``, ``unix:N`` or ``unix:N.S`` names the Unix
socket ``<socket_dir>/X<N>``. Anything else (``host:N``, empty strings,
garbage) is unsupported and the request is dropped.
"""

import re
from dataclasses import dataclass
from pathlib import PurePosixPath

DEFAULT_SOCKET_DIR = "/tmp/.X11-unix"

_LOCAL_DISPLAY = re.compile(r"^(?:unix)?:(?P<number>\d+)(?:\.\d+)?$")


@dataclass(frozen=True, slots=True)
class DisplayTarget:
    """Local display reachable over a Unix domain socket (value object)."""

    display_number: int
    socket_dir: str = DEFAULT_SOCKET_DIR

    def __post_init__(self) -> None:
        if self.display_number < 0:
            raise ValueError("display_number must be non-negative")

    @classmethod
    def parse(cls, descriptor: str | None, socket_dir: str = DEFAULT_SOCKET_DIR) -> "DisplayTarget | None":
        """Parse a display descriptor.

        Returns:
            The target, or None when the descriptor is not a local display.
        """
        if not descriptor:
            return None
        match = _LOCAL_DISPLAY.match(descriptor.strip())
        if match is None:
            return None
        return cls(display_number=int(match.group("number")), socket_dir=socket_dir)

    @property
    def socket_path(self) -> str:
        """Path of the display's Unix socket."""
        return str(PurePosixPath(self.socket_dir) / f"X{self.display_number}")

    def __str__(self) -> str:
        return f":{self.display_number}"
