"""xrelay - SSH terminal client with X11 connection forwarding."""

from ._version import __version__

__all__ = ["__version__"]
