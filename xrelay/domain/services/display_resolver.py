"""Forwarding target resolution."""

import logging

from ..values import DEFAULT_SOCKET_DIR, DisplayTarget

logger = logging.getLogger(__name__)


def resolve_display(descriptor: str | None, socket_dir: str = DEFAULT_SOCKET_DIR) -> str | None:
    """Translate a display descriptor into a local socket address.

    Args:
        descriptor: Display identifier such as ``:0`` or ``unix:1.0``.
        socket_dir: Directory holding the display sockets.

    Returns:
        Socket path, or None when the descriptor is not a local display.
    """
    target = DisplayTarget.parse(descriptor, socket_dir)
    if target is None:
        logger.debug("Unsupported display descriptor display=%r", descriptor)
        return None
    return target.socket_path
