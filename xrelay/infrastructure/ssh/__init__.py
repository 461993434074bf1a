"""SSH transport adapters (paramiko)."""

from .paramiko_channel import ParamikoChannel
from .paramiko_transport import DEFAULT_SSH_PORT, ParamikoTransport

__all__ = [
    "ParamikoChannel",
    "ParamikoTransport",
    "DEFAULT_SSH_PORT",
]
