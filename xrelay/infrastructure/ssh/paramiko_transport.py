"""Paramiko transport adapter.

Wraps a client-mode paramiko.Transport behind TransportPort. X11 channels
opened by the server are queued by paramiko's transport thread and handed
to the registered handler from ``dispatch_forwarded``, so the handler runs
on the event loop's thread.
"""

import logging
import socket
from contextlib import suppress
from pathlib import Path

import paramiko
from paramiko.pkey import UnknownKeyType

from xrelay.domain import ForwardingHandler, SetupError

from .paramiko_channel import ParamikoChannel

logger = logging.getLogger(__name__)

DEFAULT_SSH_PORT = 22


class ParamikoTransport:
    """Secure transport session implementing TransportPort."""

    def __init__(self, timeout: float = 30.0) -> None:
        self._timeout = timeout
        self._host: str | None = None
        self._port = DEFAULT_SSH_PORT
        self._sock: socket.socket | None = None
        self._transport: paramiko.Transport | None = None
        self._handler: ForwardingHandler | None = None

    @property
    def is_active(self) -> bool:
        return self._transport is not None and self._transport.is_active()

    def open(self, host: str, port: int, timeout: float) -> None:
        self._host = host
        self._port = port
        self._timeout = timeout
        try:
            self._sock = socket.create_connection((host, port), timeout=timeout)
        except OSError as e:
            raise SetupError("connect", f"failed to connect to {host}:{port}: {e}") from e
        logger.info("Connected host=%s port=%d", host, port)

    def handshake(self) -> None:
        if self._sock is None:
            raise SetupError("handshake", "not connected")
        try:
            self._transport = paramiko.Transport(self._sock)
            self._transport.start_client(timeout=self._timeout)
        except (paramiko.SSHException, OSError) as e:
            raise SetupError("handshake", f"failed to start the SSH session: {e}") from e
        logger.debug("Handshake complete cipher=%s", self._transport.remote_cipher)

    def verify_host_key(self, known_hosts: str | None) -> None:
        transport = self._require_transport("handshake")
        key = transport.get_remote_server_key()
        lookup_name = self._host if self._port == DEFAULT_SSH_PORT else f"[{self._host}]:{self._port}"

        host_keys = paramiko.HostKeys()
        if known_hosts and Path(known_hosts).expanduser().exists():
            try:
                host_keys.load(str(Path(known_hosts).expanduser()))
            except OSError as e:
                logger.warning("Cannot read known_hosts path=%s: %s", known_hosts, e)

        entry = host_keys.lookup(lookup_name)
        if entry is None or key.get_name() not in entry:
            logger.warning(
                "Host key not verified host=%s type=%s fingerprint=%s",
                lookup_name,
                key.get_name(),
                key.get_fingerprint().hex(),
            )
            return
        if entry[key.get_name()] != key:
            raise SetupError("handshake", f"host key for {lookup_name} does not match known_hosts")

    def authenticate(
        self,
        username: str,
        password: str | None = None,
        key_filename: str | None = None,
    ) -> None:
        transport = self._require_transport("authenticate")
        try:
            if key_filename:
                passphrase = password.encode("utf-8") if password else None
                # Positional: the keyword was renamed in paramiko 4
                pkey = paramiko.PKey.from_path(Path(key_filename).expanduser(), passphrase)
                transport.auth_publickey(username, pkey)
            else:
                transport.auth_password(username, password or "")
        except (paramiko.SSHException, UnknownKeyType, ValueError, OSError) as e:
            raise SetupError("authenticate", f"failed to authenticate as {username}: {e}") from e

        if not transport.is_authenticated():
            raise SetupError("authenticate", f"failed to authenticate as {username}")
        logger.info("Authenticated user=%s", username)

    def open_channel(self) -> ParamikoChannel:
        transport = self._require_transport("open_channel")
        try:
            channel = transport.open_session(timeout=self._timeout)
        except (paramiko.SSHException, OSError) as e:
            raise SetupError("open_channel", f"failed to open a new channel: {e}") from e
        return ParamikoChannel(channel)

    def set_forwarding_handler(self, handler: ForwardingHandler) -> None:
        self._handler = handler

    def dispatch_forwarded(self) -> int:
        if self._transport is None:
            return 0

        count = 0
        while True:
            channel = self._transport.accept(timeout=0)
            if channel is None:
                return count
            if self._handler is None:
                logger.debug("No forwarding handler, rejecting channel id=%d", channel.get_id())
                channel.close()
                continue
            self._handler(ParamikoChannel(channel))
            count += 1

    def close(self) -> None:
        if self._transport is not None:
            self._transport.close()
            self._transport = None
        if self._sock is not None:
            with suppress(OSError):
                self._sock.shutdown(socket.SHUT_RDWR)
            self._sock.close()
            self._sock = None
        logger.info("Session closed")

    def _require_transport(self, stage: str) -> paramiko.Transport:
        if self._transport is None:
            raise SetupError(stage, "handshake has not completed")
        return self._transport
