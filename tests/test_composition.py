"""Tests for the composition root."""

from xrelay.composition import create_container, create_settings
from xrelay.config import Config

from .conftest import FakeChannel, FakeConnector, FakeTerminal, FakeTransport


def _config() -> Config:
    return Config.model_validate(
        {
            "ssh": {"host": "box", "username": "dave", "port": 2200},
            "forwarding": {"display": ":0", "buffer_size": 16, "socket_dir": "/x11"},
            "relay": {"shell_buffer_size": 32},
            "terminal": {"input_wait": 0},
        }
    )


class TestCreateSettings:
    """Tests for create_settings."""

    def test_maps_config(self):
        settings = create_settings(_config(), password="pw")

        assert settings.host == "box"
        assert settings.port == 2200
        assert settings.username == "dave"
        assert settings.password == "pw"
        assert settings.forwarding is True


class TestCreateContainer:
    """Tests for create_container."""

    def test_wires_fakes(self):
        transport, terminal, connector = FakeTransport(), FakeTerminal(), FakeConnector()

        container = create_container(_config(), "pw", transport, terminal, connector)

        assert container.transport is transport
        assert container.terminal is terminal
        assert container.pair_relay.buffer_size == 16
        assert len(container.registry) == 0

    def test_acceptor_uses_configured_display(self):
        connector = FakeConnector()
        container = create_container(_config(), None, FakeTransport(), FakeTerminal(), connector)

        container.connection_acceptor(FakeChannel())

        assert connector.connected == ["/x11/X0"]
        assert len(container.registry) == 1

    def test_full_run_with_fakes(self):
        transport, terminal = FakeTransport(), FakeTerminal()
        transport.channel.feed(b"$ ")
        transport.channel.send_eof()
        container = create_container(_config(), "pw", transport, terminal, FakeConnector())

        container.client_service.run()

        assert terminal.output_bytes == b"$ "
        assert transport.auth == ("dave", "pw", None)
