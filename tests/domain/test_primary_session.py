"""Tests for PrimarySession entity."""

from xrelay.domain import TerminalDimensions


class TestPrimarySessionGeometry:
    """Tests for geometry tracking."""

    def test_same_geometry_not_changed(self, primary_session):
        assert not primary_session.geometry_changed(TerminalDimensions(cols=80, rows=24))

    def test_different_geometry_changed(self, primary_session):
        assert primary_session.geometry_changed(TerminalDimensions(cols=100, rows=24))

    def test_update_dimensions(self, primary_session):
        new_dims = TerminalDimensions(cols=132, rows=43)

        primary_session.update_dimensions(new_dims)

        assert primary_session.dimensions == new_dims


class TestPrimarySessionMode:
    """Tests for raw mode bookkeeping."""

    def test_mark_raw(self, primary_session):
        primary_session.mark_raw("saved")

        assert primary_session.raw_mode
        assert primary_session.previous_mode == "saved"

    def test_restore_claimed_once(self, primary_session):
        """Test only the first claim is allowed to restore."""
        primary_session.mark_raw("saved")

        assert primary_session.take_mode_for_restore() == (True, "saved")
        assert primary_session.take_mode_for_restore() == (False, None)
        assert not primary_session.raw_mode

    def test_restore_claimed_without_raw_mode(self, primary_session):
        """Test the restore is still attempted when raw mode was never entered."""
        assert primary_session.take_mode_for_restore() == (True, None)


class TestPrimarySessionChannel:
    """Tests for releasing the shell channel."""

    def test_release_channel_once(self, primary_session, shell_channel):
        primary_session.release_channel()
        primary_session.release_channel()

        assert shell_channel.close_calls == 1
        assert primary_session.channel_released
