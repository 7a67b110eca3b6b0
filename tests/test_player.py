import pytest

pytest.importorskip("PySide6.QtMultimedia")

from player.player import Player


class TestPlayerInterface:
    # what PlaybackDevice drives; FakePlayer in test_device mirrors it
    @pytest.mark.parametrize("name", ["load", "play", "pause", "stop", "seek_ms", "set_volume"])
    def test_methods(self, name):
        assert callable(getattr(Player, name))

    @pytest.mark.parametrize("name", ["positionChanged", "durationChanged", "ended", "errorOccurred"])
    def test_signals(self, name):
        assert hasattr(Player, name)

    def test_no_leftover_status_tracking(self):
        for name in ("statusChanged", "position_ms", "duration_ms"):
            assert not hasattr(Player, name)
