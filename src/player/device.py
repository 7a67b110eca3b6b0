# src/player/device.py
from __future__ import annotations

import logging
from typing import Callable, Optional

from core.models import PlaybackState
from core.store import PlaybackStore

logger = logging.getLogger(__name__)

class PlaybackDevice:
    """
    Keeps a Player in step with a PlaybackStore.

    Outbound, it watches (file_path, is_playing, volume) on every committed
    snapshot and calls the player's load/play/pause/set_volume. Inbound, it
    forwards the player's position/duration/ended/error signals to the store's
    clock hooks, tagged with the id of the track they were attached for, so
    events from a previous track are dropped by the store.

    `player` is anything exposing the Player signals and methods; tests pass a
    fake built on QObject/Signal.
    """

    def __init__(
        self,
        store: PlaybackStore,
        player,
        on_failure: Optional[Callable[[str], None]] = None,
    ):
        self.store = store
        self.player = player
        self.on_failure = on_failure

        self._connections: list[tuple[object, Callable]] = []
        self._loaded_path: str | None = None
        self._bound_track_id: str | None = None

        self._sync(store.state, None)
        self._unsubscribe = store.subscribe(self._sync)

    @property
    def bound_track_id(self) -> str | None:
        return self._bound_track_id

    # ----------------------------
    # Store -> player
    # ----------------------------

    def _sync(self, new: PlaybackState, old: PlaybackState | None) -> None:
        if old is None or new.volume != old.volume:
            self.player.set_volume(new.volume)

        track = new.current_track
        if track is None:
            if self._loaded_path is not None:
                self._detach()
                self.player.stop()
                self._loaded_path = None
            return

        if track.file_path != self._loaded_path or track.id != self._bound_track_id:
            # Old handlers go before the new source is loaded.
            self._detach()
            self.player.load(track.file_path)
            self._loaded_path = track.file_path
            self._attach(track.id)
            if new.is_playing:
                self._start()
            return

        # Only commands move the token; clock writes to current_time never do.
        restarted = old is not None and new.restart_token != old.restart_token
        if restarted:
            # same file selected again (single-track wraparound, stop)
            self.player.seek_ms(0)

        if old is None or new.is_playing != old.is_playing or (restarted and new.is_playing):
            if new.is_playing:
                self._start()
            else:
                self.player.pause()

    def _start(self) -> None:
        try:
            self.player.play()
        except Exception as e:
            # The store keeps is_playing=True; the next clock event or user action corrects it.
            self._report(f"Playback failed to start: {e}")

    def _report(self, message: str) -> None:
        logger.error(message)
        if self.on_failure is not None:
            self.on_failure(message)

    # ----------------------------
    # Player -> store
    # ----------------------------

    def _attach(self, track_id: str) -> None:
        store = self.store

        def on_position(ms: int) -> None:
            store.on_time_update(ms / 1000.0, track_id)

        def on_duration(ms: int) -> None:
            store.on_metadata_loaded(ms / 1000.0, track_id)

        def on_ended() -> None:
            store.on_ended(track_id)

        def on_error(message: str) -> None:
            store.on_error(message, track_id)
            if store.state.current_track is not None and store.state.current_track.id == track_id:
                if self.on_failure is not None:
                    self.on_failure(message)

        for signal, slot in (
            (self.player.positionChanged, on_position),
            (self.player.durationChanged, on_duration),
            (self.player.ended, on_ended),
            (self.player.errorOccurred, on_error),
        ):
            signal.connect(slot)
            self._connections.append((signal, slot))

        self._bound_track_id = track_id

    def _detach(self) -> None:
        for signal, slot in self._connections:
            try:
                signal.disconnect(slot)
            except (RuntimeError, TypeError):
                logger.debug("Signal already disconnected: %r", signal)
        self._connections.clear()
        self._bound_track_id = None

    # ----------------------------
    # Commands that need the device too
    # ----------------------------

    def stop(self) -> None:
        # Stop moves the restart token, so _sync rewinds the player.
        self.store.stop()

    def seek(self, seconds: float) -> None:
        self.player.seek_ms(int(max(0.0, seconds) * 1000))

    def close(self) -> None:
        self._unsubscribe()
        self._detach()
