# core/store.py
from __future__ import annotations

import logging
from collections import deque
from typing import Any, Callable, Iterable, Optional

from .album import derive_album_summary
from .commands import (
    Command,
    NextTrack,
    Pause,
    Play,
    PreviousTrack,
    SetCurrentTime,
    SetCurrentTrack,
    SetDuration,
    SetPlaylist,
    SetProgress,
    SetVolume,
    Stop,
    ToggleFavorite,
    TogglePlay,
)
from .models import AlbumSummary, PlaybackState, Track
from .reducer import reduce

logger = logging.getLogger(__name__)

Listener = Callable[[PlaybackState, PlaybackState], None]   # (new, old)


class PlaybackStore:
    """
    Single source of truth for playback state.

    Every command goes through `reduce`; when it yields a new snapshot the store
    commits it and calls subscribers synchronously with (new_state, old_state).
    Built once at startup and handed to whoever needs it.
    """

    def __init__(self, initial: PlaybackState | None = None):
        self._state = initial or PlaybackState()
        self._listeners: list[Listener] = []
        self._pending: deque[tuple[PlaybackState, PlaybackState]] = deque()
        self._notifying = False

    @property
    def state(self) -> PlaybackState:
        return self._state

    # ----------------------------
    # Subscription
    # ----------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return unsubscribe

    def dispatch(self, command: Command) -> PlaybackState:
        old = self._state
        new = reduce(old, command)
        if new is old:
            return old

        self._state = new
        logger.debug("%s -> index=%s playing=%s", type(command).__name__, new.current_index, new.is_playing)

        self._pending.append((new, old))
        if not self._notifying:
            self._flush()
        return new

    def _flush(self) -> None:
        # A listener that dispatches gets its transition queued behind the
        # current one, so every listener sees transitions in commit order.
        self._notifying = True
        try:
            while self._pending:
                new, old = self._pending.popleft()
                # copy: listeners may unsubscribe while being notified
                for listener in list(self._listeners):
                    try:
                        listener(new, old)
                    except Exception:
                        logger.exception("State listener failed: %r", listener)
        finally:
            self._notifying = False

    # ----------------------------
    # Commands
    # ----------------------------

    def set_playlist(self, tracks: Iterable[Track]) -> None:
        self.dispatch(SetPlaylist(tuple(tracks)))

    def set_current_track(self, track: Track, index: int) -> None:
        self.dispatch(SetCurrentTrack(track, index))

    def play(self) -> None:
        self.dispatch(Play())

    def pause(self) -> None:
        self.dispatch(Pause())

    def toggle_play(self) -> None:
        self.dispatch(TogglePlay())

    def stop(self) -> None:
        self.dispatch(Stop())

    def next_track(self) -> None:
        self.dispatch(NextTrack())

    def previous_track(self) -> None:
        self.dispatch(PreviousTrack())

    def toggle_favorite(self) -> None:
        self.dispatch(ToggleFavorite())

    def set_volume(self, volume: float) -> None:
        self.dispatch(SetVolume(volume))

    def set_progress(self, progress: float) -> None:
        self.dispatch(SetProgress(progress))

    def set_current_time(self, current_time: float) -> None:
        self.dispatch(SetCurrentTime(current_time))

    def set_duration(self, duration: float) -> None:
        self.dispatch(SetDuration(duration))

    def album_summary(self) -> AlbumSummary:
        return derive_album_summary(self._state.current_track, self._state.playlist)

    # ----------------------------
    # Clock / device events
    # ----------------------------

    def _is_stale(self, track_id: Optional[str], event: str) -> bool:
        if track_id is None:
            return False
        current = self._state.current_track
        if current is not None and current.id == track_id:
            return False
        logger.debug("Dropping stale %s event for track %s", event, track_id)
        return True

    def on_metadata_loaded(self, duration: float, track_id: Optional[str] = None) -> None:
        if self._is_stale(track_id, "metadata"):
            return
        self.set_duration(duration)

    def on_time_update(self, current_time: float, track_id: Optional[str] = None) -> None:
        if self._is_stale(track_id, "time-update"):
            return
        # progress is display-only and stays whatever the UI last set
        self.set_current_time(current_time)

    def on_ended(self, track_id: Optional[str] = None) -> None:
        if self._is_stale(track_id, "ended"):
            return
        self.next_track()

    def on_error(self, error_info: Any, track_id: Optional[str] = None) -> None:
        if self._is_stale(track_id, "error"):
            return
        # Non-fatal: playback state is left as is.
        logger.error("Playback device error: %s", error_info)
