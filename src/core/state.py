from __future__ import annotations
from dataclasses import dataclass
from PySide6.QtCore import QObject, Signal, Slot

from .models import PlaybackState
from .store import PlaybackStore

@dataclass(frozen=True)
class Notify:
    message: str
    notify_type: str = "info"   # info/success/warn/error

class AppState(QObject):
    notification = Signal(object)     # emits Notify
    state_changed = Signal(object)    # emits PlaybackState
    track_changed = Signal(object)    # emits Track | None
    album_changed = Signal(object)    # emits AlbumSummary

    def __init__(self, store: PlaybackStore, config=None):
        super().__init__()
        self.store = store
        self.config = config
        self.player = None
        self.device = None
        self.queued_notifications: list[Notify] = []

        self._album = store.album_summary()
        self._unsubscribe = store.subscribe(self._on_store_changed)

    @property
    def album(self):
        return self._album

    def _on_store_changed(self, new: PlaybackState, old: PlaybackState) -> None:
        self.state_changed.emit(new)

        if new.current_track != old.current_track:
            self.track_changed.emit(new.current_track)

        # only re-derive when an input of the summary moved
        if new.current_track != old.current_track or new.playlist != old.playlist:
            album = self.store.album_summary()
            if album != self._album:
                self._album = album
                self.album_changed.emit(album)

    @Slot(str, str)
    def notify(self, message: str, notify_type: str = "info"):
        self.notification.emit(Notify(message=message, notify_type=notify_type))

    def close(self) -> None:
        self._unsubscribe()
