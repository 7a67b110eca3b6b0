# src/player/player.py
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal, QUrl
from PySide6.QtMultimedia import QMediaPlayer, QAudioOutput

logger = logging.getLogger(__name__)

class Player(QObject):
    """
    Thin QMediaPlayer wrapper. It owns no playlist logic: PlaybackDevice tells it
    what to load and play, and listens to the signals below.
    """
    positionChanged = Signal(int)       # ms
    durationChanged = Signal(int)       # ms
    ended = Signal()
    errorOccurred = Signal(str)

    def __init__(self, volume: float = 0.8):
        super().__init__()

        self.source: str | None = None

        self.audio = QAudioOutput()
        self.media = QMediaPlayer()
        self.media.setAudioOutput(self.audio)
        self.set_volume(volume)

        # Qt signal forwarding
        self.media.positionChanged.connect(self.positionChanged.emit)
        self.media.durationChanged.connect(self.durationChanged.emit)
        self.media.mediaStatusChanged.connect(self._on_qt_media_status)
        self.media.errorOccurred.connect(self._on_qt_error)

    def _on_qt_media_status(self, status: QMediaPlayer.MediaStatus) -> None:
        if status == QMediaPlayer.EndOfMedia:
            self.ended.emit()

    def _on_qt_error(self, error: QMediaPlayer.Error, message: str = "") -> None:
        if error == QMediaPlayer.NoError:
            return
        text = message or self.media.errorString() or str(error)
        logger.debug("QMediaPlayer error for %s: %s", self.source, text)
        self.errorOccurred.emit(text)

    def load(self, path: str) -> None:
        self.source = path
        url = QUrl(path) if "://" in path else QUrl.fromLocalFile(path)
        self.media.setSource(url)

    def play(self) -> None:
        self.media.play()

    def pause(self) -> None:
        self.media.pause()

    def stop(self) -> None:
        self.media.stop()

    def seek_ms(self, ms: int) -> None:
        self.media.setPosition(max(0, int(ms)))

    def set_volume(self, volume_0_to_1: float) -> None:
        self.audio.setVolume(min(1.0, max(0.0, float(volume_0_to_1))))
