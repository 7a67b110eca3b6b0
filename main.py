import logging
import sys
from pathlib import Path

from PySide6.QtCore import QCoreApplication

ROOT = Path(__file__).resolve().parent
SRC_DIR = ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from core.config import AppConfig
from core.logging_setup import setup_logging
from core.models import CatalogError, PlaybackState
from core.state import AppState, Notify
from core.store import PlaybackStore
from core.time_format import format_clock
from library.catalog import load_catalog, scan_folder
from player.device import PlaybackDevice
from player.player import Player

logger = logging.getLogger("playstate")

def load_tracks(config: AppConfig) -> list:
    try:
        if config.catalog_path:
            return load_catalog(config.catalog_path)
        if config.music_dir:
            return scan_folder(config.music_dir)
    except (CatalogError, OSError) as e:
        logger.error("Could not load tracks: %s", e)
    return []

def init_app_state(config: AppConfig) -> AppState:
    store = PlaybackStore(PlaybackState(volume=config.volume))
    app_state = AppState(store, config)

    store.set_playlist(load_tracks(config))

    try:
        app_state.player = Player(volume=config.volume)
    except Exception as e:
        app_state.player = None
        app_state.queued_notifications.append(
            Notify(message=f"Failed to initialize audio player: {e}", notify_type="error")
        )
    else:
        app_state.device = PlaybackDevice(
            store,
            app_state.player,
            on_failure=lambda message: app_state.notify(message, "error"),
        )

    return app_state

def log_now_playing(app_state: AppState) -> None:
    app_state.track_changed.connect(
        lambda track: logger.info("Now playing: %s - %s (%s)", track.artist, track.title, track.duration)
        if track is not None else logger.info("Nothing playing")
    )
    app_state.album_changed.connect(
        lambda album: logger.info("Album: %s / %s, %s, %s", album.name, album.artist, album.song_count, album.duration)
    )
    app_state.notification.connect(lambda n: logger.log(
        logging.ERROR if n.notify_type == "error" else logging.INFO, n.message
    ))
    app_state.state_changed.connect(
        lambda s: logger.debug("%s / %s", format_clock(s.current_time), format_clock(s.duration))
    )

def main() -> int:
    config = AppConfig.from_env()
    setup_logging(config.log_level, config.env)

    qt_app = QCoreApplication(sys.argv)

    app_state = init_app_state(config)
    log_now_playing(app_state)
    for n in app_state.queued_notifications:
        app_state.notification.emit(n)

    store = app_state.store
    if not store.state.playlist:
        logger.warning("Playlist is empty; set PLAYSTATE_CATALOG or PLAYSTATE_MUSIC_DIR")
    elif config.autoplay:
        store.set_current_track(store.state.playlist[0], 0)

    try:
        return qt_app.exec()
    finally:
        if app_state.device is not None:
            app_state.device.close()
        app_state.close()

if __name__ == "__main__":
    raise SystemExit(main())
