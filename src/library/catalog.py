import glob
import hashlib
import json
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from mutagen import File as MutagenFile

from core.models import CatalogError, Track
from core.time_format import format_clock

logger = logging.getLogger(__name__)

AUDIO_EXTENSIONS = ('.mp3', '.m4a', '.flac', '.ogg', '.opus', '.wav')


# ---- JSON catalog ----
def load_catalog(path: str) -> List[Track]:
    """
    Reads a JSON array of track records (same keys as Track, camelCase
    `filePath`/`artistImage` accepted). Order in the file is playback order.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise CatalogError(f"Invalid catalog file {path}: {e}") from e

    if not isinstance(data, list):
        raise CatalogError(f"Catalog root must be a list, got {type(data).__name__}")

    tracks = []
    for position, record in enumerate(data):
        if not isinstance(record, dict):
            raise CatalogError(f"Catalog entry #{position} is not an object")
        tracks.append(Track.from_dict(record))

    logger.info("Loaded %d tracks from %s", len(tracks), path)
    return tracks


# ---- Folder scan ----
def track_id_for_path(path: str) -> str:
    return hashlib.sha1(os.path.abspath(path).encode('utf-8')).hexdigest()[:16]


def track_from_path(path: str) -> Optional[Track]:
    try:
        audio = MutagenFile(path, easy=True)
    except Exception as e:
        logger.warning("Error processing %s: %s", path, e)
        return None
    if audio is None:
        logger.warning("Cannot parse file: %s", path)
        return None

    def tag(name: str, default: str = '') -> str:
        return (audio.get(name) or [default])[0] or default

    title = tag('title') or os.path.splitext(os.path.basename(path))[0]
    # easy tags keep the full date ("2004-06-07"); the year is enough here
    year = tag('date')[:4]
    length = float(audio.info.length) if audio.info else 0.0

    return Track(
        id=track_id_for_path(path),
        title=title,
        artist=tag('artist'),
        album=tag('album'),
        year=year,
        duration=format_clock(length),
        plays='0',
        file_path=path,
        cover='',
        artist_image='',
    )


def _sort_key(path: str):
    return os.path.dirname(path).lower(), os.path.basename(path).lower()


def scan_folder(folder: str) -> List[Track]:
    pattern = os.path.join(folder, "**", "*.*")
    paths = sorted(
        (p for p in glob.glob(pattern, recursive=True) if p.lower().endswith(AUDIO_EXTENSIONS)),
        key=_sort_key,
    )
    logger.info("Files count: %d", len(paths))

    # map() keeps the sorted order
    with ThreadPoolExecutor() as executor:
        tracks = [t for t in executor.map(track_from_path, paths) if t is not None]

    logger.info("Scanned %d tracks from %s", len(tracks), folder)
    return tracks
