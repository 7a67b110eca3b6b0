# core/album.py
from __future__ import annotations

from typing import Any, Mapping, Sequence

from .models import AlbumSummary
from .time_format import aggregate_duration

DEFAULT_COVER = "once.jpg"
DEFAULT_ARTIST_IMAGE = "nightwish.jpg"

UNKNOWN_ALBUM = "Álbum Desconocido"
UNKNOWN_ARTIST = "Artista Desconocido"
UNKNOWN_YEAR = "Año Desconocido"

# Shown before anything has been selected.
DEFAULT_ALBUM = AlbumSummary(
    name="Once",
    artist="Nightwish",
    year="2004",
    song_count="11 canciones",
    duration="1 hora",
    cover=DEFAULT_COVER,
    artist_image=DEFAULT_ARTIST_IMAGE,
    is_favorite=False,
)


# Track field -> catalog key, for plain mapping input
_CAMEL_KEYS = {"artist_image": "artistImage"}


def _field(track: Any, name: str) -> Any:
    if isinstance(track, Mapping):
        value = track.get(name)
        if value is None and name in _CAMEL_KEYS:
            value = track.get(_CAMEL_KEYS[name])
        return value
    return getattr(track, name, None)


def format_song_count(count: int) -> str:
    if count <= 0:
        return "0 canciones"
    return f"{count} {'canción' if count == 1 else 'canciones'}"


def derive_album_summary(current_track: Any, playlist: Sequence[Any] | None) -> AlbumSummary:
    """
    Builds the album header data for the active track.

    Falls back to DEFAULT_ALBUM when nothing is selected. Missing album/artist/year
    fields are replaced with placeholders; count and duration come from the whole
    playlist, not only from tracks sharing the current album.
    """
    if current_track is None:
        return DEFAULT_ALBUM

    playlist = playlist or ()

    return AlbumSummary(
        name=_field(current_track, "album") or UNKNOWN_ALBUM,
        artist=_field(current_track, "artist") or UNKNOWN_ARTIST,
        year=_field(current_track, "year") or UNKNOWN_YEAR,
        song_count=format_song_count(len(playlist)),
        duration=aggregate_duration(playlist),
        cover=_field(current_track, "cover") or DEFAULT_COVER,
        artist_image=_field(current_track, "artist_image") or None,
        is_favorite=bool(_field(current_track, "favorite")),
    )
