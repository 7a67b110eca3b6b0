# core/models.py
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Mapping


class CatalogError(ValueError):
    """Raised when a catalog record or file cannot be turned into tracks."""


# catalog key -> Track field
_FIELD_ALIASES = {
    "filePath": "file_path",
    "artistImage": "artist_image",
}

_REQUIRED_FIELDS = (
    "id", "title", "artist", "album", "year", "duration",
    "plays", "file_path", "cover", "artist_image",
)
_IDENTITY_FIELDS = ("id", "file_path")


def _text(value: Any) -> str:
    # null metadata stays empty so summaries fall back to placeholders
    return "" if value is None else str(value)


@dataclass(frozen=True)
class Track:
    id: str
    title: str
    artist: str
    album: str
    year: str
    duration: str       # "m:ss"
    plays: str          # display only
    file_path: str
    cover: str
    artist_image: str
    favorite: bool = False

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> Track:
        values: dict[str, Any] = {}
        for key, value in data.items():
            values[_FIELD_ALIASES.get(key, key)] = value

        missing = [name for name in _REQUIRED_FIELDS if name not in values]
        # no identity or source without these, so null counts as missing
        missing += [name for name in _IDENTITY_FIELDS if name in values and values[name] is None]
        if missing:
            raise CatalogError(f"Track record is missing fields: {', '.join(missing)}")

        return Track(
            id=_text(values["id"]),
            title=_text(values["title"]),
            artist=_text(values["artist"]),
            album=_text(values["album"]),
            year=_text(values["year"]),
            duration=_text(values["duration"]),
            plays=_text(values["plays"]),
            file_path=_text(values["file_path"]),
            cover=_text(values["cover"]),
            artist_image=_text(values["artist_image"]),
            favorite=bool(values.get("favorite", False)),
        )

    def with_favorite(self, favorite: bool) -> Track:
        return replace(self, favorite=favorite)


@dataclass(frozen=True)
class PlaybackState:
    current_track: Track | None = None
    current_index: int = -1
    is_playing: bool = False
    progress: float = 0.0       # 0..1, display only
    current_time: float = 0.0   # seconds
    duration: float = 0.0       # seconds
    volume: float = 0.8
    playlist: tuple[Track, ...] = ()
    restart_token: int = 0      # bumped on select/next/previous/stop



@dataclass(frozen=True)
class AlbumSummary:
    name: str
    artist: str
    year: str
    song_count: str
    duration: str
    cover: str
    artist_image: str | None
    is_favorite: bool = False
