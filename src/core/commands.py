# core/commands.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from .models import Track


@dataclass(frozen=True)
class SetPlaylist:
    tracks: tuple[Track, ...]


@dataclass(frozen=True)
class SetCurrentTrack:
    track: Track
    index: int


@dataclass(frozen=True)
class Play:
    pass


@dataclass(frozen=True)
class Pause:
    pass


@dataclass(frozen=True)
class TogglePlay:
    pass


@dataclass(frozen=True)
class Stop:
    pass


@dataclass(frozen=True)
class NextTrack:
    pass


@dataclass(frozen=True)
class PreviousTrack:
    pass


@dataclass(frozen=True)
class ToggleFavorite:
    pass


@dataclass(frozen=True)
class SetVolume:
    volume: float


@dataclass(frozen=True)
class SetProgress:
    progress: float


@dataclass(frozen=True)
class SetCurrentTime:
    current_time: float


@dataclass(frozen=True)
class SetDuration:
    duration: float


Command = Union[
    SetPlaylist, SetCurrentTrack, Play, Pause, TogglePlay, Stop,
    NextTrack, PreviousTrack, ToggleFavorite,
    SetVolume, SetProgress, SetCurrentTime, SetDuration,
]
