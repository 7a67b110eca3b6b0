# core/reducer.py
from __future__ import annotations

import logging
from dataclasses import replace

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
from .models import PlaybackState

logger = logging.getLogger(__name__)


def _update(state: PlaybackState, **changes) -> PlaybackState:
    # Same object back when nothing changes, so the store can skip notifying.
    if all(getattr(state, name) == value for name, value in changes.items()):
        return state
    return replace(state, **changes)


def _restart(state: PlaybackState, **changes) -> PlaybackState:
    # Always a new snapshot: re-selecting the current track still rewinds it.
    return replace(
        state,
        is_playing=True,
        progress=0.0,
        current_time=0.0,
        restart_token=state.restart_token + 1,
        **changes,
    )


def _select(state: PlaybackState, index: int) -> PlaybackState:
    return _restart(state, current_index=index, current_track=state.playlist[index])


def reduce(state: PlaybackState, command: Command) -> PlaybackState:
    """
    Pure transition function: returns the snapshot that follows `state` once
    `command` is applied. Never raises for odd input; unknown commands and
    navigation on an empty playlist leave the state as it is.
    """
    if isinstance(command, SetPlaylist):
        # current_track/current_index are intentionally left alone
        return _update(state, playlist=tuple(command.tracks))

    if isinstance(command, SetCurrentTrack):
        return _restart(state, current_track=command.track, current_index=command.index)

    if isinstance(command, Play):
        return _update(state, is_playing=True)

    if isinstance(command, Pause):
        return _update(state, is_playing=False)

    if isinstance(command, TogglePlay):
        return _update(state, is_playing=not state.is_playing)

    if isinstance(command, Stop):
        return replace(
            state,
            is_playing=False,
            progress=0.0,
            current_time=0.0,
            restart_token=state.restart_token + 1,
        )

    if isinstance(command, NextTrack):
        if not state.playlist:
            return state
        return _select(state, (state.current_index + 1) % len(state.playlist))

    if isinstance(command, PreviousTrack):
        if not state.playlist:
            return state
        # Both 0 and the "nothing selected" index -1 wrap to the last track.
        if state.current_index <= 0:
            index = len(state.playlist) - 1
        else:
            index = min(state.current_index, len(state.playlist)) - 1
        return _select(state, index)

    if isinstance(command, ToggleFavorite):
        current = state.current_track
        if current is None:
            return state
        playlist = tuple(
            t.with_favorite(not t.favorite) if t.id == current.id else t
            for t in state.playlist
        )
        return replace(
            state,
            current_track=current.with_favorite(not current.favorite),
            playlist=playlist,
        )

    if isinstance(command, SetVolume):
        return _update(state, volume=command.volume)

    if isinstance(command, SetProgress):
        return _update(state, progress=command.progress)

    if isinstance(command, SetCurrentTime):
        return _update(state, current_time=command.current_time)

    if isinstance(command, SetDuration):
        return _update(state, duration=command.duration)

    logger.warning("Ignoring unknown command: %r", command)
    return state
