import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parent.parent / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from core.models import Track


def make_track(track_id: str, duration: str = "3:00", **overrides) -> Track:
    fields = dict(
        id=track_id,
        title=f"Song {track_id}",
        artist="Nightwish",
        album="Once",
        year="2004",
        duration=duration,
        plays="100",
        file_path=f"/music/{track_id}.mp3",
        cover=f"{track_id}.jpg",
        artist_image="nightwish.jpg",
    )
    fields.update(overrides)
    return Track(**fields)


@pytest.fixture
def tracks():
    return [
        make_track("a", "4:28"),
        make_track("b", "4:06"),
        make_track("c", "4:36"),
    ]
