# core/tracklist_models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from core.models import Track
from core.utils import to_data_uri

COVER_SIZE = 320


@dataclass(frozen=True)
class TrackListRow:
    key: str  # artist + title; two recordings of one song share it
    path: str
    title: str
    artist: str
    album: str
    track_number: str
    image_src: str  # data URI


def row_key(track: Track) -> str:
    return f"{track.artist or ''}{track.title or ''}"


def image_src(track: Track) -> str:
    # No artwork still yields a (blank) image source.
    if track.visual is None:
        return to_data_uri("", b"")
    return to_data_uri(track.visual.media_type, track.visual.data)


def render_rows(tracks: Optional[Iterable[Track]]) -> list[TrackListRow]:
    if tracks is None:
        return []
    return [
        TrackListRow(
            key=row_key(t),
            path=t.path,
            title=t.title or "",
            artist=t.artist or "",
            album=t.album or "",
            track_number=t.track_number or "",
            image_src=image_src(t),
        )
        for t in tracks
    ]
