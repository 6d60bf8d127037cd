# core/models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Visual:
    media_type: str
    data: bytes


@dataclass(frozen=True)
class Track:
    path: str           # unique per session, opaque
    title: Optional[str] = None
    artist: Optional[str] = None
    group: Optional[str] = None
    album: Optional[str] = None
    track_number: Optional[str] = None  # kept as text ("3", "3/12", "A1")
    visual: Optional[Visual] = None

    @classmethod
    def from_wire(cls, record: Mapping[str, Any]) -> "Track":
        """
        Build a Track from a host record:
          {path, title, artist, group, album, trackNumber, visual: {mediaType, data} | null}
        A missing key is handled the same as an explicit null.
        """
        raw_visual = record.get("visual")
        visual = None
        if raw_visual is not None:
            visual = Visual(
                media_type=raw_visual.get("mediaType") or "",
                data=bytes(raw_visual.get("data") or b""),
            )

        return cls(
            path=str(record["path"]),
            title=record.get("title"),
            artist=record.get("artist"),
            group=record.get("group"),
            album=record.get("album"),
            track_number=record.get("trackNumber"),
            visual=visual,
        )

    def to_wire(self) -> dict[str, Any]:
        visual = None
        if self.visual is not None:
            visual = {"mediaType": self.visual.media_type, "data": list(self.visual.data)}
        return {
            "path": self.path,
            "title": self.title,
            "artist": self.artist,
            "group": self.group,
            "album": self.album,
            "trackNumber": self.track_number,
            "visual": visual,
        }
