# src/library/scan_library.py
from __future__ import annotations

import base64
import os
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from mutagen import File as MutagenFile
from mutagen.id3 import ID3, ID3NoHeaderError
from mutagen.flac import Picture
from mutagen.mp4 import MP4Cover
from mutagen._util import MutagenError

from core.models import Track, Visual

logger = logging.getLogger(__name__)

AUDIO_EXTS = {".mp3", ".m4a", ".flac", ".ogg", ".opus", ".wav"}

# ID3 frame -> Track field
ID3_TEXT_FRAMES = {
    "TIT2": "title",
    "TALB": "album",
    "TPE1": "artist",
    "TPE2": "group",
    "TRCK": "track_number",
}

# mutagen easy key -> Track field
EASY_KEYS = {
    "title": "title",
    "album": "album",
    "artist": "artist",
    "albumartist": "group",
    "tracknumber": "track_number",
}


def iter_audio_paths(directories: list[str]) -> list[str]:
    paths: list[str] = []
    for root in directories:
        if not root or not os.path.isdir(root):
            logger.warning("Skipping missing music folder: %s", root)
            continue
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            for fn in sorted(filenames):
                ext = os.path.splitext(fn)[1].lower()
                if ext in AUDIO_EXTS:
                    paths.append(os.path.join(dirpath, fn))
    return paths


def _first_text(value) -> str | None:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        value = value[0]
    s = str(value)
    return s or None


def _read_id3(path: str) -> Track:
    try:
        tags = ID3(path)
    except ID3NoHeaderError:
        return Track(path=path)
    return _track_from_id3(path, tags)


def _track_from_id3(path: str, tags: ID3) -> Track:
    fields: dict[str, Optional[str]] = {}
    for frame_id, name in ID3_TEXT_FRAMES.items():
        frame = tags.get(frame_id)
        if frame is not None:
            fields[name] = _first_text(frame.text)

    # Several APIC frames: the last one wins.
    visual = None
    for apic in tags.getall("APIC"):
        visual = Visual(media_type=apic.mime or "", data=bytes(apic.data))

    return Track(path=path, visual=visual, **fields)


def _cover_from_mutagen(audio) -> Visual | None:
    pictures = getattr(audio, "pictures", None)
    if pictures:
        pic = pictures[-1]
        return Visual(media_type=pic.mime or "", data=bytes(pic.data))

    tags = getattr(audio, "tags", None)
    if not tags:
        return None

    # MP4 cover atom
    covr = tags.get("covr") if hasattr(tags, "get") else None
    if covr:
        cover = covr[-1]
        mime = "image/png" if getattr(cover, "imageformat", None) == MP4Cover.FORMAT_PNG else "image/jpeg"
        return Visual(media_type=mime, data=bytes(cover))

    # Ogg stores FLAC picture blocks base64-encoded in a comment
    blocks = tags.get("metadata_block_picture") if hasattr(tags, "get") else None
    if blocks:
        try:
            pic = Picture(base64.b64decode(blocks[-1], validate=True))
        except (ValueError, MutagenError) as e:
            logger.warning("Ignoring unreadable cover picture: %s", e)
            return None
        return Visual(media_type=pic.mime or "", data=bytes(pic.data))

    return None


def _read_generic(path: str) -> Track | None:
    full = MutagenFile(path)
    if full is None:
        return None

    # WAV, AIFF and friends carry raw ID3 frames
    if isinstance(full.tags, ID3):
        return _track_from_id3(path, full.tags)

    easy = MutagenFile(path, easy=True)
    if easy is None:
        return None

    fields: dict[str, Optional[str]] = {}
    for key, name in EASY_KEYS.items():
        fields[name] = _first_text(easy.get(key)) if easy.tags is not None else None

    visual = _cover_from_mutagen(full)
    return Track(path=path, visual=visual, **fields)


def read_track(path: str) -> Track | None:
    """
    Read display metadata and embedded cover art from one audio file.
    Returns None when the file cannot be parsed.
    """
    try:
        if os.path.splitext(path)[1].lower() == ".mp3":
            return _read_id3(path)
        return _read_generic(path)
    except Exception as e:
        logger.exception("Failed to read tags from %s: %s", path, e)
        return None


def scan_tracks(directories: list[str]) -> list[Track]:
    paths = iter_audio_paths(directories)
    logger.info("Reading tags from %d files", len(paths))

    # map() keeps discovery order
    with ThreadPoolExecutor() as executor:
        tracks = [t for t in executor.map(read_track, paths) if t is not None]

    logger.info("Found %d tracks", len(tracks))
    return tracks
