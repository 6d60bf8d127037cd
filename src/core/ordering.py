# core/ordering.py
from __future__ import annotations

from typing import Iterable

from core.models import Track

SORT_LEXICAL = "lexical"
SORT_NUMERIC = "numeric"
SORT_MODES = (SORT_LEXICAL, SORT_NUMERIC)

# A track without a number compares as this literal.
MISSING_TRACK_NUMBER = "0"


def lexical_key(track: Track) -> str:
    # Code-point order, not locale collation: "10" < "2", and "B" < "a".
    if track.track_number is None:
        return MISSING_TRACK_NUMBER
    return track.track_number


def _parse_track_number(raw: str) -> int | None:
    try:
        head = str(raw).split("/")[0].strip()
        return int(head)
    except ValueError:
        return None


def numeric_key(track: Track) -> tuple[int, int, str]:
    """
    Opt-in alternative to lexical_key(): "3/12" counts as 3, "10" after "2".
    Values without a leading integer go after all numbered tracks.
    """
    raw = lexical_key(track)
    n = _parse_track_number(raw)
    if n is None:
        return (1, 0, raw)
    return (0, n, raw)


def sort_tracks(tracks: Iterable[Track], mode: str = SORT_LEXICAL) -> tuple[Track, ...]:
    """Return a new, stably sorted tuple. The input is left untouched."""
    if mode == SORT_LEXICAL:
        key = lexical_key
    elif mode == SORT_NUMERIC:
        key = numeric_key
    else:
        raise ValueError(f"Unknown sort mode: {mode!r}")
    return tuple(sorted(tracks, key=key))
